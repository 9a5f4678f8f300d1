from .config import AlphabarConfig
from .dynamo import DynamoSource
from .exceptions import (
    AlphabarError,
    ConfigurationError,
    DynamoSerializationError,
    InvalidFieldError,
    ProvisionedThroughputExceededError,
    RequestTimeoutError,
    TableNotFoundError,
    ValidationError,
)
from .groups import LETTERS, SCAN_ORDER, Group
from .navigation import NavLink, PaginatorView, build_navigation, render_alphabar
from .pagination import AlphaPage, alpha_scope
from .paginator import BucketPaginator
from .predicates import BlankOrNull, Predicate, StartsWith
from .sources import GroupCounter, InMemorySource, RecordFilter, RecordSource

__all__ = [
    "BucketPaginator",
    "AlphaPage",
    "alpha_scope",
    "AlphabarConfig",
    # Groups
    "Group",
    "LETTERS",
    "SCAN_ORDER",
    # Predicates
    "StartsWith",
    "BlankOrNull",
    "Predicate",  # Type alias for type hints
    # Sources
    "GroupCounter",
    "RecordFilter",
    "RecordSource",
    "InMemorySource",
    "DynamoSource",
    # Navigation
    "PaginatorView",
    "NavLink",
    "build_navigation",
    "render_alphabar",
    # Exceptions
    "AlphabarError",
    "InvalidFieldError",
    "ConfigurationError",
    "TableNotFoundError",
    "ProvisionedThroughputExceededError",
    "RequestTimeoutError",
    "ValidationError",
    "DynamoSerializationError",
]
