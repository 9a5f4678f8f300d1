"""
Result container and convenience wrapper for alphabar pagination.

AlphaPage pairs the records of the effective group with the resolved
paginator, so web handlers can return both the items and the data needed
to render navigation.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from .config import AlphabarConfig
from .groups import Group
from .paginator import BucketPaginator

if TYPE_CHECKING:
    from .sources import RecordSource

T = TypeVar("T")


@dataclass
class AlphaPage(Generic[T]):
    """
    Represents the records of one alphabar group.

    Attributes:
        items: Records matching the effective group (every record when bypassed)
        paginator: The resolved BucketPaginator
    """

    items: list[T]
    paginator: BucketPaginator

    @property
    def group(self) -> Group | None:
        return self.paginator.effective_group

    @property
    def count(self) -> int:
        """Number of records in this page."""
        return len(self.items)

    @property
    def total(self) -> int:
        """Number of records across all groups."""
        return self.paginator.total_count()

    @property
    def bypassed(self) -> bool:
        return self.paginator.bypassed

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def alpha_scope(
    source: "RecordSource[T]",
    field: str,
    group: Group | str | None = None,
    *,
    config: AlphabarConfig | None = None,
    configure: Callable[[BucketPaginator], None] | None = None,
) -> AlphaPage[T]:
    """
    Builds a BucketPaginator, lets the caller adjust it, and resolves it.

    Args:
        source: Record source to paginate
        field: Attribute used to divide records into groups
        group: Requested group, typically straight from a query parameter
        config: Application defaults (min_records, all_option)
        configure: Optional callback receiving the paginator before resolution

    Returns:
        AlphaPage with the records and the resolved paginator

    Usage:
        page = alpha_scope(source, "last_name", request.args.get("ltr"), config=settings)
        page = alpha_scope(source, "last_name", configure=lambda p: setattr(p, "all_option", True))
    """
    paginator = BucketPaginator(field=field, group=group, config=config)
    if configure is not None:
        configure(paginator)
    return paginator.resolve(source)
