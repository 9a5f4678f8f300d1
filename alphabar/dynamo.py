"""
DynamoDB-backed record source.

DynamoDB has no GROUP BY, so counting is a paginated Scan projecting only
the bucketing attribute and tallying first characters client-side. Filtering
is a paginated Scan with a FilterExpression compiled from the predicate.
Items are hydrated into the configured pydantic model.

Usage:
    source = DynamoSource(Person, table_name="people")
    page = BucketPaginator("last_name", "S").resolve(source)
"""

from collections import Counter
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, ClassVar, Generic, TypeVar

import boto3
from pydantic import BaseModel

from ._logging import logger
from .exceptions import handle_dynamo_errors
from .groups import first_char_key
from .predicates import Predicate, compile_predicate
from .serializer import DynamoSerializer

M = TypeVar("M", bound=BaseModel)


class DynamoSource(Generic[M]):
    """
    A RecordSource over a DynamoDB table (or GSI) whose items validate
    as `model`.

    Client resolution order:
    1. the client passed to the constructor
    2. a context-scoped client (DynamoSource.using_client)
    3. the global default (DynamoSource.set_client, else boto3.client("dynamodb"))
    """

    _serializer: ClassVar[DynamoSerializer] = DynamoSerializer()
    _client: ClassVar[Any | None] = None
    _client_context: ClassVar[ContextVar[Any | None]] = ContextVar(
        "alphabar_dynamo_client", default=None
    )

    def __init__(
        self,
        model: type[M],
        table_name: str,
        *,
        client: Any | None = None,
        index_name: str | None = None,
        region: str | None = None,
    ) -> None:
        self.model = model
        self.table_name = table_name
        self.index_name = index_name
        self.region = region
        self._own_client = client

    # --- CLIENT MANAGEMENT ---

    def _get_client(self) -> Any:
        """
        Returns a Boto3 DynamoDB Client.

        Returns:
            Boto3 DynamoDB Client instance.
        """
        if self._own_client is not None:
            return self._own_client

        # Thread-safe/Async-safe override
        ctx_client = self._client_context.get()
        if ctx_client is not None:
            return ctx_client

        if DynamoSource._client is None:
            if self.region:
                DynamoSource._client = boto3.client("dynamodb", region_name=self.region)
            else:
                DynamoSource._client = boto3.client("dynamodb")
        return DynamoSource._client

    @classmethod
    @contextmanager
    def using_client(cls, client: Any) -> Generator[None, None, None]:
        """
        Context manager to properly scope a client to a block of code.
        Thread-safe and Async-safe using contextvars.

        Usage:
            with DynamoSource.using_client(my_client):
                alpha_scope(source, "last_name")
        """
        token = cls._client_context.set(client)
        try:
            yield
        finally:
            cls._client_context.reset(token)

    @classmethod
    def set_client(cls, client: Any) -> None:
        """
        Sets the global default client.
        Useful for testing or advanced configurations.
        """
        DynamoSource._client = client

    # --- RECORD SOURCE ---

    def has_field(self, field: str) -> bool:
        return field in self.model.model_fields

    def _scan_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"TableName": self.table_name}
        if self.index_name:
            kwargs["IndexName"] = self.index_name
        return kwargs

    def _scan(self, kwargs: dict[str, Any], operation: str) -> Iterator[dict[str, Any]]:
        """
        Runs a paginated Scan, yielding deserialized items.
        Uses a Paginator to automatically handle 'LastEvaluatedKey'.
        """
        logger.info(
            "Starting scan iteration",
            extra={
                "table": self.table_name,
                "index": self.index_name,
                "has_filter": "FilterExpression" in kwargs,
                "operation": operation,
            },
        )

        with handle_dynamo_errors(table_name=self.table_name):
            paginator = self._get_client().get_paginator("scan")
            for page_number, page in enumerate(paginator.paginate(**kwargs), start=1):
                items = page.get("Items", [])
                logger.debug(
                    "Scan page received",
                    extra={
                        "table": self.table_name,
                        "page": page_number,
                        "items": len(items),
                        "operation": operation,
                    },
                )
                for item in items:
                    yield self._serializer.from_dynamo(item)

    def count_by_first_char(self, field: str) -> dict[str | None, int]:
        kwargs = self._scan_kwargs()
        # Placeholder avoids collisions with reserved words like "name"
        kwargs["ProjectionExpression"] = "#f"
        kwargs["ExpressionAttributeNames"] = {"#f": field}

        counts = Counter(
            first_char_key(raw.get(field)) for raw in self._scan(kwargs, operation="count")
        )
        return dict(counts)

    def filter(self, predicate: Predicate | None) -> list[M]:
        kwargs = self._scan_kwargs()
        if predicate is not None:
            kwargs.update(compile_predicate(predicate, self._serializer))

        return [self.model.model_validate(raw) for raw in self._scan(kwargs, operation="filter")]

    def __repr__(self) -> str:
        return f"DynamoSource(model={self.model.__name__}, table_name={self.table_name!r})"
