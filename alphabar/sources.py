"""
Record source capabilities consumed by BucketPaginator.

A source answers three questions:
- has_field(field): is this a real, queryable attribute?
- count_by_first_char(field): how many records per lower-cased first character?
  Empty and null values share the single blank key "".
- filter(predicate): which records match? None means every record.

InMemorySource implements them over a Python sequence; see alphabar.dynamo
for the DynamoDB-backed source.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from ._logging import logger
from .groups import first_char_key
from .predicates import Predicate

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class GroupCounter(Protocol):
    def count_by_first_char(self, field: str) -> Mapping[str | None, int]: ...


@runtime_checkable
class RecordFilter(Protocol[T_co]):
    def filter(self, predicate: Predicate | None) -> Sequence[T_co]: ...


@runtime_checkable
class RecordSource(GroupCounter, RecordFilter[T_co], Protocol[T_co]):
    def has_field(self, field: str) -> bool: ...


def get_value(record: Any, field: str) -> Any:
    """Reads a field from a dict or an object; missing values read as None."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class InMemorySource(Generic[T]):
    """
    A record source over an in-memory sequence of dicts, pydantic models
    or plain objects.

    Known fields come from, in order of precedence:
    1. the explicit `fields` argument
    2. `model.model_fields` when a pydantic model class is given
    3. the records themselves (dict keys, model fields or instance attributes)

    Usage:
        source = InMemorySource(people, model=Person)
        page = BucketPaginator("last_name", "S").resolve(source)
    """

    def __init__(
        self,
        records: Iterable[T],
        *,
        model: type[BaseModel] | None = None,
        fields: Iterable[str] | None = None,
    ) -> None:
        self.records: list[T] = list(records)
        self.model = model
        self._fields = frozenset(fields) if fields is not None else None

    @property
    def fields(self) -> frozenset[str]:
        if self._fields is not None:
            return self._fields
        if self.model is not None:
            return frozenset(self.model.model_fields)
        return frozenset(_infer_fields(self.records))

    def has_field(self, field: str) -> bool:
        return field in self.fields

    def count_by_first_char(self, field: str) -> dict[str | None, int]:
        counts = Counter(first_char_key(get_value(record, field)) for record in self.records)
        logger.debug(
            "Counted records by first character",
            extra={"field": field, "records": len(self.records), "buckets": len(counts)},
        )
        return dict(counts)

    def filter(self, predicate: Predicate | None) -> list[T]:
        if predicate is None:
            return list(self.records)
        return [r for r in self.records if predicate.matches(get_value(r, predicate.field))]

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return f"InMemorySource(records={len(self.records)})"


def _infer_fields(records: Iterable[Any]) -> set[str]:
    fields: set[str] = set()
    for record in records:
        if isinstance(record, Mapping):
            fields.update(str(k) for k in record.keys())
        elif isinstance(record, BaseModel):
            fields.update(type(record).model_fields)
        elif hasattr(record, "__dict__"):
            fields.update(k for k in vars(record) if not k.startswith("_"))
    return fields
