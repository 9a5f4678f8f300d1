"""
Alphabetical bucketed pagination.

BucketPaginator is like a standard paginator, but instead of splitting
records into pages of a fixed size it splits them by the first letter of a
text field. It keeps track of the configuration and derived state (counts per
group, total, the effective group) and hands the source a single predicate.

Usage:
    paginator = BucketPaginator(field="last_name", group=request.args.get("ltr"))
    page = paginator.resolve(source)
    page.items             # records in the effective group
    paginator.count_of("B")

See alphabar.pagination.alpha_scope for the common one-call case.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from ._logging import logger, redact_value
from .config import AlphabarConfig
from .exceptions import InvalidFieldError
from .groups import SCAN_ORDER, Group
from .predicates import Predicate, predicate_for

if TYPE_CHECKING:
    from .pagination import AlphaPage
    from .sources import RecordSource

T = TypeVar("T")

# The fallback group when no group has any records
DEFAULT_GROUP = Group.A


def _loggable_group(value: Any) -> str:
    """Valid groups are logged as is; anything unparsable is redacted."""
    group = Group.parse(value)
    return group.value if group is not None else redact_value(value)


class BucketPaginator:
    """
    Splits records into groups A-Z, Blank and (optionally) All.

    Configuration (set before resolve):
        field: Attribute used to divide records into groups
        group: Requested group; invalid or empty groups are silently replaced
        all_option: Offer an "All" group covering every record
        min_records: Below this many records no filtering is applied

    Derived state (valid only AFTER resolve):
        counts, effective_group, total_count(), populated_groups(), predicate

    Instances are per-request and not meant to be shared across threads.
    """

    def __init__(
        self,
        field: str | None = None,
        group: Group | str | None = None,
        config: AlphabarConfig | None = None,
    ) -> None:
        self.field = field
        self.group = group
        # No config means built-in defaults; the environment is never read here
        self.all_option = config.all_option if config is not None else False
        self.min_records = config.min_records if config is not None else None

        self._counts: dict[Group, int] = {}
        self._unbucketed = 0
        self._total: int | None = None
        self._effective_group: Group | None = None
        self._predicate: Predicate | None = None
        self._bypassed = False
        self._resolved = False

    # --- RESOLUTION ---

    def resolve(self, source: "RecordSource[T]") -> "AlphaPage[T]":
        """
        Counts the source by first letter, picks the effective group and
        fetches its records.

        Makes exactly two source calls: count_by_first_char, then filter.
        Source errors propagate unchanged and leave the paginator untouched.

        Args:
            source: A RecordSource (e.g. InMemorySource or DynamoSource)

        Returns:
            AlphaPage holding the matching records and this paginator

        Raises:
            InvalidFieldError: If field is unset or unknown to the source
        """
        from .pagination import AlphaPage

        field = self.field
        if not field or not source.has_field(field):
            raise InvalidFieldError(field, source=type(source).__name__)

        logger.debug(
            "Resolving alphabar",
            extra={
                "field": field,
                "requested_group": _loggable_group(self.group),
                "all_option": self.all_option,
                "min_records": self.min_records,
            },
        )

        counts, unbucketed = self._tally(source.count_by_first_char(field))
        total = sum(counts.values()) + unbucketed
        if self.all_option:
            counts[Group.All] = total

        requested = Group.parse(self.group)
        if requested not in counts:
            if self.group is not None:
                logger.info(
                    "Requested group has no records; falling back",
                    extra={"field": field, "requested_group": _loggable_group(self.group)},
                )
            requested = None

        effective = requested or self._first_populated(counts)

        bypassed = (self.min_records is not None and total < self.min_records) or (
            effective is Group.All
        )
        predicate = None if bypassed else predicate_for(field, effective)

        items = source.filter(predicate)

        self._counts = counts
        self._unbucketed = unbucketed
        self._total = None
        self.group = effective
        self._effective_group = effective
        self._predicate = predicate
        self._bypassed = bypassed
        self._resolved = True

        logger.info(
            "Alphabar resolved",
            extra={
                "field": field,
                "group": effective.value,
                "total": self.total_count(),
                "populated": len(counts),
                "bypassed": bypassed,
            },
        )

        return AlphaPage(items=list(items), paginator=self)

    def _tally(self, raw_counts: Any) -> tuple[dict[Group, int], int]:
        """
        Canonicalizes raw count keys, summing keys that collapse together
        (e.g. "" and None both become Blank).
        """
        counts: dict[Group, int] = {}
        unbucketed = 0
        for raw_key, count in dict(raw_counts).items():
            count = int(count)
            if count <= 0:
                continue
            group = Group.from_bucket_key(raw_key)
            if group is None:
                unbucketed += count
            else:
                counts[group] = counts.get(group, 0) + count
        return counts, unbucketed

    def _first_populated(self, counts: dict[Group, int]) -> Group:
        candidates = SCAN_ORDER + ((Group.All,) if self.all_option else ())
        for group in candidates:
            if group in counts:
                return group
        return DEFAULT_GROUP

    # --- ACCESSORS (only valid AFTER resolve) ---

    @property
    def counts(self) -> dict[Group, int]:
        return dict(self._counts)

    @property
    def effective_group(self) -> Group | None:
        return self._effective_group

    @property
    def predicate(self) -> Predicate | None:
        """The predicate applied by the last resolve (None when bypassed)."""
        return self._predicate

    @property
    def bypassed(self) -> bool:
        return self._bypassed

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def unbucketed_count(self) -> int:
        """Records whose field starts with a non-letter (digits, punctuation)."""
        return self._unbucketed

    def count_of(self, group: Group | str) -> int:
        """Number of records in a group; 0 for unknown groups or before resolve."""
        key = Group.parse(group)
        if key is None:
            return 0
        return self._counts.get(key, 0)

    def total_count(self) -> int:
        """
        Total records found in all groups. Never includes the All bucket,
        which is itself a copy of this total.
        """
        if self._total is None:
            self._total = (
                sum(count for group, count in self._counts.items() if group is not Group.All)
                + self._unbucketed
            )
        return self._total

    def populated_groups(self) -> set[Group]:
        return set(self._counts)

    def __repr__(self) -> str:
        return (
            f"BucketPaginator(field={self.field!r}, group={self.group!r}, "
            f"effective_group={self._effective_group!r}, resolved={self._resolved})"
        )
