"""
The closed key space of alphabar groups.

A group is one of the letters A-Z, "Blank" (records whose field is empty or
null) or "All" (the unfiltered set). Raw strings only become groups through
Group.parse (caller input) or Group.from_bucket_key (backend count keys).
"""

from enum import Enum
from typing import Any


class Group(str, Enum):
    """
    A bucket key.

    Member names equal their values so members hash and compare
    like their plain string keys ("A", "Blank", "All").
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    Blank = "Blank"
    All = "All"

    def __str__(self) -> str:
        return self.value

    @property
    def is_letter(self) -> bool:
        return len(self.value) == 1

    @classmethod
    def parse(cls, value: Any) -> "Group | None":
        """
        Normalizes a caller-supplied group.

        Single letters are accepted in either case. The sentinels are
        case-sensitive: only "Blank" and "All" are recognized.
        Anything else returns None.
        """
        if isinstance(value, Group):
            return value
        if not isinstance(value, str):
            return None
        if value in (cls.Blank.value, cls.All.value):
            return cls(value)
        return _letter(value)

    @classmethod
    def from_bucket_key(cls, raw: Any) -> "Group | None":
        """
        Canonicalizes a key returned by a GroupCounter.

        None and "" become Blank; a letter becomes its upper-case group.
        Non-letter characters (digits, punctuation) return None.
        """
        if raw is None or raw == "":
            return cls.Blank
        if not isinstance(raw, str):
            raw = str(raw)
        return _letter(raw)


def _letter(value: str) -> Group | None:
    # ASCII only, matching what DynamoDB begins_with can select
    if len(value) != 1 or not value.isascii():
        return None
    upper = value.upper()
    if "A" <= upper <= "Z":
        return Group(upper)
    return None


LETTERS: tuple[Group, ...] = tuple(g for g in Group if g.is_letter)

# Fallback order when no valid group was requested; All is appended only
# when the paginator offers it.
SCAN_ORDER: tuple[Group, ...] = LETTERS + (Group.Blank,)


def first_char_key(value: Any) -> str:
    """
    Grouping key used by record sources: the first character, lower-cased
    when it is ASCII, or "" for empty and null values.

    Non-ASCII characters are returned unchanged so that look-alikes such as
    the Kelvin sign never fold into a letter group.
    """
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    first = text[:1]
    return first.lower() if first.isascii() else first


def group_of(value: Any) -> Group | None:
    """The group a field value is counted under; None for non-letters."""
    return Group.from_bucket_key(first_char_key(value))
