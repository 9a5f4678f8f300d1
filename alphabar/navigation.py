"""
Navigation for a resolved paginator.

build_navigation turns a PaginatorView into a list of NavLink slots;
render_alphabar turns those slots into a small HTML fragment:

    <div class="alphabar"><a href="?ltr=A" class="current">A</a> B <a href="?ltr=C">C</a> ...</div>

Letters without records are shown unlinked. Blank and All are appended only
when they have records. Nothing is rendered when the collection is below
min_records or when fewer than two groups have records.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from html import escape
from typing import Any, Protocol
from urllib.parse import urlencode

from .groups import LETTERS, Group


class PaginatorView(Protocol):
    """Read-only view of a resolved paginator (BucketPaginator satisfies it)."""

    min_records: int | None

    @property
    def effective_group(self) -> Group | None: ...

    def count_of(self, group: Group | str) -> int: ...

    def populated_groups(self) -> set[Group]: ...

    def total_count(self) -> int: ...


@dataclass(frozen=True)
class NavLink:
    label: str
    group: Group
    count: int
    current: bool

    @property
    def linked(self) -> bool:
        return self.count > 0


def build_navigation(view: PaginatorView) -> list[NavLink]:
    """
    Returns one slot per letter, plus Blank and All when they have records.

    Returns an empty list when the navigation should be suppressed.
    """
    if view.min_records is not None and view.total_count() < view.min_records:
        return []
    if len(view.populated_groups()) < 2:
        return []

    slots = list(LETTERS)
    if view.count_of(Group.Blank) > 0:
        slots.append(Group.Blank)
    if view.count_of(Group.All) > 0:
        slots.append(Group.All)

    current = view.effective_group
    return [
        NavLink(label=group.value, group=group, count=view.count_of(group), current=group is current)
        for group in slots
    ]


def render_alphabar(
    view: PaginatorView,
    params: Mapping[str, Any] | None = None,
    *,
    letter_param: str = "ltr",
    base_url: str = "",
) -> str:
    """
    Renders the navigation as an HTML fragment.

    Args:
        view: A resolved paginator
        params: Current query parameters, preserved on every link
        letter_param: Name of the parameter carrying the selected group
        base_url: Path prefixed to each link's query string

    Returns:
        The HTML fragment, or "" when the navigation is suppressed
    """
    links = build_navigation(view)
    if not links:
        return ""

    base_params = {k: v for k, v in (params or {}).items() if k != letter_param}
    parts = []
    for link in links:
        label = escape(link.label)
        if not link.linked:
            parts.append(label)
            continue
        query = urlencode({**base_params, letter_param: link.group.value}, doseq=True)
        href = escape(f"{base_url}?{query}", quote=True)
        css = ' class="current"' if link.current else ""
        parts.append(f'<a href="{href}"{css}>{label}</a>')

    return '<div class="alphabar">' + " ".join(parts) + "</div>"
