"""client/pagination.py — Which page buttons to show.

Policy: always page 1 and the last page, plus the current page and its
immediate neighbours; every gap between shown pages becomes one ELLIPSIS.
Nothing is shown at all when there is only one page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

ELLIPSIS = "..."

PageItem = Union[int, str]


def effective_pages(pages: int | None) -> int:
    """Server page counts of 0 (empty result) or missing read as 1."""
    return max(1, pages or 0)


def page_window(page: int, pages: int) -> list[PageItem]:
    """Page numbers to render, with ELLIPSIS markers for collapsed gaps.

    >>> page_window(5, 10)
    [1, '...', 4, 5, 6, '...', 10]
    """
    pages = effective_pages(pages)
    shown = {1, pages}
    shown.update(p for p in (page - 1, page, page + 1) if 1 <= p <= pages)

    items: list[PageItem] = []
    previous = 0
    for p in sorted(shown):
        if previous and p > previous + 1:
            items.append(ELLIPSIS)
        items.append(p)
        previous = p
    return items


@dataclass(frozen=True)
class PageControls:
    current: int
    items: list[PageItem]
    prev_disabled: bool
    next_disabled: bool


def pagination_controls(page: int, pages: int | None) -> PageControls | None:
    """Controls for the pager, or None when it should not be rendered."""
    pages = effective_pages(pages)
    if pages <= 1:
        return None
    return PageControls(
        current=page,
        items=page_window(page, pages),
        prev_disabled=page <= 1,
        next_disabled=page >= pages,
    )
