"""client/query.py — List-view state and the query parameters derived from it.

Three pieces of state drive every request:

    FilterState      category / featured / showPast / sort / dateRange
    DateRange        explicit start/end dates, used only in "custom" mode
    PaginationState  page / limit plus the server-reported total / pages

build_query_params() flattens them into the mapping sent to GET /events.
Named ranges such as "thisWeekend" are passed through untouched; the API
resolves them to dates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SORT_KEYS = ("startDate", "-startDate", "title", "-title")

DATE_RANGE_MODES = (
    "upcoming",
    "today",
    "tomorrow",
    "thisWeek",
    "thisWeekend",
    "nextWeek",
    "thisMonth",
    "custom",
)

DEFAULT_PAGE_SIZE = 10


@dataclass
class FilterState:
    category: str = ""
    featured: bool = False
    show_past: bool = False
    sort: str = "startDate"
    date_range: str = "upcoming"

    # form field name -> attribute
    WIRE_NAMES = {
        "category": "category",
        "featured": "featured",
        "showPast": "show_past",
        "sort": "sort",
        "dateRange": "date_range",
    }

    def __post_init__(self) -> None:
        if self.sort not in SORT_KEYS:
            raise ValueError(f"unknown sort key {self.sort!r}")
        if self.date_range not in DATE_RANGE_MODES:
            raise ValueError(f"unknown date range {self.date_range!r}")

    def to_params(self) -> dict[str, Any]:
        return {wire: getattr(self, attr) for wire, attr in self.WIRE_NAMES.items()}


@dataclass
class DateRange:
    """Custom range as entered: ISO date strings, "" when unset."""
    start_date: str = ""
    end_date: str = ""

    WIRE_NAMES = {"startDate": "start_date", "endDate": "end_date"}

    @property
    def is_complete(self) -> bool:
        return bool(self.start_date) and bool(self.end_date)


@dataclass
class PaginationState:
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    total: int = 0
    pages: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")


def build_query_params(
    filters: FilterState,
    date_range: DateRange,
    pagination: PaginationState,
) -> dict[str, Any]:
    """Flatten view state into GET /events query parameters.

    Always carries page, limit and every filter key. startDate/endDate are
    added only for a custom range with both dates filled in.
    """
    params: dict[str, Any] = {
        "page": pagination.page,
        "limit": pagination.limit,
        **filters.to_params(),
    }
    if filters.date_range == "custom" and date_range.is_complete:
        params["startDate"] = date_range.start_date
        params["endDate"] = date_range.end_date
    return params
