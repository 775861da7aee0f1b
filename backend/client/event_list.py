"""client/event_list.py — State and fetch orchestration for the events list.

EventListView owns the filter, custom-date and pagination state of one list
screen, reloads from the API whenever any of them changes, and exposes what
a front end needs to draw: the events, loading/error flags, which panel to
show, and the pager controls.

Usage:
    from client.api import EventsApiClient
    from client.event_list import EventListView

    view = EventListView(EventsApiClient().get_events)   # loads page 1
    view.handle_filter_change("category", "concert")     # back to page 1, reloads
    view.next_page()

Requests are tagged with an increasing sequence number. A response or
failure for anything but the latest request is dropped, so a slow early
request can never overwrite the results of a later one.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Protocol

from client.pagination import PageControls, effective_pages, pagination_controls
from client.query import (
    DEFAULT_PAGE_SIZE,
    DateRange,
    FilterState,
    PaginationState,
    build_query_params,
)

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load events. Please try again."

_BOOLEAN_FILTERS = {"featured", "show_past"}


class EventFetcher(Protocol):
    """Fetch one page of events for the given query parameters.

    Any exception it raises is reported as a load failure.
    """

    def __call__(self, params: dict[str, Any]) -> Any: ...


@dataclass(frozen=True)
class EventPage:
    events: list[dict[str, Any]]
    total: int
    pages: int


def normalize_response(payload: Any) -> EventPage:
    """Read an API payload, defaulting whatever is missing.

    Missing events -> [], missing pagination -> total 0 / pages 1.
    """
    body: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}

    events = body.get("events")
    if not isinstance(events, list):
        events = []

    meta = body.get("pagination")
    if not isinstance(meta, Mapping):
        meta = {}

    return EventPage(
        events=[e for e in events if isinstance(e, Mapping)],
        total=_as_int(meta.get("total"), 0),
        pages=effective_pages(_as_int(meta.get("pages"), 1)),
    )


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class PendingRequest:
    seq: int
    params: dict[str, Any]


class ViewState(str, Enum):
    LOADING = "loading"   # first load, nothing to show yet
    ERROR = "error"       # failed with nothing loaded: offer retry
    EMPTY = "empty"       # loaded, no matches: offer clear filters
    LIST = "list"


class EventListView:
    def __init__(
        self,
        fetch_events: EventFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        autoload: bool = True,
    ) -> None:
        self._fetch_events = fetch_events
        self._page_size = page_size
        self._latest_seq = 0
        self._mount()
        if autoload:
            self.load()

    def _mount(self) -> None:
        self.events: list[dict[str, Any]] = []
        self.loading = True
        self.error: Optional[str] = None
        self.filters = FilterState()
        self.date_range = DateRange()
        self.pagination = PaginationState(limit=self._page_size)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def query_params(self) -> dict[str, Any]:
        return build_query_params(self.filters, self.date_range, self.pagination)

    @property
    def state(self) -> ViewState:
        if self.loading and not self.events:
            return ViewState.LOADING
        if self.error and not self.events:
            return ViewState.ERROR
        if not self.events:
            return ViewState.EMPTY
        return ViewState.LIST

    @property
    def page_controls(self) -> Optional[PageControls]:
        return pagination_controls(self.pagination.page, self.pagination.pages)

    @property
    def summary(self) -> str:
        return f"Showing {len(self.events)} of {self.pagination.total} events"

    @property
    def show_custom_dates(self) -> bool:
        return self.filters.date_range == "custom"

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def begin_request(self) -> PendingRequest:
        self._latest_seq += 1
        self.loading = True
        return PendingRequest(seq=self._latest_seq, params=self.query_params)

    def is_current(self, request: PendingRequest) -> bool:
        return request.seq == self._latest_seq

    def apply_response(self, request: PendingRequest, payload: Any) -> bool:
        """Store a successful response. Returns False if it was stale."""
        if not self.is_current(request):
            logger.debug(
                "discarding stale events response",
                extra={"seq": request.seq, "latest_seq": self._latest_seq},
            )
            return False

        page = normalize_response(payload)
        self.events = page.events
        self.pagination = dataclasses.replace(self.pagination, total=page.total, pages=page.pages)
        self.error = None
        self.loading = False
        return True

    def apply_failure(self, request: PendingRequest, exc: Exception) -> bool:
        """Record a failed request, keeping whatever was loaded before."""
        if not self.is_current(request):
            logger.debug(
                "discarding stale events failure",
                extra={"seq": request.seq, "latest_seq": self._latest_seq},
            )
            return False

        logger.error(
            "error fetching events",
            extra={"seq": request.seq, "params": request.params, "error": str(exc)},
        )
        self.error = LOAD_ERROR
        self.loading = False
        return True

    def load(self) -> None:
        """Fetch the page described by the current state."""
        request = self.begin_request()
        try:
            payload = self._fetch_events(dict(request.params))
        except Exception as exc:  # any fetcher failure ends the load
            self.apply_failure(request, exc)
            return
        self.apply_response(request, payload)

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def handle_filter_change(self, name: str, value: Any) -> None:
        """Apply one filter control change (by form field name) and reload page 1.

        Raises:
            ValueError: unknown field, sort key or date range.
        """
        attr = FilterState.WIRE_NAMES.get(name)
        if attr is None:
            raise ValueError(f"unknown filter {name!r}")
        if attr in _BOOLEAN_FILTERS:
            value = bool(value)
        self.filters = dataclasses.replace(self.filters, **{attr: value})
        self._first_page_and_reload()

    def handle_date_range_change(self, name: str, value: str) -> None:
        """Set startDate or endDate of the custom range and reload page 1."""
        attr = DateRange.WIRE_NAMES.get(name)
        if attr is None:
            raise ValueError(f"unknown date field {name!r}")
        self.date_range = dataclasses.replace(self.date_range, **{attr: value or ""})
        self._first_page_and_reload()

    def clear_filters(self) -> None:
        """Restore default filters, drop custom dates, reload page 1."""
        self.filters = FilterState()
        self.date_range = DateRange()
        self._first_page_and_reload()

    def handle_page_change(self, page: int) -> None:
        if page < 1:
            raise ValueError("page must be >= 1")
        self.pagination = dataclasses.replace(self.pagination, page=page)
        self.load()

    def previous_page(self) -> bool:
        """Go back one page unless the control is disabled. Returns True if it moved."""
        controls = self.page_controls
        if controls is None or controls.prev_disabled:
            return False
        self.handle_page_change(self.pagination.page - 1)
        return True

    def next_page(self) -> bool:
        """Go forward one page unless the control is disabled. Returns True if it moved."""
        controls = self.page_controls
        if controls is None or controls.next_disabled:
            return False
        self.handle_page_change(self.pagination.page + 1)
        return True

    def set_page_size(self, limit: int) -> None:
        self.pagination = dataclasses.replace(self.pagination, limit=limit)
        self._first_page_and_reload()

    def retry(self) -> None:
        """Start over as if the screen was opened fresh, then reload."""
        self._mount()
        self.load()

    def _first_page_and_reload(self) -> None:
        self.pagination = dataclasses.replace(self.pagination, page=1)
        self.load()
