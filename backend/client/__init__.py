"""List-view side of the events API: state, query building, formatting, HTTP client."""

from client.api import EventsApiClient, EventsApiError
from client.event_list import EventListView, EventPage, ViewState, normalize_response
from client.pagination import ELLIPSIS, PageControls, page_window, pagination_controls
from client.query import DateRange, FilterState, PaginationState, build_query_params

__all__ = [
    "EventsApiClient", "EventsApiError",
    "EventListView", "EventPage", "ViewState", "normalize_response",
    "ELLIPSIS", "PageControls", "page_window", "pagination_controls",
    "DateRange", "FilterState", "PaginationState", "build_query_params",
]
