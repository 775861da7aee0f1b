from schemas.shared import CamelModel, PaginationMeta
from schemas.event import (
    Address,
    Location,
    EventImage,
    TicketInfo,
    EventResponse,
    EventDetailResponse,
    EventListResponse,
)

__all__ = [
    "CamelModel", "PaginationMeta",
    "Address", "Location", "EventImage", "TicketInfo",
    "EventResponse", "EventDetailResponse", "EventListResponse",
]
