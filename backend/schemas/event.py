"""schemas/event.py — Event response schemas.

DB source: events — see db/models.py. Field names are camelCase on the wire
(startDate, shortDescription, ticketInfo, ...) to match what the web
frontend already consumes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from schemas.shared import CamelModel, PaginationMeta


class Address(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Location(CamelModel):
    """Where an event happens; `type` selects which other fields matter.

    venue       -> venue_name
    attraction  -> attraction_id
    coordinates -> coordinates (GeoJSON point)
    online      -> nothing else
    """
    type: Optional[str] = None
    venue_name: Optional[str] = None
    attraction_id: Optional[str] = None
    coordinates: Optional[dict[str, Any]] = None
    address: Optional[Address] = None


class EventImage(CamelModel):
    url: str
    caption: Optional[str] = None
    is_main: bool = False


class TicketInfo(CamelModel):
    is_free: bool = False
    price: Optional[float] = None
    currency: str = "USD"
    ticket_url: Optional[str] = None
    available_tickets: Optional[int] = None
    registration_required: bool = False


class EventResponse(CamelModel):
    """Listing card fields."""
    id: str
    title: str
    short_description: str = ""
    category: str
    start_date: datetime
    end_date: datetime
    all_day: bool = False
    featured: bool = False
    location: Optional[Location] = None
    images: list[EventImage] = []
    ticket_info: Optional[TicketInfo] = None

    @field_validator("images", mode="before")
    @classmethod
    def _null_images(cls, v):
        return v or []


class EventDetailResponse(EventResponse):
    """Single event detail — adds the long-form fields."""
    slug: str
    description: str = ""
    tags: list[str] = []

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, v):
        return v or []


class EventListResponse(BaseModel):
    model_config = ConfigDict(from_attributes=False)

    events: list[EventResponse]
    pagination: PaginationMeta
