"""client/formatters.py — Display strings for event cards.

All functions take the JSON shapes returned by the events API (camelCase
dicts) and never raise on missing or partial data.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

CATEGORY_LABELS = {
    "conference": "Conference",
    "exhibition": "Exhibition",
    "concert": "Concert",
    "festival": "Festival",
    "sport": "Sport",
    "workshop": "Workshop",
    "community": "Community",
    "other": "Other",
}

INVALID_DATE = "Invalid date"
INVALID_TIME = "Invalid time"


def category_label(category: str) -> str:
    """Human label for a category code; unknown codes are returned as-is."""
    return CATEGORY_LABELS.get(category, category)


def format_location(location: Optional[Mapping[str, Any]]) -> str:
    if not location:
        return "Location TBD"

    kind = location.get("type")
    if kind == "venue" and location.get("venueName"):
        return location["venueName"]
    if kind == "attraction" and location.get("attractionId"):
        # TODO: look up the attraction name once an attractions endpoint exists
        return "At attraction"
    if kind == "online":
        return "Online event"

    address = location.get("address") or {}
    if address.get("city"):
        return address["city"]
    return "Location TBD"


def format_ticket_info(ticket_info: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Ticket badge text, or None when no badge should be shown."""
    if not ticket_info:
        return None
    if ticket_info.get("isFree"):
        return "Free"
    if ticket_info.get("price"):
        currency = ticket_info.get("currency") or ""
        return f"{_format_price(ticket_info['price'])} {currency}".strip()
    if ticket_info.get("registrationRequired"):
        return "Registration required"
    return None


def _format_price(price: Any) -> str:
    # 25.0 -> "25", 12.5 -> "12.5"
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """ISO-8601 string (a trailing Z is accepted) or datetime; None if unusable."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_time(value: Any) -> str:
    """12-hour clock time, e.g. "7:30 PM"."""
    dt = parse_timestamp(value)
    if dt is None:
        return INVALID_TIME
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {meridiem}"


def format_short_date(value: Any) -> str:
    """Short date, e.g. "Jan 5, 2024"."""
    dt = parse_timestamp(value)
    if dt is None:
        return INVALID_DATE
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_month(value: Any) -> str:
    dt = parse_timestamp(value)
    return f"{dt:%b}" if dt else INVALID_DATE


def format_day(value: Any) -> str:
    dt = parse_timestamp(value)
    return str(dt.day) if dt else INVALID_DATE


def format_event_time(event: Mapping[str, Any]) -> str:
    """ "All day", a same-day time range, or a multi-day date range."""
    if event.get("allDay"):
        return "All day"

    start = parse_timestamp(event.get("startDate"))
    end = parse_timestamp(event.get("endDate"))
    if start is not None and end is not None and start.date() == end.date():
        return f"{format_time(start)} - {format_time(end)}"
    return f"{format_short_date(start)} - {format_short_date(end)}"


def format_card_time(event: Mapping[str, Any]) -> str:
    """Time shown under the date badge: "All day" or the start time."""
    if event.get("allDay"):
        return "All day"
    return format_time(event.get("startDate"))
