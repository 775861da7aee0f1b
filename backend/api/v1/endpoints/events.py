"""api/v1/endpoints/events.py — Event endpoints.

Routes:
    GET /events                       Paginated list; filters: category, featured, showPast,
                                      sort, dateRange (+ startDate/endDate for custom)
    GET /events/category/{category}   Paginated upcoming events in one category
    GET /events/upcoming              Events starting within the next N days
    GET /events/date-range            Events overlapping an inclusive date range
    GET /events/featured              Current and future featured events
    GET /events/{id}                  Single published event

Only published events are ever returned.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_now
from core.config import settings
from db.models import CATEGORIES, Event
from schemas.event import EventDetailResponse, EventListResponse, EventResponse
from schemas.shared import PaginationMeta
from utils.date_ranges import DateRangeMode, resolve_date_range

logger = logging.getLogger(__name__)

router = APIRouter()

# Public sort keys -> columns. `-key` sorts descending.
_SORT_COLUMNS = {
    "startDate": Event.start_date,
    "endDate":   Event.end_date,
    "title":     Event.title,
    "createdAt": Event.created_at,
}

_UPCOMING_LIMIT = 20
_FEATURED_LIMIT = 10


def _order_by(sort: str) -> list:
    """Translate "title,-startDate" into ORDER BY clauses.

    Raises:
        HTTPException(400): on an unknown sort key.
    """
    clauses = []
    for field in (f.strip() for f in sort.split(",")):
        if not field:
            continue
        descending = field.startswith("-")
        column = _SORT_COLUMNS.get(field.lstrip("-"))
        if column is None:
            raise HTTPException(status_code=400, detail=f"Invalid sort field '{field}'")
        clauses.append(column.desc() if descending else column.asc())
    if not clauses:
        clauses.append(Event.start_date.asc())
    # Stable paging when the sort key ties
    clauses.append(Event.id.asc())
    return clauses


def _published():
    return Event.published_status == "published"


def _overlaps(window_start: datetime, window_end: datetime) -> list:
    return [Event.start_date < window_end, Event.end_date >= window_start]


def _paginate(
    db: Session,
    conditions: list,
    order: list,
    page: int,
    limit: int,
) -> EventListResponse:
    total = db.scalar(select(func.count()).select_from(Event).where(*conditions)) or 0
    rows = db.scalars(
        select(Event)
        .where(*conditions)
        .order_by(*order)
        .offset((page - 1) * limit)
        .limit(limit)
    ).all()

    return EventListResponse(
        events=[EventResponse.model_validate(r) for r in rows],
        pagination=PaginationMeta(
            total=total,
            page=page,
            limit=limit,
            pages=math.ceil(total / limit),
        ),
    )


@router.get("", response_model=EventListResponse, summary="List events")
def list_events(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Results per page"
    ),
    category: str | None = Query(None, description="Exact category code; empty means all"),
    featured: bool = Query(False, description="Only featured events"),
    show_past: bool = Query(False, alias="showPast", description="Include events that already ended"),
    sort: str = Query("startDate", description="Comma-separated keys, '-' prefix for descending"),
    date_range: DateRangeMode = Query(DateRangeMode.UPCOMING, alias="dateRange"),
    start_date: date | None = Query(None, alias="startDate", description="Custom range start (YYYY-MM-DD)"),
    end_date: date | None = Query(None, alias="endDate", description="Custom range end, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    conditions = [_published()]

    if not show_past:
        conditions.append(Event.end_date >= now)
    if featured:
        conditions.append(Event.featured.is_(True))
    if category:
        conditions.append(Event.category == category)

    try:
        window = resolve_date_range(date_range, now, start_date, end_date)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if window is not None:
        conditions.extend(_overlaps(*window))

    logger.debug(
        "listing events",
        extra={
            "page": page,
            "limit": limit,
            "category": category,
            "featured": featured,
            "show_past": show_past,
            "sort": sort,
            "date_range": date_range.value,
            "window": [w.isoformat() for w in window] if window else None,
        },
    )
    return _paginate(db, conditions, _order_by(sort), page, limit)


@router.get(
    "/category/{category}",
    response_model=EventListResponse,
    summary="List upcoming events in a category",
)
def list_events_by_category(
    category: str,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    if category not in CATEGORIES:
        raise HTTPException(status_code=400, detail="Invalid category")

    conditions = [_published(), Event.category == category, Event.end_date >= now]
    return _paginate(db, conditions, _order_by("startDate"), page, limit)


@router.get("/upcoming", response_model=list[EventResponse], summary="Events starting soon")
def list_upcoming_events(
    days: int = Query(7, ge=1, le=366, description="Look-ahead window in days"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    rows = db.scalars(
        select(Event)
        .where(_published(), Event.start_date >= now, Event.start_date <= now + timedelta(days=days))
        .order_by(Event.start_date.asc(), Event.id.asc())
        .limit(_UPCOMING_LIMIT)
    ).all()
    return [EventResponse.model_validate(r) for r in rows]


@router.get("/date-range", response_model=list[EventResponse], summary="Events in a date range")
def list_events_in_date_range(
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    if not start_date or not end_date:
        raise HTTPException(status_code=400, detail="Start date and end date are required")
    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid date format") from exc

    # End date is inclusive: run to the end of that day
    window_start = datetime.combine(start, time.min)
    window_end = datetime.combine(end + timedelta(days=1), time.min)

    rows = db.scalars(
        select(Event)
        .where(_published(), *_overlaps(window_start, window_end))
        .order_by(Event.start_date.asc(), Event.id.asc())
    ).all()
    return [EventResponse.model_validate(r) for r in rows]


@router.get("/featured", response_model=list[EventResponse], summary="Featured events")
def list_featured_events(
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    rows = db.scalars(
        select(Event)
        .where(_published(), Event.featured.is_(True), Event.end_date >= now)
        .order_by(Event.start_date.asc(), Event.id.asc())
        .limit(_FEATURED_LIMIT)
    ).all()
    return [EventResponse.model_validate(r) for r in rows]


@router.get("/{event_id}", response_model=EventDetailResponse, summary="Get event")
def get_event(event_id: str, db: Session = Depends(get_db)):
    event = db.get(Event, event_id)

    # Unpublished events are indistinguishable from missing ones
    if event is None or event.published_status != "published":
        raise HTTPException(status_code=404, detail=f"Event '{event_id}' not found")

    return EventDetailResponse.model_validate(event)
