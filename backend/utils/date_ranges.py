"""utils/date_ranges.py — Resolve named date-range filters to concrete windows.

The list view sends `dateRange=thisWeekend` and friends as-is; turning those
names into timestamps happens here, against the server's clock.

Public API
----------
DateRangeMode                                  enum of accepted names
resolve_date_range(mode, now, start, end)   -> (window_start, window_end) | None

Windows are half-open [start, end) in naive UTC. Weeks start on Monday.
`upcoming` returns None: it adds no window beyond the showPast rule.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from enum import Enum


class DateRangeMode(str, Enum):
    UPCOMING = "upcoming"
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "thisWeek"
    THIS_WEEKEND = "thisWeekend"
    NEXT_WEEK = "nextWeek"
    THIS_MONTH = "thisMonth"
    CUSTOM = "custom"


Window = tuple[datetime, datetime]


def _midnight(d: date) -> datetime:
    return datetime.combine(d, time.min)


def _first_of_next_month(d: date) -> date:
    if d.month == 12:
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def resolve_date_range(
    mode: DateRangeMode | str,
    now: datetime,
    start_date: date | None = None,
    end_date: date | None = None,
) -> Window | None:
    """Return the window for `mode`, or None when no window applies.

    For CUSTOM both dates are required; with either missing the filter is
    ignored (None), matching the list view which only sends complete pairs.
    The custom end date is inclusive, so the window runs to the following
    midnight.

    Raises:
        ValueError: unknown mode, or a custom range whose end precedes its start.
    """
    mode = DateRangeMode(mode)
    today = now.date()
    monday = today - timedelta(days=today.weekday())

    if mode is DateRangeMode.UPCOMING:
        return None
    if mode is DateRangeMode.TODAY:
        return _midnight(today), _midnight(today + timedelta(days=1))
    if mode is DateRangeMode.TOMORROW:
        tomorrow = today + timedelta(days=1)
        return _midnight(tomorrow), _midnight(tomorrow + timedelta(days=1))
    if mode is DateRangeMode.THIS_WEEK:
        return _midnight(monday), _midnight(monday + timedelta(days=7))
    if mode is DateRangeMode.THIS_WEEKEND:
        saturday = monday + timedelta(days=5)
        return _midnight(saturday), _midnight(saturday + timedelta(days=2))
    if mode is DateRangeMode.NEXT_WEEK:
        next_monday = monday + timedelta(days=7)
        return _midnight(next_monday), _midnight(next_monday + timedelta(days=7))
    if mode is DateRangeMode.THIS_MONTH:
        first = today.replace(day=1)
        return _midnight(first), _midnight(_first_of_next_month(today))

    # CUSTOM
    if start_date is None or end_date is None:
        return None
    if end_date < start_date:
        raise ValueError("endDate must not be before startDate")
    return _midnight(start_date), _midnight(end_date + timedelta(days=1))
