"""client/render.py — Plain-text rendering of an EventListView."""

from __future__ import annotations

from typing import Any, Mapping

from client.event_list import EventListView, ViewState
from client.formatters import (
    category_label,
    format_card_time,
    format_day,
    format_event_time,
    format_location,
    format_month,
    format_ticket_info,
)
from client.pagination import ELLIPSIS, PageControls


def render_event(event: Mapping[str, Any]) -> list[str]:
    start = event.get("startDate")
    title = event.get("title") or "(untitled)"
    if event.get("featured"):
        title += "  * Featured"

    lines = [
        f"{format_month(start):>3} {format_day(start):>2}  {format_card_time(event):<8}  {title}",
        f"    {category_label(event.get('category', ''))} | {format_location(event.get('location'))}"
        f" | {format_event_time(event)}",
    ]
    if event.get("shortDescription"):
        lines.append(f"    {event['shortDescription']}")
    badge = format_ticket_info(event.get("ticketInfo"))
    if badge:
        lines.append(f"    [{badge}]")
    return lines


def render_event_detail(event: Mapping[str, Any]) -> list[str]:
    """Card for one event followed by its full description and tags."""
    lines = render_event(event)
    if event.get("description"):
        lines += ["", event["description"]]
    tags = event.get("tags") or []
    if tags:
        lines += ["", "Tags: " + ", ".join(str(tag) for tag in tags)]
    return lines


def render_pager(controls: PageControls) -> str:
    parts = ["<" if not controls.prev_disabled else " "]
    for item in controls.items:
        if item == ELLIPSIS:
            parts.append(ELLIPSIS)
        elif item == controls.current:
            parts.append(f"[{item}]")
        else:
            parts.append(str(item))
    parts.append(">" if not controls.next_disabled else " ")
    return " ".join(parts)


def render_filters(view: EventListView) -> str:
    f = view.filters
    text = (
        f"category={f.category or 'all'} dateRange={f.date_range} sort={f.sort}"
        f" featured={'yes' if f.featured else 'no'} showPast={'yes' if f.show_past else 'no'}"
    )
    if view.show_custom_dates:
        text += f" from={view.date_range.start_date or '?'} to={view.date_range.end_date or '?'}"
    return text


def render_view(view: EventListView) -> list[str]:
    state = view.state
    if state is ViewState.LOADING:
        return ["Loading events..."]
    if state is ViewState.ERROR:
        return [view.error or "", "(r) Retry"]

    lines = ["Events", render_filters(view), ""]
    if state is ViewState.EMPTY and view.pagination.total > 0:
        # page past the end of a non-empty result
        lines += [view.summary, f"Page {view.pagination.page} is past the last page"]
        return lines
    if state is ViewState.EMPTY:
        lines +=["No events found", "No events match your current filters", "(c) Clear Filters"]
        return lines

    if view.error:
        lines += [f"! {view.error}", ""]
    lines += [view.summary, ""]
    for event in view.events:
        lines += render_event(event)
        lines.append("")

    controls = view.page_controls
    if controls is not None:
        lines.append(render_pager(controls))
    return lines
