"""client/cli.py — Browse city events from the terminal.

Usage (from backend/, with the API running):
    python -m client.cli
    python -m client.cli --category concert --date-range thisWeekend
    python -m client.cli --date-range custom --start-date 2026-11-01 --end-date 2026-11-30
    python -m client.cli --interactive
    python -m client.cli --id <event id>

Interactive commands: n (next), p (previous), <number> (go to page),
c (clear filters), r (retry), q (quit).
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from client.api import EventsApiClient, EventsApiError
from client.event_list import EventListView
from client.query import DATE_RANGE_MODES, DEFAULT_PAGE_SIZE, SORT_KEYS, DateRange, FilterState
from client.render import render_event_detail, render_view
from core.config import settings
from core.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smart-city-events", description="List city events")
    parser.add_argument("--api-url", default=settings.api_base_url, help="Events API base URL")
    parser.add_argument("--category", default="", help="Category code; empty for all")
    parser.add_argument("--featured", action="store_true", help="Featured events only")
    parser.add_argument("--show-past", action="store_true", help="Include past events")
    parser.add_argument("--sort", choices=SORT_KEYS, default="startDate")
    parser.add_argument("--date-range", choices=DATE_RANGE_MODES, default="upcoming")
    parser.add_argument("--start-date", default="", help="Custom range start (YYYY-MM-DD)")
    parser.add_argument("--end-date", default="", help="Custom range end (YYYY-MM-DD)")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE)
    parser.add_argument("--interactive", "-i", action="store_true", help="Page through results")
    parser.add_argument("--id", dest="event_id", help="Show one event instead of the list")
    return parser


def _print(view: EventListView, out: TextIO) -> None:
    out.write("\n".join(render_view(view)) + "\n")


def run_interactive(view: EventListView, stdin: TextIO, out: TextIO) -> None:
    _print(view, out)
    for line in stdin:
        command = line.strip().lower()
        if command in ("q", "quit"):
            break
        if command == "n":
            view.next_page()
        elif command == "p":
            view.previous_page()
        elif command == "c":
            view.clear_filters()
        elif command == "r":
            view.retry()
        elif command.isdigit() and int(command) >= 1:
            view.handle_page_change(int(command))
        else:
            out.write(f"unknown command: {command!r}\n")
            continue
        _print(view, out)


def show_event(client: EventsApiClient, event_id: str, out: TextIO) -> int:
    try:
        event = client.get_event(event_id)
    except EventsApiError as exc:
        out.write(f"{exc}\n")
        return 1
    out.write("\n".join(render_event_detail(event)) + "\n")
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.page < 1 or args.limit < 1:
        parser.error("--page and --limit must be positive")

    # Logs go to stderr so stdout carries only the listing
    configure_logging(settings.log_level, stream=sys.stderr, log_to_file=False)

    client = EventsApiClient(base_url=args.api_url)
    if args.event_id:
        return show_event(client, args.event_id, out)

    view = EventListView(client.get_events, page_size=args.limit, autoload=False)
    view.filters = FilterState(
        category=args.category,
        featured=args.featured,
        show_past=args.show_past,
        sort=args.sort,
        date_range=args.date_range,
    )
    view.date_range = DateRange(start_date=args.start_date, end_date=args.end_date)
    view.pagination.page = args.page
    view.load()

    if args.interactive:
        run_interactive(view, stdin, out)
    else:
        _print(view, out)
    return 1 if view.error and not view.events else 0


if __name__ == "__main__":
    sys.exit(main())
