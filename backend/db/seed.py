"""
Load events from a JSON file into the database.

The file holds a list of event objects in the same camelCase shape the API
returns (title, shortDescription, startDate, location, ticketInfo, ...).
Events are matched on slug: existing rows are updated, new ones inserted.

Usage:
    cd backend
    python -m db.seed data/sample_events.json
"""

from __future__ import annotations

import argparse
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.config import settings
from core.logging import configure_logging
from db.database import SessionLocal, init_db
from db.models import CATEGORIES, PUBLISHED_STATUSES, Event

logger = logging.getLogger(__name__)


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "event"


def _parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp into naive UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.utcoffset() is not None:
        parsed = (parsed - parsed.utcoffset()).replace(tzinfo=None)
    return parsed


def _row_values(raw: dict[str, Any]) -> dict[str, Any]:
    """Map one camelCase record onto Event column values.

    Raises:
        ValueError: missing title/dates, unknown category or status.
    """
    title = raw.get("title")
    if not title:
        raise ValueError("event is missing a title")
    if not raw.get("startDate") or not raw.get("endDate"):
        raise ValueError(f"event '{title}' is missing startDate/endDate")

    category = raw.get("category", "other")
    if category not in CATEGORIES:
        raise ValueError(f"event '{title}' has unknown category '{category}'")
    status = raw.get("publishedStatus", "published")
    if status not in PUBLISHED_STATUSES:
        raise ValueError(f"event '{title}' has unknown publishedStatus '{status}'")

    return {
        "title": title,
        "slug": raw.get("slug") or slugify(title),
        "description": raw.get("description", ""),
        "short_description": raw.get("shortDescription", ""),
        "category": category,
        "start_date": _parse_timestamp(raw["startDate"]),
        "end_date": _parse_timestamp(raw["endDate"]),
        "all_day": bool(raw.get("allDay", False)),
        "location": raw.get("location"),
        "images": raw.get("images") or [],
        "ticket_info": raw.get("ticketInfo"),
        "tags": raw.get("tags") or [],
        "featured": bool(raw.get("featured", False)),
        "published_status": status,
    }


def load_events(session: Session, records: Iterable[dict[str, Any]]) -> tuple[int, int]:
    """Upsert records by slug. Returns (inserted, updated). Caller commits."""
    inserted = updated = 0
    for raw in records:
        values = _row_values(raw)
        existing = session.scalars(select(Event).where(Event.slug == values["slug"])).first()
        if existing is None:
            session.add(Event(**values))
            inserted += 1
        else:
            for key, value in values.items():
                setattr(existing, key, value)
            updated += 1
    session.flush()
    return inserted, updated


def seed_from_file(path: str | Path) -> tuple[int, int]:
    """Create tables if needed and load the JSON file at `path`."""
    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON list of events")

    init_db()
    session = SessionLocal()
    try:
        inserted, updated = load_events(session, records)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    logger.info(
        "events seeded",
        extra={"path": str(path), "inserted": inserted, "updated": updated},
    )
    return inserted, updated


def main() -> None:
    parser = argparse.ArgumentParser(description="Load events from a JSON file")
    parser.add_argument("path", help="JSON file containing a list of events")
    args = parser.parse_args()

    configure_logging(settings.log_level, log_to_file=False)
    seed_from_file(args.path)


if __name__ == "__main__":
    main()
