"""SQLAlchemy models for the Smart City Events service."""

import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Index, String, Text, func

from .database import Base

CATEGORIES = (
    "conference",
    "exhibition",
    "concert",
    "festival",
    "sport",
    "workshop",
    "community",
    "other",
)

PUBLISHED_STATUSES = ("draft", "published", "archived")


def _new_id() -> str:
    return uuid.uuid4().hex


class Event(Base):
    """City event.

    location, images and ticket_info are stored as JSON documents because
    their shape varies by variant (venue / attraction / online / address,
    free / priced / registration).
    """

    __tablename__ = "events"

    id = Column(String(32), primary_key=True, default=_new_id)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    short_description = Column(String(500), nullable=False, default="")
    category = Column(String(32), nullable=False, index=True)

    # Naive UTC timestamps
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    all_day = Column(Boolean, nullable=False, default=False)

    location = Column(JSON)       # {"type": "venue", "venueName": ..., "address": {...}}
    images = Column(JSON, default=list)
    ticket_info = Column(JSON)    # {"isFree": ..., "price": ..., "currency": ...}
    tags = Column(JSON, default=list)

    featured = Column(Boolean, nullable=False, default=False)
    published_status = Column(String(16), nullable=False, default="published")

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("ix_events_status_start", "published_status", "start_date"),
        Index("ix_events_end_date", "end_date"),
    )

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}', start_date={self.start_date})>"
