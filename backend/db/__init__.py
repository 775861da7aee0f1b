"""Database package for the Smart City Events service."""

from .database import Base, engine, SessionLocal, init_db
from .models import Event, CATEGORIES, PUBLISHED_STATUSES

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "init_db",
    "Event",
    "CATEGORIES",
    "PUBLISHED_STATUSES",
]
