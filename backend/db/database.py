"""Database connection and session management."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from core.config import settings

logger = logging.getLogger(__name__)


def _normalize_url(url: str) -> str:
    # SQLAlchemy requires "postgresql://" not "postgres://"
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(url: str):
    """Create an engine with pool settings suited to the backend in use."""
    url = _normalize_url(url)
    if url.startswith("sqlite"):
        # FastAPI runs sync handlers in a threadpool
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,        # Number of connections to maintain
        max_overflow=20,     # Maximum overflow connections
        connect_args={"connect_timeout": 10},
    )


engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def init_db(bind=None) -> None:
    """Create all tables that don't exist yet."""
    # Import models so they register on Base.metadata
    from db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.debug("database tables ensured", extra={"tables": sorted(Base.metadata.tables)})
