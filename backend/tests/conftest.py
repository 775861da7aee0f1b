"""
conftest.py for backend/tests/

Runs the API against an in-memory SQLite database: every test gets fresh
tables, a session bound to them, and a TestClient whose get_db / get_now
dependencies are overridden. "Now" is pinned to Wednesday 2026-10-21 12:00
so date-range filters are deterministic.
"""

import os
import sys
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add backend/ to sys.path so `api`, `db`, `client` import without installing.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from api.dependencies import get_db, get_now  # noqa: E402
from api.main import app  # noqa: E402
from db.database import Base  # noqa: E402
from db.models import Event  # noqa: E402

NOW = datetime(2026, 10, 21, 12, 0)  # a Wednesday


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_now] = lambda: NOW
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_event(db_session):
    """Insert an event; defaults describe a published, upcoming concert."""
    counter = {"n": 0}

    def _add(**overrides) -> Event:
        counter["n"] += 1
        start = overrides.pop("start_date", NOW + timedelta(days=2))
        values = {
            "title": f"Event {counter['n']}",
            "slug": f"event-{counter['n']}",
            "short_description": "Something happening in town",
            "category": "concert",
            "start_date": start,
            "end_date": overrides.pop("end_date", start + timedelta(hours=2)),
            "published_status": "published",
        }
        values.update(overrides)
        event = Event(**values)
        db_session.add(event)
        db_session.commit()
        return event

    return _add
