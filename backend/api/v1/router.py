"""api/v1/router.py — Aggregates all v1 endpoint routers.

Included in api/main.py under the prefix /api/v1, so final paths are:
    /api/v1/events
"""

from fastapi import APIRouter

from api.v1.endpoints import events

v1_router = APIRouter()

v1_router.include_router(events.router, prefix="/events", tags=["events"])
