"""api/main.py — FastAPI application for the Smart City Events API.

Run from backend/:
    uvicorn api.main:app --reload --port 8000
    gunicorn api.main:app -c gunicorn.conf.py

Every error leaves as {"error", "status_code", "request_id"}.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers.health import router as health_router
from api.v1.router import v1_router
from core.config import settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, TimingMiddleware
from db.database import init_db

logger = logging.getLogger(__name__)

_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    init_db()
    logger.info(
        "events API starting",
        extra={
            "environment": settings.environment,
            "version": _VERSION,
            "allowed_origins": settings.allowed_origins,
        },
    )
    yield
    logger.info("events API stopped")


app = FastAPI(
    title="Smart City Events API",
    description="City event listings filtered by category, date range and featured flag.",
    version=_VERSION,
    lifespan=lifespan,
)

# Last added runs first: CORS, then request ID, then timing.
app.add_middleware(TimingMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(request: Request, status_code: int, error: Any) -> JSONResponse:
    request_id: Optional[str] = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "status_code": status_code, "request_id": request_id},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(request, exc.status_code, exc.detail)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled exception",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    return _error_response(request, 500, "Internal server error")


app.include_router(health_router)
app.include_router(v1_router, prefix="/api/v1")


@app.get("/", tags=["root"], summary="API root")
def root():
    return {"service": "Smart City Events API", "version": _VERSION, "docs": "/docs"}
