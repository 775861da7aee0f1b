"""client/api.py — HTTP client for the events API.

EventsApiClient.get_events() is the default EventFetcher used by the list
view: it takes the flat parameter mapping from build_query_params() and
returns the decoded JSON body.

Every failure (connection error, timeout, non-2xx, undecodable body) is
raised as EventsApiError carrying a user-safe message.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from core.config import settings

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"


class EventsApiError(Exception):
    """A request to the events API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def encode_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Serialize values the way browsers do: booleans as true/false."""
    encoded = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message
    return GENERIC_ERROR


class EventsApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(
                url,
                params=encode_params(params or {}),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("events API unreachable", extra={"url": url, "error": str(exc)})
            raise EventsApiError(GENERIC_ERROR) from exc

        if not response.ok:
            message = _error_message(response)
            logger.warning(
                "events API returned an error",
                extra={"url": url, "status_code": response.status_code, "error": message},
            )
            raise EventsApiError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise EventsApiError(GENERIC_ERROR, status_code=response.status_code) from exc

    def get_events(self, params: Mapping[str, Any]) -> Any:
        """GET /events with the list view's query parameters."""
        return self._get("/events", params)

    def get_event(self, event_id: str) -> Any:
        """GET /events/{id}."""
        return self._get(f"/events/{event_id}")
