from collections.abc import MutableMapping
from datetime import UTC, datetime, timedelta
from threading import Lock
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local date and time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


_last_timestamp = datetime.min.replace(tzinfo=UTC)
_timestamp_lock = Lock()


def utc_now_monotonic() -> datetime:
    """
    Return the current UTC time, strictly later than any earlier call in this process.

    Records stamped with it keep their insertion order even when the clock
    resolution is coarser than the insert rate.

    Returns:
        datetime: Timezone aware UTC timestamp
    """
    global _last_timestamp  # noqa: PLW0603
    with _timestamp_lock:
        now = datetime.now(tz=UTC)
        if now <= _last_timestamp:
            now = _last_timestamp + timedelta(microseconds=1)
        _last_timestamp = now
        return now


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary
