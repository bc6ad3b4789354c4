"""Utility helper functions."""

from app.utils.helpers import get_summary, host, today_str, utc_now_monotonic

__all__ = [
    "get_summary",
    "host",
    "today_str",
    "utc_now_monotonic",
]
