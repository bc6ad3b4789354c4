# tests/managers/test_rate_limiter.py
"""Tests for app/managers/rate_limiter.py module."""

from unittest.mock import MagicMock, patch

import orjson
import pytest

from app.managers.rate_limiter import get_identifier, limiter, rate_limit_exceeded_handler


class TestGetIdentifier:
    """Tests for get_identifier function."""

    def test_returns_ip(self) -> None:
        """Test that the client IP address is the identifier."""
        request = MagicMock()

        with patch(
            "app.managers.rate_limiter.get_remote_address",
            return_value="192.168.1.100",
        ):
            assert get_identifier(request) == "ip:192.168.1.100"


class TestLimiterInstance:
    """Tests for limiter instance."""

    def test_limiter_is_configured(self) -> None:
        """Test that limiter is properly configured."""
        assert limiter._key_func is get_identifier  # noqa: SLF001


class TestRateLimitExceededHandler:
    """Tests for rate_limit_exceeded_handler."""

    @pytest.mark.asyncio
    async def test_returns_429_with_error_body(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.1"
        request.url.path = "/api/login"
        exc = MagicMock()
        exc.detail = "10 per 1 minute"

        response = await rate_limit_exceeded_handler(request, exc)

        assert response.status_code == 429
        assert orjson.loads(response.body) == {
            "error": "Rate limit exceeded",
            "allowed_requests": "10 per 1 minute",
        }
