# tests/errors/test_validation_errors.py
"""Tests for app/errors/validation.py module."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi.exceptions import RequestValidationError

from app.errors import (
    BlogValidationError,
    MalformattedIdError,
    UserValidationError,
    validation_exception_handler,
)


def _request() -> MagicMock:
    request = MagicMock()
    request.client.host = "127.0.0.1"
    request.url.path = "/api/blogs"
    return request


class TestDomainValidationErrors:
    """Tests for the 400 validation error family."""

    def test_user_error_is_400(self) -> None:
        error = UserValidationError("password missing")
        assert error.status_code == 400
        assert error.detail == "password missing"

    def test_user_field_error_format(self) -> None:
        error = UserValidationError.field("username", "Path `username` is required.")
        assert error.detail == "User validation failed: username: Path `username` is required."

    def test_blog_error_format(self) -> None:
        error = BlogValidationError("title and url are missing")
        assert error.status_code == 400
        assert error.detail == "Blog validation failed: title and url are missing"

    def test_malformatted_id(self) -> None:
        assert MalformattedIdError().detail == "malformatted id"


class TestRequestValidationHandler:
    """Tests for validation_exception_handler."""

    @pytest.mark.asyncio
    async def test_path_error_is_malformatted_id(self) -> None:
        exc = RequestValidationError(
            [{"loc": ("path", "blog_id"), "msg": "Input should be a valid UUID", "type": "uuid_parsing"}],
        )

        response = await validation_exception_handler(_request(), exc)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {"error": "malformatted id"}

    @pytest.mark.asyncio
    async def test_body_errors_are_listed(self) -> None:
        exc = RequestValidationError(
            [
                {
                    "loc": ("body", "likes"),
                    "msg": "Input should be greater than or equal to 0",
                    "type": "greater_than_equal",
                    "ctx": {"ge": 0},
                },
            ],
        )

        response = await validation_exception_handler(_request(), exc)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "error": "Validation failed",
            "errors": [
                {
                    "field": "likes",
                    "message": "Input should be greater than or equal to 0",
                    "type": "greater_than_equal",
                    "context": {"ge": 0},
                },
            ],
        }
