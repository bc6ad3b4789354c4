"""Validation errors and request validation handling."""

from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


class AppValidationError(BaseAppError):
    """Base class for domain validation failures."""

    def __init__(self, detail: str = "Validation failed") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class UserValidationError(AppValidationError):
    """Raised when a user record violates its constraints."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)

    @classmethod
    def field(cls, field: str, message: str) -> "UserValidationError":
        """Build an error in the ``User validation failed: <field>: <message>`` format."""
        return cls(f"User validation failed: {field}: {message}")


class BlogValidationError(AppValidationError):
    """Raised when a blog record violates its constraints."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Blog validation failed: {detail}")


class MalformattedIdError(AppValidationError):
    """Raised when a path identifier cannot be parsed."""

    def __init__(self) -> None:
        super().__init__("malformatted id")


def _format_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    formatted_errors = []
    for error in exc.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with a 400 response.

    A path parameter that fails to parse (e.g. a non-UUID blog id) is reported
    as ``malformatted id``; body problems list each failing field.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    if any(error.get("loc", ("",))[0] == "path" for error in exec_error.errors()):
        logger.warning(f"malformatted id for ip: {host(request)} at {request.url.path}")
        return ORJSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={"error": MalformattedIdError().detail},
        )

    formatted_errors = _format_errors(exec_error)
    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "errors": formatted_errors,
        },
    )


app_validation_exception_handler = create_exception_handler(logger)
