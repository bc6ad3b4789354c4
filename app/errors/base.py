from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from app.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: Any,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Every handled error answers with an ``{"error": <detail>}`` body, plus any
    extra public attributes the exception carries.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        content: dict[str, Any] = {"error": detail}
        content.update(
            {
                k: v
                for k, v in vars(exc).items()
                if k not in ("status_code", "detail", "headers") and not k.startswith("_")
            },
        )
        headers = getattr(exc, "headers", None)

        return ORJSONResponse(content=content, status_code=status_code, headers=headers)

    return handler


def create_http_exception_handler(
    logger: Any,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a handler for Starlette ``HTTPException`` with the ``{"error": ...}`` body.

    A 404 raised by the router itself (no matching route) reads ``unknown endpoint``.
    """
    handler = create_exception_handler(logger)

    async def http_handler(request: Request, exc: Exception) -> ORJSONResponse:
        if getattr(exc, "status_code", None) == HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
            exc.detail = "unknown endpoint"  # type: ignore[attr-defined]
        return await handler(request, exc)

    return http_handler
