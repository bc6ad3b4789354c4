# app/managers/rate_limiter.py

"""Rate limiter configuration using slowapi."""

from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from app.configs import LimiterConfig
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Args:
        request: FastAPI request object.

    Returns:
        Client IP based identifier string.
    """
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(key_func=get_identifier, **LimiterConfig().model_dump())


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle rate limit exceeded exceptions.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        JSON response with error details.
    """
    http_exc = cast(RateLimitExceeded, exc)
    logger.warning(f"Rate limit exceeded for ip: {host(request)} at {request.url.path}")
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "Rate limit exceeded",
            "allowed_requests": http_exc.detail,
        },
    )
