# app/main.py

"""Bloglist Backend - blog list sharing API with statistics."""

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import settings
from app.db import check_db
from app.errors import (
    AppValidationError,
    DatabaseError,
    PasswordHashingError,
    UserAuthenticationError,
    app_validation_exception_handler,
    auth_exception_handler,
    create_http_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.monitoring import get_logger
from app.routes import blog_router, login_router, user_router
from app.schemas import HealthCheckResponse
from app.utils.helpers import today_str

logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

api_router = APIRouter(prefix="/api")

routes = [
    blog_router,
    user_router,
    login_router,
]

_ = [api_router.include_router(router) for router in routes]
app.include_router(api_router)

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (AppValidationError, app_validation_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, create_http_exception_handler(logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "version": "1.0.0",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint with database status.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service status, version, local timestamp and database connectivity.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"status": "ok", "version": "1.0.0", "timestamp": "...", "database": "connected"}
    """
    database_ok = await check_db()
    return HealthCheckResponse(
        status="ok" if database_ok else "degraded",
        version=app.version,
        timestamp=today_str(),
        database="connected" if database_ok else "unavailable",
    )


if __name__ == "__main__":
    from uvicorn import run

    run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=True,
    )
