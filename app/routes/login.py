"""Login route issuing bearer tokens for username and password credentials."""

from typing import Annotated

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from app.dependencies import AuthServiceDep
from app.managers import limiter
from app.schemas.auth import LoginRequest, LoginResponse

router = APIRouter(prefix="/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"error": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit("10/minute")
async def login(
    request: Request,
    response: Response,
    credentials: Annotated[
        LoginRequest,
        Body(examples=[{"username": "mluukkai", "password": "salainen"}]),
    ],
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Login with username and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    LoginResponse
        Token together with the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If the username is unknown or the password is wrong.
    """
    password = credentials.password.get_secret_value() if credentials.password else None
    user = await auth_service.authenticate_user(credentials.username, password)
    return auth_service.create_token_for_user(user)
