# app/routes/user.py

"""
User Routes.

Provides registration and listing endpoints for user accounts.

Summary
-------
Endpoints include:
  - Create user
  - Get all users (blogs populated)

Rate Limiting
-------------
All endpoints define explicit limits and include `429` response examples.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_200_OK

from app.dependencies import UserRepoDep
from app.managers.rate_limiter import limiter
from app.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["👤 Users"])

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174111",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogs": [
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
            "likes": 7,
        },
    ],
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_200_OK,
    summary="Create a new user",
    description="Register a new user. The password is stored only as a hash.",
    responses={
        200: {"content": {"application/json": {"example": USER_EXAMPLE | {"blogs": []}}}},
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "examples": {
                        "password_missing": {"value": {"error": "password missing"}},
                        "password_short": {
                            "value": {"error": "`password` length must be 3 at least"},
                        },
                        "username_taken": {
                            "value": {
                                "error": "User validation failed: username: Error, "
                                "expected `username` to be unique. Value: `root`",
                            },
                        },
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"error": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@limiter.limit("10/minute")
async def create_user(
    request: Request,
    response: Response,
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    repo: UserRepoDep,
) -> UserResponse:
    """
    Create a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    user : UserCreate
        User input payload.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserResponse
        Created user data.

    Raises
    ------
    UserValidationError
        If the password or username is missing, too short, or the username is taken.
    """
    db_user = await repo.create(user)
    return UserResponse.model_validate(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="Get all users",
    description="Return every user with their blogs populated.",
    responses={
        200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}},
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"error": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_list",
)
@limiter.limit("60/minute")
async def list_users(
    request: Request,
    response: Response,
    repo: UserRepoDep,
) -> list[UserResponse]:
    """List all users."""
    return [UserResponse.model_validate(user) for user in await repo.get_all()]
