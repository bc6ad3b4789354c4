# app/dependencies/dependencies.py

"""Application dependencies for authentication and data access."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.errors.auth import InvalidTokenError
from app.managers.token_manager import decode_access_token
from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.services import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """Dependency to get AuthService bound to the request's user repository."""
    return AuthService(user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get the user identified by the request's bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, None when the Authorization header is absent.
    user_repo : UserRepository
        Repository used to load the token's user.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the token is missing, invalid, expired or names an unknown user.
    """
    if not token:
        raise InvalidTokenError

    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError

    return user


UserDBDep = Annotated[UserDB, Depends(get_current_user)]
