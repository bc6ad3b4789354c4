# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    UserDBDep,
    UserRepoDep,
    get_auth_service,
    get_blog_repository,
    get_current_user,
    get_user_repository,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "UserDBDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_repository",
    "get_current_user",
    "get_user_repository",
]
