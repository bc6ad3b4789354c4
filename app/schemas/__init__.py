from app.schemas.auth import LoginRequest, LoginResponse, TokenData
from app.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogUpdate
from app.schemas.health import HealthCheckResponse
from app.schemas.stats import AuthorBlogsResponse, AuthorLikesResponse, BlogStatsResponse
from app.schemas.user import UserBlog, UserCreate, UserResponse

__all__ = [
    "AuthorBlogsResponse",
    "AuthorLikesResponse",
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogStatsResponse",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserBlog",
    "UserCreate",
    "UserResponse",
]
