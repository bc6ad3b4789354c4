# app/routes/blog.py

"""
Blog Routes.

Provides the blog collection endpoints of the Bloglist API.

Summary
-------
Endpoints include:
  - List blogs (owner populated)
  - Blog statistics (total likes, favorite blog, most blogs, most likes)
  - Get blog by id
  - Create blog (authenticated)
  - Update blog (authenticated)
  - Delete blog (authenticated, owner only)

Dependencies
------------
  - `BlogRepoDep`: Repository bound to the request's database session.
  - `UserDBDep`: User resolved from the bearer token.

Rate Limiting
-------------
All endpoints define explicit limits and include `429` response examples.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.dependencies import BlogRepoDep, UserDBDep
from app.errors.auth import BlogOwnershipError
from app.managers import limiter
from app.monitoring import get_logger
from app.schemas import BlogCreate, BlogResponse, BlogStatsResponse, BlogUpdate
from app.services import build_stats

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174111",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
}

RATE_LIMIT_RESPONSE = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"error": "Rate limit exceeded"}}},
}

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {
        "application/json": {"example": {"error": "Blog with ID <uuid> not found"}},
    },
}

MALFORMATTED_ID_RESPONSE = {
    "description": "Malformatted id",
    "content": {"application/json": {"example": {"error": "malformatted id"}}},
}

UNAUTHORIZED_RESPONSE = {
    "description": "Missing or invalid token",
    "content": {"application/json": {"example": {"error": "token missing or invalid"}}},
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Return every stored blog with its owner populated.",
    responses={
        200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}},
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_list",
)
@limiter.limit("60/minute")
async def list_blogs(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> list[BlogResponse]:
    """
    List all blogs in creation order.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        All blogs.
    """
    return [BlogResponse.model_validate(blog) for blog in await repo.get_all()]


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatsResponse,
    summary="Blog statistics",
    description=(
        "Aggregate statistics over all stored blogs. "
        "Results that do not exist for an empty collection are null."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "totalLikes": 36,
                        "favoriteBlog": BLOG_EXAMPLE | {"likes": 12},
                        "mostBlogs": {"author": "Robert C. Martin", "blogs": 3},
                        "mostLikes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_stats",
)
@limiter.limit("60/minute")
async def blog_stats(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> BlogStatsResponse:
    """Compute statistics over a snapshot of all blogs."""
    blogs = [BlogResponse.model_validate(blog) for blog in await repo.get_all()]
    return build_stats(blogs)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a blog by its UUID.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMATTED_ID_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_get_by_id",
)
@limiter.limit("60/minute")
async def get_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog_id : UUID
        Blog identifier.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Blog data.

    Raises
    ------
    RecordNotFoundError
        If no blog has this id.
    """
    return BlogResponse.model_validate(await repo.get_or_raise(blog_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user. Likes default to 0.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {"error": "Blog validation failed: title and url are missing"},
                },
            },
        },
        401: UNAUTHORIZED_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_create",
)
@limiter.limit("20/minute")
async def create_blog(
    request: Request,
    response: Response,
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog : BlogCreate
        Blog input payload.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Owner of the new blog.

    Returns
    -------
    BlogResponse
        Created blog data.

    Raises
    ------
    BlogValidationError
        If both title and url are missing.
    """
    db_blog = await repo.create(blog, owner=current_user)
    return BlogResponse.model_validate(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Update the provided fields of a blog. Any authenticated user may update.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE | {"likes": 8}}}},
        400: MALFORMATTED_ID_RESPONSE,
        401: UNAUTHORIZED_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_update",
)
@limiter.limit("30/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    blog_update: Annotated[BlogUpdate, Body(examples=[{"likes": 8}])],
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> BlogResponse:
    """
    Update a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog_id : UUID
        Blog identifier.
    blog_update : BlogUpdate
        Fields to change.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated user.

    Returns
    -------
    BlogResponse
        Updated blog data.
    """
    db_blog = await repo.get_or_raise(blog_id)
    db_blog = await repo.update_blog(db_blog, blog_update)
    logger.info(f"Blog {blog_id} updated by {current_user.username}")
    return BlogResponse.model_validate(db_blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only its creator may delete it.",
    responses={
        204: {"description": "Blog deleted"},
        400: MALFORMATTED_ID_RESPONSE,
        401: UNAUTHORIZED_RESPONSE,
        403: {
            "description": "Not the owner",
            "content": {
                "application/json": {"example": {"error": "only the creator can delete a blog"}},
            },
        },
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_delete",
)
@limiter.limit("20/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> Response:
    """
    Delete a blog owned by the current user.

    Raises
    ------
    RecordNotFoundError
        If no blog has this id.
    BlogOwnershipError
        If the current user did not create the blog.
    """
    db_blog = await repo.get_or_raise(blog_id)
    if db_blog.user_id != current_user.id:
        raise BlogOwnershipError

    await repo.delete(blog_id)
    logger.info(f"Blog {blog_id} deleted by {current_user.username}")
    return Response(status_code=HTTP_204_NO_CONTENT)
