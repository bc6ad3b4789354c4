"""Response schemas for blog statistics."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.blog import BlogResponse


class AuthorBlogsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str | None
    blogs: int


class AuthorLikesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str | None
    likes: int


class BlogStatsResponse(BaseModel):
    """Statistics over the stored blogs, absent results are null."""

    model_config = ConfigDict(populate_by_name=True)

    total_likes: int = Field(alias="totalLikes")
    favorite_blog: BlogResponse | None = Field(default=None, alias="favoriteBlog")
    most_blogs: AuthorBlogsResponse | None = Field(default=None, alias="mostBlogs")
    most_likes: AuthorLikesResponse | None = Field(default=None, alias="mostLikes")
