"""
Blog schemas for the Bloglist application.

Request bodies accept any subset of fields; the "title or url" rule and the
likes default are enforced when the blog is stored.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogOwner(BaseModel):
    """Owner information embedded in blog responses (without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogCreate(BaseModel):
    """Blog creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(
        default=None,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        max_length=100,
        description="Name of the writer",
        examples=["Michael Chan"],
    )
    url: str | None = Field(
        default=None,
        max_length=MAX_URL_LENGTH,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int | None = Field(
        default=None,
        ge=0,
        description="Like count, defaults to 0",
        examples=[7],
    )


class BlogUpdate(BaseModel):
    """Blog update model, only the provided fields change."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=100)
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0)


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int = Field(default=0, ge=0)
    user: BlogOwner | None = None
