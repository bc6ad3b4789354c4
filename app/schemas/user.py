"""
User schemas for registration and listing.

Length and presence rules are checked by the user store so that failures
carry the same messages whatever the entry point.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class UserCreate(BaseModel):
    """User creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: str | None = Field(
        default=None,
        description="Username",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr | None = Field(
        default=None,
        description="Password",
        examples=["salainen"],
    )


class UserBlog(BaseModel):
    """Blog summary embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int = 0


class UserResponse(BaseModel):
    """User response model (without sensitive information)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UserBlog] = Field(default_factory=list)
