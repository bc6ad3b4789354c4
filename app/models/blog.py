"""Blog database model using SQLModel."""

from datetime import datetime
from typing import TYPE_CHECKING, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, Relationship, SQLModel, String

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH
from app.utils.helpers import utc_now_monotonic

if TYPE_CHECKING:
    from app.models.user import UserDB


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Each blog belongs to the user who created it. Likes can never be negative.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    user_id: UUID = Field(
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    title: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_TITLE_LENGTH)),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(100), index=True),
        description="Name of the writer, not necessarily the owner",
    )
    url: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_URL_LENGTH)),
        description="Blog URL",
    )
    likes: int = Field(default=0, nullable=False, description="Like count")

    created_at: datetime = Field(
        default_factory=utc_now_monotonic,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp, strictly increasing per process",
    )

    user: "UserDB" = Relationship(
        back_populates="blogs",
        sa_relationship_kwargs={"lazy": "selectin"},
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )
