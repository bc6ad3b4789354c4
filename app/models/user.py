"""User database model using SQLModel."""

from typing import TYPE_CHECKING, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, Relationship, SQLModel, String

from app.configs.settings import MAX_USERNAME_LENGTH

if TYPE_CHECKING:
    from app.models.blog import BlogDB


class UserDB(SQLModel, table=True):
    """
    User database model.

    Owns any number of blogs. The username is unique and compared
    case-sensitively.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    username: str = Field(
        sa_column=Column(String(MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Display name",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    blogs: list["BlogDB"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "BlogDB.created_at"},
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
            },
        },
    )
