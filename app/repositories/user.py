"""User repository for database operations."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.configs import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from app.errors.database import DatabaseError
from app.errors.validation import UserValidationError
from app.managers.password_manager import hash_password
from app.models.user import UserDB
from app.monitoring import get_logger
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate

logger = get_logger(__name__)


def _not_unique(username: str) -> UserValidationError:
    return UserValidationError.field(
        "username",
        f"Error, expected `username` to be unique. Value: `{username}`",
    )


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Creation enforces the password rules first, then the username rules.
    """

    model = UserDB

    @staticmethod
    def validate_new_user(user: UserCreate) -> tuple[str, str]:
        """
        Check presence and length rules of a new user.

        Args:
            user: Registration payload

        Returns:
            tuple[str, str]: The username and the plaintext password

        Raises:
            UserValidationError: On the first rule that fails
        """
        password = user.password.get_secret_value() if user.password else ""
        if not password:
            raise UserValidationError("password missing")
        if len(password) < MIN_PASSWORD_LENGTH:
            msg = f"`password` length must be {MIN_PASSWORD_LENGTH} at least"
            raise UserValidationError(msg)

        username = user.username or ""
        if not username:
            raise UserValidationError.field("username", "Path `username` is required.")
        if len(username) < MIN_USERNAME_LENGTH:
            raise UserValidationError.field(
                "username",
                f"Path `username` (`{username}`) is shorter than the minimum allowed "
                f"length ({MIN_USERNAME_LENGTH}).",
            )
        return username, password

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: User schema with user data

        Returns:
            UserDB: Created user database model

        Raises:
            UserValidationError: If a field rule fails or the username is taken
            DatabaseError: For other database errors
        """
        username, password = self.validate_new_user(user)

        if await self._check_exists_by_field("username", username):
            raise _not_unique(username)

        db_user = UserDB(
            username=username,
            name=user.name,
            password_hash=await hash_password(password),
        )

        try:
            self.session.add(db_user)
            await self.session.flush()
            await self.session.refresh(db_user)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "username" in error_msg.lower():
                raise _not_unique(username) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

        logger.info(f"User {db_user.username} created")
        return db_user

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username (case-sensitive).

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(UserDB.username == username),  # pyrefly: ignore [bad-argument-type]
        )
        return result.scalar_one_or_none()

    def _ordering(self) -> tuple[Any, ...]:
        return (UserDB.username,)
