"""Authentication service handling username and password login."""

from datetime import timedelta

from app.configs import settings
from app.errors.auth import InvalidCredentialsError
from app.errors.password_hasher import PasswordHashingError
from app.managers.password_manager import get_password_hasher, hash_password, verify_password
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.monitoring import get_logger
from app.repositories import UserRepository
from app.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str | None, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        An unknown username and a wrong password are reported identically.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username) if username else None
        password_hash = user.password_hash if user else None

        # A missing hash still costs one (dummy) verification
        if not await verify_password(password or "", password_hash) or user is None:
            logger.info(f"Failed login attempt for {username!r}")
            raise InvalidCredentialsError

        await self._upgrade_hash(user, password)
        return user

    async def _upgrade_hash(self, user: UserDB, password: str) -> None:
        """Re-hash the password when the stored hash uses outdated parameters."""
        if not get_password_hasher().check_needs_rehash(user.password_hash):
            return
        try:
            user.password_hash = await hash_password(password)
        except PasswordHashingError:
            logger.exception(f"Password rehash failed for {user.username}")
            return
        self.user_repo.session.add(user)
        logger.info(f"Password hash upgraded for {user.username}")

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            LoginResponse: Token with the user's public identity
        """
        access_token = create_access_token(
            user_id=user.id,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return LoginResponse(token=access_token, username=user.username, name=user.name)
