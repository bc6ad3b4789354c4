"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing and verification are CPU bound, so the module level helpers run them
in a small thread pool to keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import CONFIG_MAP, settings
from app.decorators.with_retry import with_retry
from app.errors import PasswordHashingError
from app.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - Password hashing with Argon2id
    - Password verification
    - Hash deprecation checking
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Security level name from ``CONFIG_MAP``, defaults to the
                ``PASSWORD_SECURITY_LEVEL`` setting
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            hashed_password = self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e
        logger.debug(f"Password hashed successfully on level {self.level}")
        return hashed_password

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A missing hash still runs a dummy verification so that unknown users
        take as long as known ones.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def check_needs_rehash(self, hashed_password: str) -> bool:
        """Return True if the hash uses a deprecated scheme or outdated parameters."""
        return self.pwd_context.needs_update(hashed_password)


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The singleton password hasher instance
    """
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


@with_retry(base_delay=1, max_delay=10, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """
    Hash a password using the default hasher.

    Example:
        >>> hashed = await hash_password("my_password")
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password using the default hasher.

    Example:
        >>> is_valid = await verify_password("my_password", hashed_password)
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
