"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend application.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MAX_TITLE_LENGTH = 200
MAX_URL_LENGTH = 500

type SecurityLevel = Literal["low", "medium", "high"]


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Token Configuration
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-frontend"

    # Password hashing
    PASSWORD_SECURITY_LEVEL: SecurityLevel = "medium"


settings = Settings()


@dataclass(frozen=True)
class PasswordConfig:
    """Argon2id cost parameters for one security level."""

    memory_cost: int  # KiB
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, PasswordConfig] = {
    "low": PasswordConfig(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": PasswordConfig(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": PasswordConfig(memory_cost=512 * 1024, time_cost=2, parallelism=2),
}


class LimiterConfig(BaseSettings):
    """Rate limiter configuration."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    storage_uri: str = "memory://"
    strategy: Literal["fixed-window", "moving-window"] = "fixed-window"
    headers_enabled: bool = False
    enabled: bool = True


def pool_kwargs(database_url: str) -> dict[str, int | bool]:
    """
    Return connection pool arguments suitable for the given database URL.

    SQLite drivers do not use a sized pool, so only server databases get the
    pool settings.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        dict[str, int | bool]: Keyword arguments for ``create_async_engine``
    """
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
    }
