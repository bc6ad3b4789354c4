"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.configs import pool_kwargs, settings
from app.errors import BaseAppError, DatabaseConnectionError
from app.monitoring import get_logger

logger = get_logger(__name__)


def create_engine(database_url: str = settings.DATABASE_URL) -> AsyncEngine:
    """
    Build an async engine for the given URL.

    Args:
        database_url: SQLAlchemy async database URL

    Returns:
        AsyncEngine: Configured engine
    """
    return create_async_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        **pool_kwargs(database_url),
    )


def create_session_maker(bind: AsyncEngine) -> async_sessionmaker[SQLModelAsyncSession]:
    """Build a session factory bound to ``bind``."""
    return async_sessionmaker(
        bind,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine: AsyncEngine = create_engine()

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = create_session_maker(engine)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    This function is used as a FastAPI dependency to provide
    database sessions to route handlers.

    Yields:
        AsyncSession: Database session

    Example:
        ```python
        @app.get("/users")
        async def get_users(session: AsyncSession = Depends(get_session)):
            result = await session.execute(select(UserDB))
            return result.scalars().all()
        ```
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction(
    session_maker: async_sessionmaker[SQLModelAsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Commits on successful exit, rolls back on exception.

    Args:
        session_maker: Optional session factory, defaults to the application one

    Yields:
        AsyncSession: Database session within a transaction
    """
    async with (session_maker or async_session_maker)() as session:
        try:
            yield session
            await session.commit()
        except BaseAppError:
            # Domain errors are answered by their handlers, nothing to report here
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            logger.exception("Transaction error")
            raise


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create all tables defined in SQLModel models.

    Called on application startup; schema changes beyond table creation are
    out of scope for this service.
    """
    # Import all models to ensure they are registered
    from app.models import BlogDB, UserDB  # noqa: F401, PLC0415

    try:
        async with (bind or engine).begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except (OSError, OperationalError) as e:
        logger.exception("Database initialization failed")
        raise DatabaseConnectionError from e
    logger.info("Database initialized successfully!")


async def check_db(bind: AsyncEngine | None = None) -> bool:
    """Return True when the database answers a trivial query."""
    try:
        async with (bind or engine).connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, SQLAlchemyError):
        logger.exception("Database health check failed")
        return False
    return True


async def close_db() -> None:
    """Dispose of the engine and its pooled connections."""
    await engine.dispose()
    logger.info("Database connections closed")
