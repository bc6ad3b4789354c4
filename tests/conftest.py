# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# These must be set before the app is imported anywhere
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db import create_session_maker, init_db, transaction  # noqa: E402


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the test database."""
    return create_session_maker(db_engine)


@pytest.fixture
async def session(session_maker: async_sessionmaker) -> AsyncGenerator[AsyncSession]:
    """A session inside a transaction that commits when the test succeeds."""
    async with transaction(session_maker) as db_session:
        yield db_session
