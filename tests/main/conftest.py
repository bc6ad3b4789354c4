# tests/main/conftest.py
"""Pytest configuration and fixtures for main tests."""

from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
from pytest import fixture
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db import get_session, transaction
from app.main import app
from app.managers.rate_limiter import limiter


@fixture
async def client(session_maker: async_sessionmaker) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the rate limiter enabled and a fresh database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with transaction(session_maker) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = True
    limiter.reset()
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.reset()
    app.dependency_overrides.clear()
