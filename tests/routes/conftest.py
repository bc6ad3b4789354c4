# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db import get_session, transaction
from app.main import app
from app.managers.rate_limiter import limiter

ROOT_USER = {"username": "root", "name": "Superuser", "password": "sekret"}
OTHER_USER = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}

INITIAL_BLOGS: list[dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@pytest.fixture
async def client(session_maker: async_sessionmaker) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client backed by a fresh in-memory database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with transaction(session_maker) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()


async def _login(client: AsyncClient, username: str, password: str) -> dict[str, str]:
    """Log in and return bearer auth headers."""
    response = await client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
async def root_user(client: AsyncClient) -> dict[str, Any]:
    """Register the root user through the API."""
    response = await client.post("/api/users", json=ROOT_USER)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
async def auth_headers(client: AsyncClient, root_user: dict[str, Any]) -> dict[str, str]:
    """Auth headers carrying a token for the root user."""
    return await _login(client, ROOT_USER["username"], ROOT_USER["password"])


@pytest.fixture
async def other_auth_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers for a second user who owns no blogs."""
    response = await client.post("/api/users", json=OTHER_USER)
    assert response.status_code == 200
    return await _login(client, OTHER_USER["username"], OTHER_USER["password"])


@pytest.fixture
async def initial_blogs(
    client: AsyncClient,
    auth_headers: dict[str, str],
) -> list[dict[str, Any]]:
    """Blogs created by the root user."""
    created = []
    for blog in INITIAL_BLOGS:
        response = await client.post("/api/blogs", json=blog, headers=auth_headers)
        assert response.status_code == 201
        created.append(response.json())
    return created
