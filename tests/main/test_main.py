from httpx import AsyncClient
from pytest import mark


@mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert data["version"] == "1.0.0"
    assert data["timestamp"]


@mark.asyncio
async def test_unknown_endpoint(client: AsyncClient) -> None:
    """Unmatched routes answer with a JSON error body."""
    response = await client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "unknown endpoint"}


@mark.asyncio
async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/api/blogs")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


@mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/blogs", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


@mark.asyncio
async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/blogs")

    assert len(response.headers["X-Request-ID"]) == 32


@mark.asyncio
async def test_login_rate_limit(client: AsyncClient) -> None:
    credentials = {"username": "nobody", "password": "whatever"}

    # Hit the endpoint 10 times (allowed)
    for _ in range(10):
        response = await client.post("/api/login", json=credentials)
        assert response.status_code == 401

    # The 11th request should be rate limited
    response = await client.post("/api/login", json=credentials)
    assert response.status_code == 429
    assert response.json()["error"] == "Rate limit exceeded"
