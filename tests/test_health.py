"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_root_returns_plain_text(client: AsyncClient) -> None:
    """GET / returns the plain-text running banner."""
    response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "RoktoSheba Server is Running"
    assert "text/plain" in response.headers.get("content-type", "")


async def test_health_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers.get("X-Request-ID")


async def test_safe_request_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "bad id\nwith newline"})
    assert response.headers["X-Request-ID"] != "bad id\nwith newline"


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    response = await client.get("/no-such-route")
    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"
