"""Central exception handlers: status mapping and response bodies."""

from httpx import AsyncClient

from roktosheba.api import dependencies
from roktosheba.infrastructure.exceptions import DocumentStoreError
from tests.fakes import InMemoryUserRepository


class _BrokenUserRepository(InMemoryUserRepository):
    async def get_by_email(self, email: str):
        raise DocumentStoreError("POST", 503)


async def test_store_failure_returns_generic_500(app, client: AsyncClient) -> None:
    app.dependency_overrides[dependencies.get_user_repo] = _BrokenUserRepository
    response = await client.get("/users/a@x.com")
    assert response.status_code == 500
    assert response.json() == {
        "error": "INTERNAL_ERROR",
        "message": "Internal server error",
        "details": {},
    }


async def test_body_validation_is_bad_request_with_details(client: AsyncClient) -> None:
    response = await client.post("/create-payment-intent", json={"amountInCents": "lots"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "BAD_REQUEST"
    assert body["details"]["errors"][0]["loc"][-1] == "amountInCents"


async def test_unknown_body_field_is_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/fundings", json={"userId": "u1", "amount": 5, "currency": "usd"}
    )
    assert response.status_code == 400


async def test_missing_firestore_client_is_internal_error(app, client: AsyncClient) -> None:
    """Without the lifespan there is no client on app.state."""
    del app.dependency_overrides[dependencies.get_blog_repo]
    response = await client.get("/blogs")
    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"
