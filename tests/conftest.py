"""Pytest configuration and fixtures for roktosheba.

Required settings are set in the environment before the app is imported.
HTTP tests run against a fresh create_app() with Firestore repositories and
the payment gateway swapped for in-memory fakes via dependency_overrides.
ASGITransport does not run the lifespan, so no outbound client is built.
"""

import json
import os
from dataclasses import dataclass, field

os.environ.setdefault(
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    json.dumps({"type": "service_account", "project_id": "roktosheba-test"}),
)
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_roktosheba")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from roktosheba.api import dependencies  # noqa: E402
from roktosheba.core.config import get_settings  # noqa: E402
from roktosheba.main import create_app  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakePaymentGateway,
    InMemoryBlogRepository,
    InMemoryContactRepository,
    InMemoryDonationRepository,
    InMemoryFundingRepository,
    InMemoryUserRepository,
)


@dataclass
class FakeStores:
    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    donations: InMemoryDonationRepository = field(default_factory=InMemoryDonationRepository)
    blogs: InMemoryBlogRepository = field(default_factory=InMemoryBlogRepository)
    fundings: InMemoryFundingRepository = field(default_factory=InMemoryFundingRepository)
    contacts: InMemoryContactRepository = field(default_factory=InMemoryContactRepository)
    payments: FakePaymentGateway = field(default_factory=FakePaymentGateway)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings for every test so monkeypatched env takes effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stores() -> FakeStores:
    return FakeStores()


@pytest.fixture
def app(stores: FakeStores):
    application = create_app()
    overrides = application.dependency_overrides
    overrides[dependencies.get_user_repo] = lambda: stores.users
    overrides[dependencies.get_donation_repo] = lambda: stores.donations
    overrides[dependencies.get_blog_repo] = lambda: stores.blogs
    overrides[dependencies.get_funding_repo] = lambda: stores.fundings
    overrides[dependencies.get_contact_repo] = lambda: stores.contacts
    overrides[dependencies.get_payment_gateway] = lambda: stores.payments
    return application


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register_user(client: AsyncClient):
    """POST /users and return the new user ID."""

    async def _register(email: str, **fields) -> str:
        response = await client.post("/users", json={"email": email, **fields})
        assert response.status_code == 200, response.text
        return response.json()["insertedId"]

    return _register
