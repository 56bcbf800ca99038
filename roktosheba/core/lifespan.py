"""Application lifespan: startup and shutdown.

Wiring only: builds the shared outbound HTTP client, the Firestore client
and the payment gateway, stores them on app.state, and closes them on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from roktosheba.core.config import get_settings
from roktosheba.infrastructure.external.payments import StripePaymentGateway
from roktosheba.infrastructure.firebase import create_firestore_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup fails fast when Firestore credentials cannot be loaded.
    """
    settings = get_settings()

    # ---- Startup ----
    # One pooled HTTP client for Firestore and Stripe.
    http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    app.state.http_client = http_client
    try:
        app.state.firestore = create_firestore_client(settings, http_client=http_client)
    except ValueError:
        await http_client.aclose()
        raise
    app.state.payment_gateway = StripePaymentGateway(
        settings.stripe_secret_key.get_secret_value(),
        currency=settings.payment_currency,
        api_base=settings.stripe_api_base,
        http_client=http_client,
    )
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await app.state.payment_gateway.aclose()
    await app.state.firestore.aclose()
    await http_client.aclose()
    app.state.firestore = None
    app.state.payment_gateway = None
    app.state.http_client = None
    logger.info("Outbound HTTP clients closed")
