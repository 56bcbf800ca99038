"""Stripe payment gateway over the REST API (implements IPaymentGateway).

Creates PaymentIntents with a form-encoded POST to /v1/payment_intents and
returns the client secret the browser needs to confirm the payment.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from roktosheba.domain.exceptions import PaymentProviderException

logger = logging.getLogger(__name__)


class StripePaymentGateway:
    """Thin Stripe client sharing one httpx.AsyncClient for all requests."""

    PAYMENT_METHOD_TYPES = ("card",)

    def __init__(
        self,
        secret_key: str,
        *,
        currency: str = "usd",
        api_base: str = "https://api.stripe.com/v1",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._secret_key = secret_key
        self._currency = currency
        self._api_base = api_base.rstrip("/")
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it."""
        if self._owns_http:
            await self._http.aclose()

    async def create_payment_intent(self, amount_in_cents: int) -> str:
        """Create a PaymentIntent and return its client_secret.

        Raises:
            PaymentProviderException: Transport failure or Stripe error
                (Stripe's error message is passed through).
        """
        data: dict[str, Any] = {
            "amount": str(amount_in_cents),
            "currency": self._currency,
        }
        for i, method in enumerate(self.PAYMENT_METHOD_TYPES):
            data[f"payment_method_types[{i}]"] = method
        try:
            response = await self._http.post(
                f"{self._api_base}/payment_intents",
                data=data,
                headers={"Authorization": f"Bearer {self._secret_key}"},
            )
        except httpx.HTTPError as e:
            logger.error("Stripe request failed: %s", e)
            raise PaymentProviderException("Payment provider unreachable") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if response.status_code != 200:
            error = body.get("error") or {}
            message = error.get("message") or f"Payment provider returned {response.status_code}"
            logger.warning(
                "Stripe rejected payment intent (status=%s, code=%s)",
                response.status_code,
                error.get("code"),
            )
            raise PaymentProviderException(message, provider_code=error.get("code"))

        client_secret = body.get("client_secret")
        if not client_secret:
            raise PaymentProviderException("Payment provider returned no client secret")
        logger.info("Created payment intent %s for %s cents", body.get("id"), amount_in_cents)
        return client_secret
