"""Service interfaces (ports) for external collaborators."""

from __future__ import annotations

from typing import Protocol


class IPaymentGateway(Protocol):
    """Protocol for the external payment provider."""

    async def create_payment_intent(self, amount_in_cents: int) -> str:
        """Create a payment intent for the amount; return its client secret.

        Raises PaymentProviderException with the provider's message on failure.
        """
