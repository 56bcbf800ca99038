"""Payment provider integration."""

from roktosheba.infrastructure.external.payments.stripe_gateway import StripePaymentGateway

__all__ = ["StripePaymentGateway"]
