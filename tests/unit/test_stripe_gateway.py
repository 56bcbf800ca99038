"""Stripe gateway against httpx.MockTransport."""

from urllib.parse import parse_qs

import httpx
import pytest

from roktosheba.domain.exceptions import PaymentProviderException
from roktosheba.infrastructure.external.payments import StripePaymentGateway


def _gateway(handler) -> StripePaymentGateway:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return StripePaymentGateway(
        "sk_test_123",
        currency="bdt",
        api_base="https://stripe.test/v1/",
        http_client=http,
    )


async def test_creates_intent_and_returns_client_secret() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "pi_1", "client_secret": "pi_1_secret_abc"})

    secret = await _gateway(handler).create_payment_intent(2500)

    assert secret == "pi_1_secret_abc"
    request = seen[0]
    assert str(request.url) == "https://stripe.test/v1/payment_intents"
    assert request.headers["Authorization"] == "Bearer sk_test_123"
    form = parse_qs(request.content.decode())
    assert form["amount"] == ["2500"]
    assert form["currency"] == ["bdt"]
    assert form["payment_method_types[0]"] == ["card"]


async def test_provider_error_message_is_passed_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            402,
            json={"error": {"message": "Your card was declined.", "code": "card_declined"}},
        )

    with pytest.raises(PaymentProviderException) as exc_info:
        await _gateway(handler).create_payment_intent(100)
    assert exc_info.value.message == "Your card was declined."
    assert exc_info.value.details == {"provider_code": "card_declined"}


async def test_non_json_error_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="upstream exploded")

    with pytest.raises(PaymentProviderException) as exc_info:
        await _gateway(handler).create_payment_intent(100)
    assert exc_info.value.message == "Payment provider returned 500"


async def test_unreachable_provider() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("slow", request=request)

    with pytest.raises(PaymentProviderException) as exc_info:
        await _gateway(handler).create_payment_intent(100)
    assert exc_info.value.message == "Payment provider unreachable"


async def test_missing_client_secret() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": "pi_2"})

    with pytest.raises(PaymentProviderException):
        await _gateway(handler).create_payment_intent(100)
