"""Settings validation."""

import pytest
from pydantic import ValidationError

from roktosheba.core.config import Settings, get_settings


def test_loads_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PAYMENT_CURRENCY", "bdt")
    settings = get_settings()
    assert settings.port == 8080
    assert settings.payment_currency == "bdt"
    assert settings.default_page_limit == 10
    assert settings.max_page_limit == 100


def test_missing_firestore_credentials_fail(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_KEY", raising=False)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_PATH", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_missing_stripe_key_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_page_limits_must_be_consistent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_PAGE_LIMIT", "50")
    monkeypatch.setenv("MAX_PAGE_LIMIT", "20")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
