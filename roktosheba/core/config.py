"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (Firestore credentials, payment key)
are validated at load time so a misconfigured process fails on startup.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (Firestore service account and Stripe secret key).
    """

    # App
    app_name: str = "roktosheba"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS
    allowed_origins: str = "*"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # Payment provider (Stripe REST API)
    stripe_secret_key: SecretStr = SecretStr("")
    stripe_api_base: str = "https://api.stripe.com/v1"
    payment_currency: str = "usd"

    # Outbound HTTP (Firestore and Stripe share this timeout)
    http_timeout_seconds: float = 30.0

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Listing
    default_page_limit: int = 10
    max_page_limit: int = 100
    random_donor_sample_size: int = 3

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required credentials.

        - Firestore: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH required.
        - Payments: STRIPE_SECRET_KEY required.
        """
        has_key = (
            self.firebase_service_account_key
            and self.firebase_service_account_key.get_secret_value()
        )
        if not has_key and not self.firebase_service_account_path:
            raise ValueError(
                "Set FIREBASE_SERVICE_ACCOUNT_KEY (full JSON string) "
                "or FIREBASE_SERVICE_ACCOUNT_PATH (path to JSON file)."
            )
        if not self.stripe_secret_key.get_secret_value():
            raise ValueError(
                "STRIPE_SECRET_KEY is required to create payment intents. "
                "Set in environment or .env file."
            )
        if self.default_page_limit < 1 or self.max_page_limit < self.default_page_limit:
            raise ValueError(
                "default_page_limit must be >= 1 and <= max_page_limit"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
