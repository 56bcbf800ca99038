"""Logging configuration for the application.

Records carry the correlation ID of the request being served (``-`` outside
a request), set by RequestIDMiddleware through ``request_id_var``.
"""

import logging
import sys
from contextvars import ContextVar

from roktosheba.core.config import get_settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

# Outbound clients log every request at INFO (Firestore and Stripe URLs).
_NOISY_LOGGERS = ("httpx", "httpcore", "google.auth")


class RequestIDFilter(logging.Filter):
    """Stamp record.request_id from the current request context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def setup_logging() -> None:
    """Configure application-wide logging on stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO. HTTP client
    loggers stay at WARNING unless debugging.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(log_level if settings.debug else logging.WARNING)
