"""Request correlation middleware.

Every HTTP request gets a correlation ID: the client's header value when it
is a well-formed identifier, otherwise a fresh UUID. The ID is bound to the
logging context for the lifetime of the request (so every log line emitted
while serving it carries the ID), stored on scope["state"] and echoed on the
response.
"""

import logging
import uuid
from typing import Callable

from roktosheba.core.identifiers import is_valid_document_id
from roktosheba.shared.logging import request_id_var

logger = logging.getLogger(__name__)


def _header_value(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1").strip()
    return None


def resolve_request_id(raw: str | None) -> str:
    """Accept the same alphabet as document IDs; anything else is replaced."""
    if raw and is_valid_document_id(raw):
        return raw
    return uuid.uuid4().hex


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap an ASGI app so each HTTP request runs under its correlation ID."""
    header_key = header_name.lower().encode()
    header_out = header_name.encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(_header_value(scope, header_key))
        scope.setdefault("state", {})["request_id"] = request_id
        token = request_id_var.set(request_id)

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_out, request_id.encode()),
                ]
                logger.debug(
                    "%s %s -> %s", scope.get("method"), scope.get("path"), message.get("status")
                )
            await send(message)

        try:
            await app(scope, receive, send_with_id)
        finally:
            request_id_var.reset(token)

    return asgi_app
