"""Raw ASGI middleware."""

from roktosheba.middleware.request_id import RequestIDMiddleware
from roktosheba.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
