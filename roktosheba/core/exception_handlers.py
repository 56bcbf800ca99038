"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON bodies of the form {"error", "message", "details"}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roktosheba.core.config import get_settings
from roktosheba.domain.enums import ErrorKind
from roktosheba.domain.exceptions import RoktoShebaException

logger = logging.getLogger(__name__)

# Duplicate-email CONFLICT answers 400; clients match on the "error" field.
_ERROR_CODE_STATUS: dict[str, int] = {
    ErrorKind.BAD_REQUEST.value: 400,
    ErrorKind.NOT_FOUND.value: 404,
    ErrorKind.CONFLICT.value: 400,
    ErrorKind.PAYMENT_PROVIDER_ERROR.value: 502,
    ErrorKind.INTERNAL_ERROR.value: 500,
}

_GENERIC_MESSAGE = "Internal server error"


def _roktosheba_exception_handler(
    request: Request, exc: RoktoShebaException
) -> JSONResponse:
    """Return JSON from RoktoShebaException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.error_code,
            exc.details,
        )
    if status == 500:
        return JSONResponse(
            status_code=500,
            content={"error": exc.error_code, "message": _GENERIC_MESSAGE, "details": {}},
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with pydantic validation error details."""
    return JSONResponse(
        status_code=400,
        content={
            "error": ErrorKind.BAD_REQUEST.value,
            "message": "Request validation failed",
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (unknown route, wrong method)."""
    error = ErrorKind.NOT_FOUND.value if exc.status_code == 404 else "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "message": exc.detail, "details": {}},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else _GENERIC_MESSAGE
    return JSONResponse(
        status_code=500,
        content={"error": ErrorKind.INTERNAL_ERROR.value, "message": detail, "details": {}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: RoktoShebaException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(RoktoShebaException, _roktosheba_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
