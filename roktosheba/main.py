"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See roktosheba.core.lifespan and
roktosheba.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from roktosheba.api import api_router
from roktosheba.core.config import get_settings
from roktosheba.core.constants import MESSAGE_ROOT
from roktosheba.core.exception_handlers import register_exception_handlers
from roktosheba.core.lifespan import create_lifespan
from roktosheba.middleware import RequestIDMiddleware, TimeoutMiddleware
from roktosheba.shared.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: timeout → request ID → CORS.
    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        """Plain-text liveness banner."""
        return MESSAGE_ROOT

    return app


app = create_app()
