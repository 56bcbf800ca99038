"""HTTP routes and their dependencies."""

from roktosheba.api.router import api_router

__all__ = ["api_router"]
