"""API router aggregation.

Routes are mounted at the root (no version prefix); paths are part of the
public contract used by the web client.
"""

from fastapi import APIRouter

from roktosheba.api.endpoints import (
    blogs,
    contact,
    dashboard,
    donations,
    fundings,
    health,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(users.router, tags=["users"])
api_router.include_router(donations.router, tags=["donations"])
api_router.include_router(blogs.router, tags=["blogs"])
api_router.include_router(fundings.router, tags=["fundings"])
api_router.include_router(contact.router, tags=["contact"])
api_router.include_router(dashboard.router, tags=["dashboard"])
