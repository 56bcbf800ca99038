"""Liveness schema."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Body of GET /health. The process answers without touching Firestore."""

    status: Literal["ok"] = "ok"
