"""Health check endpoint. No dependencies; used for liveness checks."""

from fastapi import APIRouter

from roktosheba.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()
