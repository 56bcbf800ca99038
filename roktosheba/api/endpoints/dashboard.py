"""Dashboard API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from roktosheba.api.dependencies import get_dashboard_aggregator
from roktosheba.application.services import DashboardAggregator
from roktosheba.schemas.dashboard import DashboardStatsResponse

router = APIRouter()


@router.get("/dashboard-stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    aggregator: Annotated[DashboardAggregator, Depends(get_dashboard_aggregator)],
):
    """Totals recomputed on every call."""
    return DashboardStatsResponse.model_validate(await aggregator.stats())
