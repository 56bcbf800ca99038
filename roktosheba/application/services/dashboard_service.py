"""Dashboard aggregation, recomputed on every call."""

from __future__ import annotations

import asyncio

from roktosheba.application.dtos.dashboard import DashboardStats
from roktosheba.application.interfaces.repositories import (
    IDonationRepository,
    IFundingRepository,
    IUserRepository,
)


class DashboardAggregator:
    def __init__(
        self,
        user_repo: IUserRepository,
        donation_repo: IDonationRepository,
        funding_repo: IFundingRepository,
    ) -> None:
        self._user_repo = user_repo
        self._donation_repo = donation_repo
        self._funding_repo = funding_repo

    async def stats(self) -> DashboardStats:
        """Donor count, donation request count and funding total (server-side aggregations)."""
        donors, requests, funding = await asyncio.gather(
            self._user_repo.count_donors(),
            self._donation_repo.count(),
            self._funding_repo.total_amount(),
        )
        return DashboardStats(
            total_donors=donors,
            total_donation_requests=requests,
            total_funding=float(funding),
        )
