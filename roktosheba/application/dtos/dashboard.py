"""DTOs for dashboard aggregation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    """Counts recomputed on every request (no caching)."""

    total_donors: int
    total_donation_requests: int
    total_funding: float
