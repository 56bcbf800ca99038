"""Dashboard stats schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardStatsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    total_donors: int
    total_donation_requests: int
    total_funding: float
