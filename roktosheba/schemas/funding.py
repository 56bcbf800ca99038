"""Funding and payment API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from roktosheba.application.dtos.funding import FundingCreate

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaymentIntentRequest(BaseModel):
    model_config = ConfigDict(**_CAMEL, extra="forbid")

    amount_in_cents: int = Field(..., gt=0)


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL)

    client_secret: str


class FundingCreateRequest(BaseModel):
    """Request body for POST /fundings. The date is stamped by the server."""

    model_config = ConfigDict(**_CAMEL, extra="forbid")

    user_id: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)

    def to_dto(self) -> FundingCreate:
        return FundingCreate(user_id=self.user_id, amount=self.amount)


class FundingResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL, from_attributes=True)

    id: str = Field(..., alias="_id")
    user_id: str
    amount: float
    date: datetime | None = None


class FundingPageResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL)

    fundings: list[FundingResponse]
    total_count: int
