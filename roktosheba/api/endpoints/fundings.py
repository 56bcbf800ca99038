"""Funding and payment API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from roktosheba.api.dependencies import get_funding_service, get_page_request
from roktosheba.application.dtos.common import PageRequest
from roktosheba.application.services import FundingService
from roktosheba.schemas.common import InsertResponse
from roktosheba.schemas.funding import (
    FundingCreateRequest,
    FundingPageResponse,
    FundingResponse,
    PaymentIntentRequest,
    PaymentIntentResponse,
)

router = APIRouter()

Funding = Annotated[FundingService, Depends(get_funding_service)]


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(body: PaymentIntentRequest, funding: Funding):
    """Create a provider payment intent and return its client secret."""
    secret = await funding.create_payment_intent(body.amount_in_cents)
    return PaymentIntentResponse(client_secret=secret)


@router.post("/fundings", response_model=InsertResponse)
async def record_funding(body: FundingCreateRequest, funding: Funding):
    return InsertResponse(inserted_id=await funding.record_funding(body.to_dto()))


@router.get("/fundings", response_model=FundingPageResponse)
async def list_fundings(
    funding: Funding,
    page: Annotated[PageRequest, Depends(get_page_request)],
):
    result = await funding.list_fundings(page)
    return FundingPageResponse(
        fundings=[FundingResponse.model_validate(f) for f in result.items],
        total_count=result.total,
    )
