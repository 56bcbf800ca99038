"""Funding: payment intents through the provider and recorded contributions."""

from __future__ import annotations

import logging

from roktosheba.application.dtos.common import Page, PageRequest
from roktosheba.application.dtos.funding import FundingCreate, FundingResult
from roktosheba.application.interfaces.repositories import IFundingRepository
from roktosheba.application.interfaces.services import IPaymentGateway
from roktosheba.domain.exceptions import ValidationException
from roktosheba.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class FundingService:
    """Payment intents and funding entries are independent: recording a funding
    entry does not verify that a payment succeeded."""

    def __init__(
        self,
        funding_repo: IFundingRepository,
        payment_gateway: IPaymentGateway,
    ) -> None:
        self._funding_repo = funding_repo
        self._payment_gateway = payment_gateway

    async def create_payment_intent(self, amount_in_cents: int) -> str:
        """Return the provider's client secret for a new payment intent."""
        if amount_in_cents <= 0:
            raise ValidationException("amountInCents must be positive", field="amountInCents")
        return await self._payment_gateway.create_payment_intent(amount_in_cents)

    async def record_funding(self, data: FundingCreate) -> str:
        if not data.user_id:
            raise ValidationException("userId is required", field="userId")
        if data.amount is None or data.amount <= 0:
            raise ValidationException("amount must be positive", field="amount")
        funding_id = await self._funding_repo.create(data, date=utc_now())
        logger.info("Recorded funding %s of %s from %s", funding_id, data.amount, data.user_id)
        return funding_id

    async def list_fundings(self, page: PageRequest) -> Page[FundingResult]:
        return await self._funding_repo.list_page(page.skip, page.limit)
