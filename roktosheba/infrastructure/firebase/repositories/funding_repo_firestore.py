"""Firestore-backed funding repository (implements IFundingRepository)."""

from __future__ import annotations

from datetime import datetime

from roktosheba.application.dtos.common import Page
from roktosheba.application.dtos.funding import FundingCreate, FundingResult
from roktosheba.infrastructure.firebase.collections import COLLECTION_FUNDINGS
from roktosheba.infrastructure.firebase.repositories.base import FirestoreRepository
from roktosheba.shared.utils.generators import generate_cuid


def _to_result(doc_id: str, data: dict) -> FundingResult:
    return FundingResult(
        id=doc_id,
        user_id=data.get("userId", ""),
        amount=float(data.get("amount") or 0),
        date=data.get("date"),
    )


class FirestoreFundingRepository(FirestoreRepository):
    """Append-only funding entries."""

    collection_name = COLLECTION_FUNDINGS

    async def create(self, data: FundingCreate, date: datetime) -> str:
        funding_id = generate_cuid()
        await self._coll.document(funding_id).set({
            "userId": data.user_id,
            "amount": data.amount,
            "date": date,
        })
        return funding_id

    async def list_page(self, skip: int, limit: int) -> Page[FundingResult]:
        return await self._page({}, _to_result, "date", skip, limit)

    async def total_amount(self) -> float:
        return float(await self._coll.query().sum("amount"))
