"""Firestore-backed donation request repository (implements IDonationRepository).

Stored documents use the camelCase field names existing clients read
(requesterEmail, assignedDonor, createdAt, ...).
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from roktosheba.application.dtos.common import Page
from roktosheba.application.dtos.donation import (
    AssignmentRecord,
    DonationRequestCreate,
    DonationRequestResult,
)
from roktosheba.application.dtos.user import DonorSnapshot
from roktosheba.domain.enums import DonationStatus
from roktosheba.infrastructure.firebase._rest_client import FirestoreRESTClient
from roktosheba.infrastructure.firebase.collections import (
    COLLECTION_DONATIONS,
    COLLECTION_DONOR_ASSIGNMENTS,
)
from roktosheba.infrastructure.firebase.repositories.base import (
    FirestoreRepository,
    enum_or_default,
)
from roktosheba.shared.utils.generators import generate_cuid

_DONATION_FIELDS: dict[str, str] = {
    "requester_email": "requesterEmail",
    "requester_name": "requesterName",
    "recipient_name": "recipientName",
    "recipient_district": "recipientDistrict",
    "recipient_upazila": "recipientUpazila",
    "hospital_name": "hospitalName",
    "full_address": "fullAddress",
    "blood_group": "bloodGroup",
    "donation_date": "donationDate",
    "donation_time": "donationTime",
    "request_message": "requestMessage",
    "donor_email": "donorEmail",
    "assigned_donor": "assignedDonor",
    "created_at": "createdAt",
}


def snapshot_to_doc(snapshot: DonorSnapshot) -> dict[str, Any]:
    """Stored form of a donor snapshot (map field)."""
    return {
        "_id": snapshot.id,
        "email": snapshot.email,
        "name": snapshot.name,
        "blood_group": snapshot.blood_group,
        "district": snapshot.district,
        "upazila": snapshot.upazila,
        "phone": snapshot.phone,
        "avatar": snapshot.avatar,
    }


def snapshot_from_doc(data: dict | None) -> DonorSnapshot | None:
    if not data:
        return None
    return DonorSnapshot(
        id=data.get("_id", ""),
        email=data.get("email", ""),
        name=data.get("name"),
        blood_group=data.get("blood_group"),
        district=data.get("district"),
        upazila=data.get("upazila"),
        phone=data.get("phone"),
        avatar=data.get("avatar"),
    )


def _to_result(doc_id: str, data: dict) -> DonationRequestResult:
    return DonationRequestResult(
        id=doc_id,
        requester_email=data.get("requesterEmail") or "",
        status=enum_or_default(DonationStatus, data.get("status"), DonationStatus.PENDING),
        requester_name=data.get("requesterName"),
        recipient_name=data.get("recipientName"),
        recipient_district=data.get("recipientDistrict"),
        recipient_upazila=data.get("recipientUpazila"),
        hospital_name=data.get("hospitalName"),
        full_address=data.get("fullAddress"),
        blood_group=data.get("bloodGroup"),
        donation_date=data.get("donationDate"),
        donation_time=data.get("donationTime"),
        request_message=data.get("requestMessage"),
        donor_email=data.get("donorEmail"),
        assigned_donor=snapshot_from_doc(data.get("assignedDonor")),
        created_at=data.get("createdAt"),
    )


class FirestoreDonationRepository(FirestoreRepository):
    """Donation request ledger plus the append-only donor assignment log."""

    collection_name = COLLECTION_DONATIONS
    field_map = _DONATION_FIELDS

    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client)
        self._assignments = client.collection(COLLECTION_DONOR_ASSIGNMENTS)

    async def create(self, data: DonationRequestCreate, created_at: datetime) -> str:
        donation_id = generate_cuid()
        values = {k: v for k, v in asdict(data).items() if v is not None}
        values["created_at"] = created_at
        await self._coll.document(donation_id).set(self._to_fields(values))
        return donation_id

    async def get_by_id(self, donation_id: str) -> DonationRequestResult | None:
        doc = await self._coll.document(donation_id).get()
        if not doc:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def list_all(
        self, status: DonationStatus | None = None
    ) -> list[DonationRequestResult]:
        return await self._list(
            {"status": status.value if status else None},
            _to_result,
            order_field="createdAt",
        )

    async def list_page(
        self,
        skip: int,
        limit: int,
        *,
        status: DonationStatus | None = None,
        requester_email: str | None = None,
    ) -> Page[DonationRequestResult]:
        filters = {
            "requesterEmail": requester_email,
            "status": status.value if status else None,
        }
        return await self._page(filters, _to_result, "createdAt", skip, limit)

    async def update(
        self, donation_id: str, fields: dict[str, Any]
    ) -> DonationRequestResult | None:
        doc = await self._coll.document(donation_id).update(self._to_fields(fields))
        if doc is None:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def delete(self, donation_id: str) -> bool:
        return await self._coll.document(donation_id).delete(must_exist=True)

    async def assign_donor(
        self, donation_id: str, donor: DonorSnapshot, assigned_at: datetime
    ) -> AssignmentRecord | None:
        """Set assignment on the request and append the log entry in one commit.

        The request update carries an exists=true precondition; if the request
        is gone the whole commit is rejected and nothing is written.
        """
        record_id = generate_cuid()
        snapshot = snapshot_to_doc(donor)
        batch = self._client.batch()
        batch.update(
            self._coll.document(donation_id),
            {
                "assignedDonor": snapshot,
                "donorEmail": donor.email,
                "status": DonationStatus.IN_PROGRESS.value,
            },
        )
        batch.create(
            self._assignments.document(record_id),
            {
                "donationId": donation_id,
                "donorId": donor.id,
                "donorEmail": donor.email,
                "donor": snapshot,
                "assignedAt": assigned_at,
            },
        )
        if not await batch.commit():
            return None
        return AssignmentRecord(
            id=record_id,
            donation_id=donation_id,
            donor_id=donor.id,
            donor_email=donor.email,
            donor=donor,
            assigned_at=assigned_at,
        )

    async def count(self) -> int:
        return await self._coll.count()
