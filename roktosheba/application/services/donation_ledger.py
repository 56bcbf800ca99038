"""Donation request ledger and donor assignment."""

from __future__ import annotations

import logging
from typing import Any

from roktosheba.application.dtos.common import Page, PageRequest
from roktosheba.application.dtos.donation import (
    AssignmentRecord,
    DonationRequestCreate,
    DonationRequestResult,
)
from roktosheba.application.dtos.user import DonorSnapshot
from roktosheba.application.interfaces.repositories import (
    IDonationRepository,
    IUserRepository,
)
from roktosheba.core.identifiers import require_document_id
from roktosheba.domain.enums import DonationStatus
from roktosheba.domain.exceptions import (
    DonorUnavailableException,
    ResourceNotFoundException,
    ValidationException,
)
from roktosheba.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# Stored fields a PATCH may not touch (identity, assignment and creation stamp).
_READ_ONLY_FIELDS = frozenset({"id", "_id", "assigned_donor", "created_at"})


class DonationLedger:
    """CRUD over donation requests plus the donor assignment operation."""

    def __init__(
        self,
        donation_repo: IDonationRepository,
        user_repo: IUserRepository,
    ) -> None:
        self._donation_repo = donation_repo
        self._user_repo = user_repo

    async def create(self, data: DonationRequestCreate) -> str:
        donation_id = await self._donation_repo.create(data, created_at=utc_now())
        logger.info("Created donation request %s for %s", donation_id, data.requester_email)
        return donation_id

    async def get(self, donation_id: str) -> DonationRequestResult:
        require_document_id(donation_id)
        donation = await self._donation_repo.get_by_id(donation_id)
        if donation is None:
            raise ResourceNotFoundException("donation", donation_id)
        return donation

    async def list(self, status: DonationStatus | None = None) -> list[DonationRequestResult]:
        return await self._donation_repo.list_all(status)

    async def list_mine(
        self,
        email: str,
        page: PageRequest,
        status: DonationStatus | None = None,
    ) -> Page[DonationRequestResult]:
        if not email:
            raise ValidationException("email is required", field="email")
        return await self._donation_repo.list_page(
            page.skip, page.limit, status=status, requester_email=email
        )

    async def list_all(
        self, page: PageRequest, status: DonationStatus | None = None
    ) -> Page[DonationRequestResult]:
        return await self._donation_repo.list_page(page.skip, page.limit, status=status)

    async def update(self, donation_id: str, fields: dict[str, Any]) -> DonationRequestResult:
        """Merge fields into the request. Identifier and assignment fields are ignored."""
        require_document_id(donation_id)
        updates = {k: v for k, v in fields.items() if k not in _READ_ONLY_FIELDS}
        if not updates:
            raise ValidationException("No fields to update")
        donation = await self._donation_repo.update(donation_id, updates)
        if donation is None:
            raise ResourceNotFoundException("donation", donation_id)
        logger.info("Updated donation request %s: %s", donation_id, sorted(updates))
        return donation

    async def update_status(
        self, donation_id: str, status: DonationStatus
    ) -> DonationRequestResult:
        return await self.update(donation_id, {"status": status})

    async def delete(self, donation_id: str) -> None:
        require_document_id(donation_id)
        if not await self._donation_repo.delete(donation_id):
            raise ResourceNotFoundException("donation", donation_id)
        logger.info("Deleted donation request %s", donation_id)

    async def assign_donor(self, donation_id: str, donor_email: str) -> AssignmentRecord:
        """Assign an active donor to a request.

        The donor is checked first, so an unknown or inactive donor leaves the
        request untouched. The request update and the assignment record are
        then written in a single atomic commit by the repository.
        """
        require_document_id(donation_id)
        if not donor_email:
            raise ValidationException("donorEmail is required", field="donorEmail")
        donor = await self._user_repo.get_by_email(donor_email)
        if donor is None or not donor.is_active_donor:
            raise DonorUnavailableException(donor_email)
        record = await self._donation_repo.assign_donor(
            donation_id, DonorSnapshot.from_user(donor), assigned_at=utc_now()
        )
        if record is None:
            raise ResourceNotFoundException("donation", donation_id)
        logger.info(
            "Assigned donor %s to donation %s (record %s)",
            donor.id,
            donation_id,
            record.id,
        )
        return record
