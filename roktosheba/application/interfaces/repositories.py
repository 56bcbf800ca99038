"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Update methods take a dict keyed by DTO attribute names (e.g. blood_group,
requester_email); repositories translate them to stored field names.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from roktosheba.domain.enums import BlogStatus, DonationStatus, UserStatus

if TYPE_CHECKING:
    from roktosheba.application.dtos.blog import BlogPostCreate, BlogPostResult
    from roktosheba.application.dtos.common import Page
    from roktosheba.application.dtos.contact import ContactMessageCreate
    from roktosheba.application.dtos.donation import (
        AssignmentRecord,
        DonationRequestCreate,
        DonationRequestResult,
    )
    from roktosheba.application.dtos.funding import FundingCreate, FundingResult
    from roktosheba.application.dtos.user import DonorSnapshot, UserCreate, UserResult


class IUserRepository(Protocol):
    """Protocol for the user directory store."""

    async def create_user(self, data: UserCreate, created_at: datetime) -> UserResult:
        """Create user; raise EmailAlreadyRegisteredException if the email is taken (atomic)."""

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by email."""

    async def update(self, user_id: str, fields: dict[str, Any]) -> UserResult | None:
        """Merge fields into user; None if not found."""

    async def update_by_email(self, email: str, fields: dict[str, Any]) -> UserResult | None:
        """Merge fields into the user with this email; None if not found."""

    async def list_users(
        self, skip: int, limit: int, status: UserStatus | None = None
    ) -> Page[UserResult]:
        """Return a page of users (newest first by created_at) and the filtered total."""

    async def list_donors(
        self,
        *,
        status: UserStatus | None = None,
        blood_group: str | None = None,
        district: str | None = None,
        upazila: str | None = None,
    ) -> list[UserResult]:
        """Return all donors matching every given exact-match filter."""

    async def count_donors(self) -> int:
        """Return the number of users with role donor."""


class IDonationRepository(Protocol):
    """Protocol for the donation request ledger and its assignment log."""

    async def create(self, data: DonationRequestCreate, created_at: datetime) -> str:
        """Insert a donation request; return its ID."""

    async def get_by_id(self, donation_id: str) -> DonationRequestResult | None:
        """Return donation request by ID."""

    async def list_all(
        self, status: DonationStatus | None = None
    ) -> list[DonationRequestResult]:
        """Return every request matching the optional status (newest first)."""

    async def list_page(
        self,
        skip: int,
        limit: int,
        *,
        status: DonationStatus | None = None,
        requester_email: str | None = None,
    ) -> Page[DonationRequestResult]:
        """Return a page of requests (newest first by createdAt) and the filtered total."""

    async def update(
        self, donation_id: str, fields: dict[str, Any]
    ) -> DonationRequestResult | None:
        """Merge fields into request; None if not found."""

    async def delete(self, donation_id: str) -> bool:
        """Hard delete; False if nothing was deleted."""

    async def assign_donor(
        self, donation_id: str, donor: DonorSnapshot, assigned_at: datetime
    ) -> AssignmentRecord | None:
        """Atomically set the assignment on the request and append an assignment record.

        Returns None (and writes nothing) if the request does not exist.
        """

    async def count(self) -> int:
        """Return the total number of donation requests."""


class IBlogRepository(Protocol):
    """Protocol for blog posts."""

    async def create(self, data: BlogPostCreate, created_at: datetime) -> str:
        """Insert a draft post; return its ID."""

    async def list_all(self, status: BlogStatus | None = None) -> list[BlogPostResult]:
        """Return every post matching the optional status (newest first)."""

    async def list_page(
        self, skip: int, limit: int, status: BlogStatus | None = None
    ) -> Page[BlogPostResult]:
        """Return a page of posts (newest first) and the filtered total."""

    async def update(self, post_id: str, fields: dict[str, Any]) -> BlogPostResult | None:
        """Merge fields into post; None if not found."""

    async def delete(self, post_id: str) -> bool:
        """Delete post; False if nothing was deleted."""


class IFundingRepository(Protocol):
    """Protocol for funding entries."""

    async def create(self, data: FundingCreate, date: datetime) -> str:
        """Insert a funding entry; return its ID."""

    async def list_page(self, skip: int, limit: int) -> Page[FundingResult]:
        """Return a page of entries (newest first by date) and the total."""

    async def total_amount(self) -> float:
        """Return the sum of all funding amounts."""


class IContactRepository(Protocol):
    """Protocol for contact-form submissions."""

    async def create(self, data: ContactMessageCreate, created_at: datetime) -> str:
        """Insert a contact message; return its ID."""
