"""User directory: registration, profiles, roles, donor search."""

from __future__ import annotations

import logging
import random
from typing import Any

from roktosheba.application.dtos.common import Page, PageRequest
from roktosheba.application.dtos.user import DonorProfile, UserCreate, UserResult
from roktosheba.application.interfaces.repositories import IUserRepository
from roktosheba.core.identifiers import require_document_id
from roktosheba.domain.enums import UserRole, UserStatus
from roktosheba.domain.exceptions import (
    ResourceNotFoundException,
    ValidationException,
)
from roktosheba.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# Fields a user may change on their own profile.
SELF_EDITABLE_FIELDS = frozenset({"name", "avatar", "blood_group", "district", "upazila"})
# Fields an administrator may change on any user. Email is the natural key and stays fixed.
ADMIN_EDITABLE_FIELDS = SELF_EDITABLE_FIELDS | {"phone", "role", "status"}


class UserDirectory:
    """CRUD over user/donor records."""

    def __init__(self, user_repo: IUserRepository, rng: random.Random | None = None) -> None:
        self._user_repo = user_repo
        self._rng = rng or random.Random()

    async def register(self, data: UserCreate) -> UserResult:
        """Create a user. Raises EmailAlreadyRegisteredException on duplicate email."""
        if data.role == UserRole.ADMIN:
            raise ValidationException("Admin accounts cannot be self-registered", field="role")
        user = await self._user_repo.create_user(data, created_at=utc_now())
        logger.info("Registered user %s (role=%s)", user.id, user.role.value)
        return user

    async def get_by_email(self, email: str) -> UserResult:
        user = await self._user_repo.get_by_email(email)
        if user is None:
            raise ResourceNotFoundException("user", email, message="User not found")
        return user

    async def get_role(self, email: str) -> UserRole:
        """Return the user's role (USER when the stored document has none)."""
        return (await self.get_by_email(email)).role

    async def update_own_profile(self, email: str, fields: dict[str, Any]) -> UserResult:
        """Apply whitelisted profile fields; anything else is dropped."""
        updates = {k: v for k, v in fields.items() if k in SELF_EDITABLE_FIELDS}
        if not updates:
            raise ValidationException("No updatable profile fields supplied")
        user = await self._user_repo.update_by_email(email, updates)
        if user is None:
            raise ResourceNotFoundException("user", email, message="User not found")
        return user

    async def admin_update(self, user_id: str, fields: dict[str, Any]) -> UserResult:
        """Apply administrator changes (role, status and profile fields)."""
        require_document_id(user_id)
        if not fields:
            raise ValidationException("No fields to update")
        unknown = set(fields) - ADMIN_EDITABLE_FIELDS
        if unknown:
            raise ValidationException(
                f"Fields not updatable: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        user = await self._user_repo.update(user_id, fields)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        logger.info("Admin updated user %s: %s", user_id, sorted(fields))
        return user

    async def list_users(
        self, page: PageRequest, status: UserStatus | None = None
    ) -> Page[UserResult]:
        return await self._user_repo.list_users(page.skip, page.limit, status)

    async def list_active_donors(self) -> list[UserResult]:
        return await self._user_repo.list_donors(status=UserStatus.ACTIVE)

    async def get_donor_public_profile(self, email: str) -> DonorProfile:
        """Return the public projection of an active donor; NotFound otherwise."""
        user = await self._user_repo.get_by_email(email)
        if user is None or not user.is_active_donor:
            raise ResourceNotFoundException("donor", email, message="Donor not found")
        return DonorProfile.from_user(user)

    async def find_donors(
        self,
        blood_group: str | None = None,
        district: str | None = None,
        upazila: str | None = None,
    ) -> list[UserResult]:
        """Exact-match search over donors; omitted filters match anything."""
        return await self._user_repo.list_donors(
            blood_group=blood_group or None,
            district=district or None,
            upazila=upazila or None,
        )

    async def random_donors(self, n: int = 3) -> list[DonorProfile]:
        """Return up to n active donors sampled uniformly, as public profiles."""
        if n < 1:
            raise ValidationException("Sample size must be at least 1", field="size")
        donors = await self._user_repo.list_donors(status=UserStatus.ACTIVE)
        picked = self._rng.sample(donors, k=min(n, len(donors)))
        return [DonorProfile.from_user(u) for u in picked]
