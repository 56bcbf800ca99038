"""Firestore-backed user repository (implements IUserRepository)."""

from __future__ import annotations

import hashlib
from dataclasses import asdict
from datetime import datetime
from typing import Any

from roktosheba.application.dtos.common import Page
from roktosheba.application.dtos.user import UserCreate, UserResult
from roktosheba.domain.enums import UserRole, UserStatus
from roktosheba.domain.exceptions import EmailAlreadyRegisteredException
from roktosheba.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    FirestoreRESTClient,
)
from roktosheba.infrastructure.firebase.collections import (
    COLLECTION_USER_EMAILS,
    COLLECTION_USERS,
)
from roktosheba.infrastructure.firebase.repositories.base import (
    FirestoreRepository,
    enum_or_default,
)
from roktosheba.shared.utils.generators import generate_cuid


def _email_claim_id(email: str) -> str:
    """Firestore document ID for an email claim (fixed length, no '/')."""
    return hashlib.sha256(email.encode("utf-8")).hexdigest()


def _to_result(doc_id: str, data: dict) -> UserResult:
    return UserResult(
        id=doc_id,
        email=data.get("email") or "",
        role=enum_or_default(UserRole, data.get("role"), UserRole.USER),
        status=enum_or_default(UserStatus, data.get("status"), UserStatus.PENDING),
        name=data.get("name"),
        avatar=data.get("avatar"),
        blood_group=data.get("blood_group"),
        district=data.get("district"),
        upazila=data.get("upazila"),
        phone=data.get("phone"),
        created_at=data.get("created_at"),
    )


class FirestoreUserRepository(FirestoreRepository):
    """User repository using Firestore.

    Email uniqueness: each user document is written in the same commit as an
    email-claim document created with an exists=false precondition, so two
    concurrent registrations of one email cannot both succeed.
    """

    collection_name = COLLECTION_USERS

    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client)
        self._emails = client.collection(COLLECTION_USER_EMAILS)

    async def create_user(self, data: UserCreate, created_at: datetime) -> UserResult:
        """Create user and email claim atomically; raise EmailAlreadyRegisteredException if taken."""
        user_id = generate_cuid()
        doc = {k: v for k, v in asdict(data).items() if v is not None}
        doc["created_at"] = created_at
        batch = self._client.batch()
        batch.create(
            self._emails.document(_email_claim_id(data.email)),
            {"email": data.email, "user_id": user_id, "created_at": created_at},
        )
        batch.create(self._coll.document(user_id), doc)
        try:
            await batch.commit()
        except DocumentExistsError:
            raise EmailAlreadyRegisteredException(data.email) from None
        return _to_result(user_id, doc)

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by email (server-side where query, at most one doc)."""
        q = self._coll.where("email", "==", email).limit(1)
        async for snapshot in q.stream():
            return _to_result(snapshot.id, snapshot.to_dict())
        return None

    async def update(self, user_id: str, fields: dict[str, Any]) -> UserResult | None:
        """Merge fields into user; None if the document does not exist."""
        doc = await self._coll.document(user_id).update(self._to_fields(fields))
        if doc is None:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def update_by_email(self, email: str, fields: dict[str, Any]) -> UserResult | None:
        """Merge fields into the user with this email; None if no such user."""
        user = await self.get_by_email(email)
        if user is None:
            return None
        return await self.update(user.id, fields)

    async def list_users(
        self, skip: int, limit: int, status: UserStatus | None = None
    ) -> Page[UserResult]:
        """Return users newest first with the filtered total."""
        return await self._page(
            {"status": status.value if status else None},
            _to_result,
            "created_at",
            skip,
            limit,
        )

    async def list_donors(
        self,
        *,
        status: UserStatus | None = None,
        blood_group: str | None = None,
        district: str | None = None,
        upazila: str | None = None,
    ) -> list[UserResult]:
        """Return donors matching every given exact-match filter (unpaginated)."""
        filters = {
            "role": UserRole.DONOR.value,
            "status": status.value if status else None,
            "blood_group": blood_group,
            "district": district,
            "upazila": upazila,
        }
        return await self._list(filters, _to_result)

    async def count_donors(self) -> int:
        return await self._coll.where("role", "==", UserRole.DONOR.value).count()
