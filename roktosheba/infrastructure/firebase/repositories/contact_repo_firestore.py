"""Firestore-backed contact message repository (implements IContactRepository)."""

from __future__ import annotations

from datetime import datetime

from roktosheba.application.dtos.contact import ContactMessageCreate
from roktosheba.infrastructure.firebase.collections import COLLECTION_CONTACT_MESSAGES
from roktosheba.infrastructure.firebase.repositories.base import FirestoreRepository
from roktosheba.shared.utils.generators import generate_cuid


class FirestoreContactRepository(FirestoreRepository):
    """Append-only contact-form submissions."""

    collection_name = COLLECTION_CONTACT_MESSAGES

    async def create(self, data: ContactMessageCreate, created_at: datetime) -> str:
        message_id = generate_cuid()
        await self._coll.document(message_id).set({
            "name": data.name,
            "email": data.email,
            "telephone": data.telephone,
            "message": data.message,
            "createdAt": created_at,
        })
        return message_id
