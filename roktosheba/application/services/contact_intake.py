"""Contact intake: append-only contact-form submissions."""

from __future__ import annotations

import logging

from roktosheba.application.dtos.contact import ContactMessageCreate
from roktosheba.application.interfaces.repositories import IContactRepository
from roktosheba.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class ContactIntake:
    def __init__(self, contact_repo: IContactRepository) -> None:
        self._contact_repo = contact_repo

    async def submit(self, data: ContactMessageCreate) -> str:
        message_id = await self._contact_repo.create(data, created_at=utc_now())
        logger.info("Stored contact message %s", message_id)
        return message_id
