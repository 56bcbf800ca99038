"""DTOs for contact intake."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactMessageCreate:
    name: str
    email: str
    message: str
    telephone: str | None = None
