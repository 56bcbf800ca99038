"""DTOs for funding entries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FundingCreate:
    user_id: str
    amount: float


@dataclass(frozen=True)
class FundingResult:
    id: str
    user_id: str
    amount: float
    date: datetime | None = None
