"""Shared DTOs (pagination)."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """0-indexed page request. skip = page * limit."""

    page: int = 0
    limit: int = 10

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")

    @property
    def skip(self) -> int:
        return self.page * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of matches for the filter."""

    items: list[T]
    total: int
