"""Shared plumbing for Firestore repositories (filtering, paging, field mapping)."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, ClassVar, TypeVar

from roktosheba.application.dtos.common import Page
from roktosheba.infrastructure.firebase._rest_client import (
    DESCENDING,
    FirestoreRESTClient,
    _Query,
)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def enum_or_default(enum_cls: type[E], raw: Any, default: E) -> E:
    """Parse a stored enum value; unknown or missing values fall back to default."""
    try:
        return enum_cls(raw)
    except ValueError:
        return default


class FirestoreRepository:
    """Base for collection-backed repositories.

    Subclasses set collection_name and, when stored field names differ from
    DTO attribute names, field_map (attribute -> stored field).
    """

    collection_name: ClassVar[str]
    field_map: ClassVar[Mapping[str, str]] = {}

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(self.collection_name)

    def _to_fields(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Translate DTO attribute names to stored field names."""
        return {self.field_map.get(k, k): v for k, v in values.items()}

    def _filtered(self, filters: Mapping[str, Any]) -> _Query:
        """Query with an equality filter per non-None value (stored field names)."""
        q = self._coll.query()
        for field, value in filters.items():
            if value is not None:
                q = q.where(field, "==", value)
        return q

    async def _list(
        self,
        filters: Mapping[str, Any],
        to_result: Callable[[str, dict], T],
        order_field: str | None = None,
    ) -> list[T]:
        q = self._filtered(filters)
        if order_field is not None:
            q = q.order_by(order_field, DESCENDING)
        return [to_result(s.id, s.to_dict()) async for s in q.stream()]

    async def _page(
        self,
        filters: Mapping[str, Any],
        to_result: Callable[[str, dict], T],
        order_field: str,
        skip: int,
        limit: int,
    ) -> Page[T]:
        """Return one newest-first page plus the filtered total (count aggregation)."""
        total = await self._filtered(filters).count()
        q = (
            self._filtered(filters)
            .order_by(order_field, DESCENDING)
            .offset(skip)
            .limit(limit)
        )
        items = [to_result(s.id, s.to_dict()) async for s in q.stream()]
        return Page(items=items, total=total)
