"""Firestore-backed blog repository (implements IBlogRepository)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from roktosheba.application.dtos.blog import BlogPostCreate, BlogPostResult
from roktosheba.application.dtos.common import Page
from roktosheba.domain.enums import BlogStatus
from roktosheba.infrastructure.firebase.collections import COLLECTION_BLOGS
from roktosheba.infrastructure.firebase.repositories.base import (
    FirestoreRepository,
    enum_or_default,
)
from roktosheba.shared.utils.generators import generate_cuid


def _to_result(doc_id: str, data: dict) -> BlogPostResult:
    return BlogPostResult(
        id=doc_id,
        title=data.get("title") or "",
        thumbnail=data.get("thumbnail") or "",
        content=data.get("content") or "",
        author_email=data.get("authorEmail") or "",
        status=enum_or_default(BlogStatus, data.get("status"), BlogStatus.DRAFT),
        created_at=data.get("createdAt"),
    )


class FirestoreBlogRepository(FirestoreRepository):
    """Blog posts; new posts are always stored as drafts."""

    collection_name = COLLECTION_BLOGS
    field_map = {"author_email": "authorEmail", "created_at": "createdAt"}

    async def create(self, data: BlogPostCreate, created_at: datetime) -> str:
        post_id = generate_cuid()
        await self._coll.document(post_id).set({
            "title": data.title,
            "thumbnail": data.thumbnail,
            "content": data.content,
            "authorEmail": data.author_email,
            "status": BlogStatus.DRAFT.value,
            "createdAt": created_at,
        })
        return post_id

    async def list_all(self, status: BlogStatus | None = None) -> list[BlogPostResult]:
        return await self._list(
            {"status": status.value if status else None},
            _to_result,
            order_field="createdAt",
        )

    async def list_page(
        self, skip: int, limit: int, status: BlogStatus | None = None
    ) -> Page[BlogPostResult]:
        return await self._page(
            {"status": status.value if status else None},
            _to_result,
            "createdAt",
            skip,
            limit,
        )

    async def update(self, post_id: str, fields: dict[str, Any]) -> BlogPostResult | None:
        doc = await self._coll.document(post_id).update(self._to_fields(fields))
        if doc is None:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def delete(self, post_id: str) -> bool:
        return await self._coll.document(post_id).delete(must_exist=True)
