"""Blog store: draft/published posts."""

from __future__ import annotations

import logging
from typing import Any

from roktosheba.application.dtos.blog import BlogPostCreate, BlogPostResult
from roktosheba.application.dtos.common import Page, PageRequest
from roktosheba.application.interfaces.repositories import IBlogRepository
from roktosheba.core.identifiers import require_document_id
from roktosheba.domain.enums import BlogStatus
from roktosheba.domain.exceptions import (
    ResourceNotFoundException,
    ValidationException,
)
from roktosheba.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "thumbnail", "content", "status"})


class BlogStore:
    def __init__(self, blog_repo: IBlogRepository) -> None:
        self._blog_repo = blog_repo

    async def create(self, data: BlogPostCreate) -> str:
        """Store a new post as a draft. All four fields are required."""
        for field in ("title", "thumbnail", "content", "author_email"):
            if not (getattr(data, field) or "").strip():
                raise ValidationException(f"{field} is required", field=field)
        post_id = await self._blog_repo.create(data, created_at=utc_now())
        logger.info("Created blog draft %s by %s", post_id, data.author_email)
        return post_id

    async def list_posts(
        self, page: PageRequest, status: BlogStatus | None = None
    ) -> Page[BlogPostResult]:
        return await self._blog_repo.list_page(page.skip, page.limit, status)

    async def list_published(self) -> list[BlogPostResult]:
        posts = await self._blog_repo.list_all(BlogStatus.PUBLISHED)
        return [p for p in posts if p.status == BlogStatus.PUBLISHED]

    async def update(self, post_id: str, fields: dict[str, Any]) -> BlogPostResult:
        require_document_id(post_id)
        updates = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
        if not updates:
            raise ValidationException("No fields to update")
        post = await self._blog_repo.update(post_id, updates)
        if post is None:
            raise ResourceNotFoundException("blog", post_id)
        logger.info("Updated blog %s: %s", post_id, sorted(updates))
        return post

    async def delete(self, post_id: str) -> None:
        require_document_id(post_id)
        if not await self._blog_repo.delete(post_id):
            raise ResourceNotFoundException("blog", post_id)
        logger.info("Deleted blog %s", post_id)
