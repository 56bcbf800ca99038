"""DTOs for the blog store."""

from dataclasses import dataclass
from datetime import datetime

from roktosheba.domain.enums import BlogStatus


@dataclass(frozen=True)
class BlogPostCreate:
    title: str
    thumbnail: str
    content: str
    author_email: str


@dataclass(frozen=True)
class BlogPostResult:
    id: str
    title: str
    thumbnail: str
    content: str
    author_email: str
    status: BlogStatus = BlogStatus.DRAFT
    created_at: datetime | None = None
