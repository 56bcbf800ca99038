"""Blog API schemas (camelCase on the wire)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from roktosheba.application.dtos.blog import BlogPostCreate
from roktosheba.domain.enums import BlogStatus
from roktosheba.schemas.common import reject_null

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlogCreateRequest(BaseModel):
    """Request body for POST /blogs. Posts always start as drafts."""

    model_config = ConfigDict(**_CAMEL, extra="forbid", str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    thumbnail: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author_email: str = Field(..., min_length=1)

    def to_dto(self) -> BlogPostCreate:
        return BlogPostCreate(
            title=self.title,
            thumbnail=self.thumbnail,
            content=self.content,
            author_email=self.author_email,
        )


class BlogUpdateRequest(BaseModel):
    model_config = ConfigDict(**_CAMEL, extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    thumbnail: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    status: BlogStatus | None = None

    @field_validator("title", "thumbnail", "content", "status")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        return reject_null(value)


class BlogResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL, from_attributes=True)

    id: str = Field(..., alias="_id")
    title: str
    thumbnail: str
    content: str
    author_email: str
    status: BlogStatus
    created_at: datetime | None = None


class BlogPageResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL)

    blogs: list[BlogResponse]
    total_count: int
