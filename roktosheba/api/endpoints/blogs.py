"""Blog API: thin routes delegating to BlogStore."""

from typing import Annotated

from fastapi import APIRouter, Depends

from roktosheba.api.dependencies import (
    get_blog_status_filter,
    get_blog_store,
    get_page_request,
)
from roktosheba.application.dtos.common import PageRequest
from roktosheba.application.services import BlogStore
from roktosheba.domain.enums import BlogStatus
from roktosheba.schemas.blog import (
    BlogCreateRequest,
    BlogPageResponse,
    BlogResponse,
    BlogUpdateRequest,
)
from roktosheba.schemas.common import DeleteResponse, InsertResponse

router = APIRouter()

Store = Annotated[BlogStore, Depends(get_blog_store)]


@router.post("/blogs", response_model=InsertResponse)
async def create_blog(body: BlogCreateRequest, store: Store):
    """Create a post; it starts as a draft."""
    return InsertResponse(inserted_id=await store.create(body.to_dto()))


@router.get("/blogs", response_model=BlogPageResponse)
async def list_blogs(
    store: Store,
    page: Annotated[PageRequest, Depends(get_page_request)],
    status: Annotated[BlogStatus | None, Depends(get_blog_status_filter)],
):
    result = await store.list_posts(page, status)
    return BlogPageResponse(
        blogs=[BlogResponse.model_validate(b) for b in result.items],
        total_count=result.total,
    )


@router.get("/published-blogs", response_model=list[BlogResponse])
async def list_published_blogs(store: Store):
    return [BlogResponse.model_validate(b) for b in await store.list_published()]


@router.patch("/blogs/{post_id}", response_model=BlogResponse)
async def update_blog(post_id: str, body: BlogUpdateRequest, store: Store):
    post = await store.update(post_id, body.model_dump(exclude_unset=True))
    return BlogResponse.model_validate(post)


@router.delete("/blogs/{post_id}", response_model=DeleteResponse)
async def delete_blog(post_id: str, store: Store):
    await store.delete(post_id)
    return DeleteResponse(deleted_count=1)
