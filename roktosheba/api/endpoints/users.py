"""User directory API: thin routes delegating to UserDirectory."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from roktosheba.api.dependencies import (
    get_page_request,
    get_user_directory,
    get_user_status_filter,
)
from roktosheba.application.dtos.common import PageRequest
from roktosheba.application.services import UserDirectory
from roktosheba.core.config import get_settings
from roktosheba.domain.enums import UserStatus
from roktosheba.schemas.common import InsertResponse
from roktosheba.schemas.user import (
    AdminUserUpdateRequest,
    DonorProfileResponse,
    RoleResponse,
    UserPageResponse,
    UserProfileUpdateRequest,
    UserRegisterRequest,
    UserResponse,
)

router = APIRouter()

Directory = Annotated[UserDirectory, Depends(get_user_directory)]


@router.post("/users", response_model=InsertResponse)
async def register_user(body: UserRegisterRequest, directory: Directory):
    """Register a user; a second registration of the same email is rejected."""
    user = await directory.register(body.to_dto())
    return InsertResponse(inserted_id=user.id)


@router.get("/users/donor/{email}", response_model=DonorProfileResponse)
async def get_donor_profile(email: str, directory: Directory):
    """Public profile of an active donor."""
    profile = await directory.get_donor_public_profile(email)
    return DonorProfileResponse.model_validate(profile)


@router.get("/users/{email}", response_model=UserResponse)
async def get_user(email: str, directory: Directory):
    return UserResponse.model_validate(await directory.get_by_email(email))


@router.patch("/users/{email}", response_model=UserResponse)
async def update_own_profile(email: str, body: UserProfileUpdateRequest, directory: Directory):
    """Update the caller's own profile; fields outside the profile whitelist are dropped."""
    user = await directory.update_own_profile(email, body.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.get("/users/{email}/role", response_model=RoleResponse)
async def get_user_role(email: str, directory: Directory):
    return RoleResponse(role=await directory.get_role(email))


@router.get("/allUsers", response_model=UserPageResponse)
async def list_users(
    directory: Directory,
    page: Annotated[PageRequest, Depends(get_page_request)],
    status: Annotated[UserStatus | None, Depends(get_user_status_filter)],
):
    """List users newest first (0-indexed pages, status=all disables the filter)."""
    result = await directory.list_users(page, status)
    return UserPageResponse(
        users=[UserResponse.model_validate(u) for u in result.items],
        total_count=result.total,
    )


@router.get("/allUsers/active-donors", response_model=list[UserResponse])
async def list_active_donors(directory: Directory):
    return [UserResponse.model_validate(u) for u in await directory.list_active_donors()]


@router.patch("/allUsers/{user_id}", response_model=UserResponse)
async def admin_update_user(user_id: str, body: AdminUserUpdateRequest, directory: Directory):
    """Administrator update of role, status or profile fields."""
    user = await directory.admin_update(user_id, body.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.get("/donors", response_model=list[UserResponse])
async def find_donors(
    directory: Directory,
    blood_group: Annotated[str | None, Query(alias="bloodGroup")] = None,
    district: str | None = None,
    upazila: str | None = None,
):
    """Exact-match donor search; every filter is optional."""
    donors = await directory.find_donors(blood_group, district, upazila)
    return [UserResponse.model_validate(u) for u in donors]


@router.get("/random-donors", response_model=list[DonorProfileResponse])
async def random_donors(
    directory: Directory,
    size: Annotated[int | None, Query(ge=1, le=100)] = None,
):
    """A uniform sample of active donors for display."""
    n = size if size is not None else get_settings().random_donor_sample_size
    return [DonorProfileResponse.model_validate(p) for p in await directory.random_donors(n)]
