"""User API schemas.

User documents use snake_case field names on the wire (blood_group,
created_at); bloodGroup is also accepted on input.
"""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

from roktosheba.application.dtos.user import UserCreate
from roktosheba.domain.enums import UserRole, UserStatus
from roktosheba.schemas.common import reject_null


def _blood_group():
    return Field(default=None, validation_alias=AliasChoices("blood_group", "bloodGroup"))


class UserRegisterRequest(BaseModel):
    """Request body for POST /users. Role is donor or user."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.PENDING
    name: str | None = Field(default=None, max_length=200)
    avatar: str | None = None
    blood_group: str | None = _blood_group()
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None

    def to_dto(self) -> UserCreate:
        return UserCreate(
            email=str(self.email),
            role=self.role,
            status=self.status,
            name=self.name,
            avatar=self.avatar,
            blood_group=self.blood_group,
            district=self.district,
            upazila=self.upazila,
            phone=self.phone,
        )


class UserProfileUpdateRequest(BaseModel):
    """Request body for PATCH /users/{email}. Unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = _blood_group()
    district: str | None = None
    upazila: str | None = None


class AdminUserUpdateRequest(BaseModel):
    """Request body for PATCH /allUsers/{id}."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = _blood_group()
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None

    @field_validator("role", "status")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        return reject_null(value)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., alias="_id")
    email: str
    role: UserRole
    status: UserStatus
    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None
    created_at: datetime | None = None


class UserPageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    users: list[UserResponse]
    total_count: int = Field(..., alias="totalCount")


class RoleResponse(BaseModel):
    role: UserRole


class DonorProfileResponse(BaseModel):
    """Public projection of an active donor (no phone, status or ID)."""

    model_config = ConfigDict(from_attributes=True)

    name: str | None = None
    email: str
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None
    avatar: str | None = None
