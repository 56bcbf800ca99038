"""DTOs for user directory use cases (no dependency on storage)."""

from dataclasses import dataclass
from datetime import datetime

from roktosheba.domain.enums import UserRole, UserStatus


@dataclass(frozen=True)
class UserCreate:
    """Fields accepted at registration."""

    email: str
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.PENDING
    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class UserResult:
    """User read-model."""

    id: str
    email: str
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.PENDING
    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None
    created_at: datetime | None = None

    @property
    def is_active_donor(self) -> bool:
        return self.role == UserRole.DONOR and self.status == UserStatus.ACTIVE


@dataclass(frozen=True)
class DonorProfile:
    """Public projection of an active donor."""

    name: str | None
    email: str
    blood_group: str | None
    district: str | None
    upazila: str | None
    avatar: str | None

    @classmethod
    def from_user(cls, user: UserResult) -> "DonorProfile":
        return cls(
            name=user.name,
            email=user.email,
            blood_group=user.blood_group,
            district=user.district,
            upazila=user.upazila,
            avatar=user.avatar,
        )


@dataclass(frozen=True)
class DonorSnapshot:
    """Copy of donor fields taken at assignment time (not a live reference)."""

    id: str
    email: str
    name: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None
    avatar: str | None = None

    @classmethod
    def from_user(cls, user: UserResult) -> "DonorSnapshot":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            blood_group=user.blood_group,
            district=user.district,
            upazila=user.upazila,
            phone=user.phone,
            avatar=user.avatar,
        )
