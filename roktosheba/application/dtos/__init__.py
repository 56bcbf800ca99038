"""Application DTOs (dataclasses passed between services and repositories)."""

from roktosheba.application.dtos.blog import BlogPostCreate, BlogPostResult
from roktosheba.application.dtos.common import Page, PageRequest
from roktosheba.application.dtos.contact import ContactMessageCreate
from roktosheba.application.dtos.dashboard import DashboardStats
from roktosheba.application.dtos.donation import (
    AssignmentRecord,
    DonationRequestCreate,
    DonationRequestResult,
)
from roktosheba.application.dtos.funding import FundingCreate, FundingResult
from roktosheba.application.dtos.user import (
    DonorProfile,
    DonorSnapshot,
    UserCreate,
    UserResult,
)

__all__ = [
    "AssignmentRecord",
    "BlogPostCreate",
    "BlogPostResult",
    "ContactMessageCreate",
    "DashboardStats",
    "DonationRequestCreate",
    "DonationRequestResult",
    "DonorProfile",
    "DonorSnapshot",
    "FundingCreate",
    "FundingResult",
    "Page",
    "PageRequest",
    "UserCreate",
    "UserResult",
]
