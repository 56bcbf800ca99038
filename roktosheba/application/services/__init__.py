"""Application services, one per component."""

from roktosheba.application.services.blog_store import BlogStore
from roktosheba.application.services.contact_intake import ContactIntake
from roktosheba.application.services.dashboard_service import DashboardAggregator
from roktosheba.application.services.donation_ledger import DonationLedger
from roktosheba.application.services.funding_service import FundingService
from roktosheba.application.services.user_directory import UserDirectory

__all__ = [
    "BlogStore",
    "ContactIntake",
    "DashboardAggregator",
    "DonationLedger",
    "FundingService",
    "UserDirectory",
]
