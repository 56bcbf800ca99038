"""Presentation-layer dependency injection (composition root).

Repositories are built per request from the Firestore client on app.state;
services are built from repositories. Routes depend only on services, so
tests swap storage by overriding the get_*_repo dependencies.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request

from roktosheba.application.dtos.common import PageRequest
from roktosheba.application.interfaces import (
    IBlogRepository,
    IContactRepository,
    IDonationRepository,
    IFundingRepository,
    IPaymentGateway,
    IUserRepository,
)
from roktosheba.application.services import (
    BlogStore,
    ContactIntake,
    DashboardAggregator,
    DonationLedger,
    FundingService,
    UserDirectory,
)
from roktosheba.application.services.filters import parse_status_filter
from roktosheba.core.config import get_settings
from roktosheba.domain.enums import BlogStatus, DonationStatus, UserStatus
from roktosheba.domain.exceptions import PaymentProviderException
from roktosheba.infrastructure.exceptions import DocumentStoreError
from roktosheba.infrastructure.firebase import FirestoreRESTClient
from roktosheba.infrastructure.firebase.repositories import (
    FirestoreBlogRepository,
    FirestoreContactRepository,
    FirestoreDonationRepository,
    FirestoreFundingRepository,
    FirestoreUserRepository,
)


# ---- Infrastructure handles (created by the lifespan) ----


def get_firestore(request: Request) -> FirestoreRESTClient:
    client = getattr(request.app.state, "firestore", None)
    if client is None:
        raise DocumentStoreError("connect")
    return client


def get_payment_gateway(request: Request) -> IPaymentGateway:
    gateway = getattr(request.app.state, "payment_gateway", None)
    if gateway is None:
        raise PaymentProviderException("Payment provider is not configured")
    return gateway


# ---- Repositories ----


def get_user_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> IUserRepository:
    return FirestoreUserRepository(client)


def get_donation_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> IDonationRepository:
    return FirestoreDonationRepository(client)


def get_blog_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> IBlogRepository:
    return FirestoreBlogRepository(client)


def get_funding_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> IFundingRepository:
    return FirestoreFundingRepository(client)


def get_contact_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> IContactRepository:
    return FirestoreContactRepository(client)


# ---- Services ----


def get_user_directory(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> UserDirectory:
    return UserDirectory(user_repo)


def get_donation_ledger(
    donation_repo: Annotated[IDonationRepository, Depends(get_donation_repo)],
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> DonationLedger:
    return DonationLedger(donation_repo, user_repo)


def get_blog_store(
    blog_repo: Annotated[IBlogRepository, Depends(get_blog_repo)],
) -> BlogStore:
    return BlogStore(blog_repo)


def get_funding_service(
    funding_repo: Annotated[IFundingRepository, Depends(get_funding_repo)],
    gateway: Annotated[IPaymentGateway, Depends(get_payment_gateway)],
) -> FundingService:
    return FundingService(funding_repo, gateway)


def get_contact_intake(
    contact_repo: Annotated[IContactRepository, Depends(get_contact_repo)],
) -> ContactIntake:
    return ContactIntake(contact_repo)


def get_dashboard_aggregator(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
    donation_repo: Annotated[IDonationRepository, Depends(get_donation_repo)],
    funding_repo: Annotated[IFundingRepository, Depends(get_funding_repo)],
) -> DashboardAggregator:
    return DashboardAggregator(user_repo, donation_repo, funding_repo)


# ---- Query parameters ----


def get_page_request(
    page: int = Query(0, ge=0, description="0-indexed page number"),
    limit: int | None = Query(None, ge=1, description="Page size (capped)"),
) -> PageRequest:
    """Build a PageRequest; a limit above the configured maximum is clamped."""
    settings = get_settings()
    size = settings.default_page_limit if limit is None else min(limit, settings.max_page_limit)
    return PageRequest(page=page, limit=size)


def get_user_status_filter(status: str | None = Query(None)) -> UserStatus | None:
    return parse_status_filter(status, UserStatus)


def get_donation_status_filter(status: str | None = Query(None)) -> DonationStatus | None:
    return parse_status_filter(status, DonationStatus)


def get_blog_status_filter(status: str | None = Query(None)) -> BlogStatus | None:
    return parse_status_filter(status, BlogStatus)
