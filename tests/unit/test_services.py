"""Application services against in-memory repositories."""

import random

import pytest

from roktosheba.application.dtos import (
    BlogPostCreate,
    DonationRequestCreate,
    FundingCreate,
    UserCreate,
)
from roktosheba.application.services import (
    BlogStore,
    DashboardAggregator,
    DonationLedger,
    FundingService,
    UserDirectory,
)
from roktosheba.domain.enums import BlogStatus, DonationStatus, UserRole, UserStatus
from roktosheba.domain.exceptions import (
    DonorUnavailableException,
    EmailAlreadyRegisteredException,
    InvalidIdentifierException,
    ResourceNotFoundException,
    ValidationException,
)
from tests.fakes import (
    FakePaymentGateway,
    InMemoryBlogRepository,
    InMemoryDonationRepository,
    InMemoryFundingRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def donations() -> InMemoryDonationRepository:
    return InMemoryDonationRepository()


async def _donor(directory: UserDirectory, email: str, status=UserStatus.ACTIVE):
    return await directory.register(UserCreate(email=email, role=UserRole.DONOR, status=status))


async def test_register_stamps_created_at(users) -> None:
    user = await UserDirectory(users).register(UserCreate(email="a@x.com"))
    assert user.created_at is not None
    assert user.created_at.tzinfo is not None


async def test_register_duplicate_raises(users) -> None:
    directory = UserDirectory(users)
    await directory.register(UserCreate(email="a@x.com"))
    with pytest.raises(EmailAlreadyRegisteredException):
        await directory.register(UserCreate(email="a@x.com"))


async def test_register_admin_rejected(users) -> None:
    with pytest.raises(ValidationException):
        await UserDirectory(users).register(UserCreate(email="a@x.com", role=UserRole.ADMIN))


async def test_update_own_profile_drops_non_whitelisted(users) -> None:
    directory = UserDirectory(users)
    await directory.register(UserCreate(email="a@x.com"))
    user = await directory.update_own_profile("a@x.com", {"district": "Sylhet", "role": "admin"})
    assert user.district == "Sylhet"
    assert user.role == UserRole.USER


async def test_admin_update_rejects_unknown_field(users) -> None:
    directory = UserDirectory(users)
    user = await directory.register(UserCreate(email="a@x.com"))
    with pytest.raises(ValidationException):
        await directory.admin_update(user.id, {"email": "b@x.com"})


async def test_random_donors_is_seeded_and_bounded(users) -> None:
    seed_directory = UserDirectory(users)
    for i in range(6):
        await _donor(seed_directory, f"d{i}@x.com")
    await _donor(seed_directory, "blocked@x.com", status=UserStatus.BLOCKED)

    first = await UserDirectory(users, rng=random.Random(7)).random_donors(3)
    again = await UserDirectory(users, rng=random.Random(7)).random_donors(3)
    assert [p.email for p in first] == [p.email for p in again]
    assert len({p.email for p in first}) == 3
    assert all(p.email != "blocked@x.com" for p in first)
    assert len(await seed_directory.random_donors(50)) == 6


async def test_random_donors_rejects_zero(users) -> None:
    with pytest.raises(ValidationException):
        await UserDirectory(users).random_donors(0)


async def test_assign_donor_requires_active_donor(users, donations) -> None:
    directory = UserDirectory(users)
    ledger = DonationLedger(donations, users)
    await _donor(directory, "p@x.com", status=UserStatus.PENDING)
    await directory.register(UserCreate(email="u@x.com", status=UserStatus.ACTIVE))
    donation_id = await ledger.create(DonationRequestCreate(requester_email="r@x.com"))

    for email in ("p@x.com", "u@x.com", "ghost@x.com"):
        with pytest.raises(DonorUnavailableException):
            await ledger.assign_donor(donation_id, email)
    assert donations.assignments == []
    assert (await ledger.get(donation_id)).status == DonationStatus.PENDING


async def test_assign_donor_success(users, donations) -> None:
    directory = UserDirectory(users)
    ledger = DonationLedger(donations, users)
    donor = await _donor(directory, "d@x.com")
    donation_id = await ledger.create(DonationRequestCreate(requester_email="r@x.com"))

    record = await ledger.assign_donor(donation_id, "d@x.com")

    donation = await ledger.get(donation_id)
    assert donation.status == DonationStatus.IN_PROGRESS
    assert donation.assigned_donor.id == donor.id
    assert record.donor_email == "d@x.com"
    assert donations.assignments == [record]


async def test_assign_donor_missing_donation(users, donations) -> None:
    await _donor(UserDirectory(users), "d@x.com")
    with pytest.raises(ResourceNotFoundException):
        await DonationLedger(donations, users).assign_donor("missing", "d@x.com")


async def test_ledger_update_ignores_read_only_fields(users, donations) -> None:
    ledger = DonationLedger(donations, users)
    donation_id = await ledger.create(DonationRequestCreate(requester_email="r@x.com"))
    with pytest.raises(ValidationException):
        await ledger.update(donation_id, {"id": "other", "created_at": None})
    updated = await ledger.update(donation_id, {"id": "other", "hospital_name": "DMC"})
    assert updated.id == donation_id
    assert updated.hospital_name == "DMC"


async def test_ledger_rejects_malformed_ids(users, donations) -> None:
    ledger = DonationLedger(donations, users)
    with pytest.raises(InvalidIdentifierException):
        await ledger.get("../users")
    with pytest.raises(InvalidIdentifierException):
        await ledger.delete("a b")


async def test_blog_published_excludes_drafts() -> None:
    store = BlogStore(InMemoryBlogRepository())
    draft_id = await store.create(BlogPostCreate("t", "th", "c", "a@x.com"))
    live_id = await store.create(BlogPostCreate("t2", "th", "c", "a@x.com"))
    await store.update(live_id, {"status": BlogStatus.PUBLISHED})
    published = await store.list_published()
    assert [p.id for p in published] == [live_id]
    assert draft_id not in {p.id for p in published}


async def test_blog_create_rejects_blank_field() -> None:
    with pytest.raises(ValidationException):
        await BlogStore(InMemoryBlogRepository()).create(BlogPostCreate("t", "", "c", "a@x.com"))


async def test_funding_validation_and_intent() -> None:
    gateway = FakePaymentGateway()
    service = FundingService(InMemoryFundingRepository(), gateway)
    with pytest.raises(ValidationException):
        await service.create_payment_intent(0)
    with pytest.raises(ValidationException):
        await service.record_funding(FundingCreate(user_id="", amount=5))
    assert await service.create_payment_intent(500) == "pi_1_secret_test"
    assert gateway.amounts == [500]


async def test_dashboard_counts(users, donations) -> None:
    fundings = InMemoryFundingRepository()
    directory = UserDirectory(users)
    await _donor(directory, "d1@x.com")
    await _donor(directory, "d2@x.com", status=UserStatus.PENDING)
    await directory.register(UserCreate(email="u@x.com"))
    await DonationLedger(donations, users).create(DonationRequestCreate(requester_email="u@x.com"))
    service = FundingService(fundings, FakePaymentGateway())
    await service.record_funding(FundingCreate(user_id="u", amount=3))
    await service.record_funding(FundingCreate(user_id="u", amount=4.5))

    stats = await DashboardAggregator(users, donations, fundings).stats()
    assert stats.total_donors == 2
    assert stats.total_donation_requests == 1
    assert stats.total_funding == 7.5
