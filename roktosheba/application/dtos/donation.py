"""DTOs for the donation request ledger and assignment log."""

from dataclasses import dataclass
from datetime import datetime

from roktosheba.application.dtos.user import DonorSnapshot
from roktosheba.domain.enums import DonationStatus


@dataclass(frozen=True)
class DonationRequestCreate:
    """Fields accepted when a requester files a donation request."""

    requester_email: str
    requester_name: str | None = None
    recipient_name: str | None = None
    recipient_district: str | None = None
    recipient_upazila: str | None = None
    hospital_name: str | None = None
    full_address: str | None = None
    blood_group: str | None = None
    donation_date: str | None = None
    donation_time: str | None = None
    request_message: str | None = None
    status: DonationStatus = DonationStatus.PENDING


@dataclass(frozen=True)
class DonationRequestResult:
    """Donation request read-model."""

    id: str
    requester_email: str
    status: DonationStatus = DonationStatus.PENDING
    requester_name: str | None = None
    recipient_name: str | None = None
    recipient_district: str | None = None
    recipient_upazila: str | None = None
    hospital_name: str | None = None
    full_address: str | None = None
    blood_group: str | None = None
    donation_date: str | None = None
    donation_time: str | None = None
    request_message: str | None = None
    donor_email: str | None = None
    assigned_donor: DonorSnapshot | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class AssignmentRecord:
    """Append-only log entry pairing a donation request with a donor."""

    id: str
    donation_id: str
    donor_id: str
    donor_email: str
    donor: DonorSnapshot
    assigned_at: datetime
