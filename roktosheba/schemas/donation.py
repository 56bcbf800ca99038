"""Donation request API schemas (camelCase on the wire)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from roktosheba.application.dtos.donation import DonationRequestCreate
from roktosheba.domain.enums import DonationStatus
from roktosheba.schemas.common import reject_null

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _DonationFields(BaseModel):
    model_config = ConfigDict(**_CAMEL, extra="forbid")

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


class DonationCreateRequest(_DonationFields):
    """Request body for POST /createDonation."""

    requester_email: str = Field(..., min_length=1)
    status: DonationStatus = DonationStatus.PENDING

    def to_dto(self) -> DonationRequestCreate:
        return DonationRequestCreate(**self.model_dump())


class DonationUpdateRequest(_DonationFields):
    """Partial update for PATCH /myDonations/{id}. A client-sent _id is ignored."""

    requester_email: str | None = Field(default=None, min_length=1)
    status: DonationStatus | None = None
    donor_email: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_identifier(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k not in ("_id", "id")}
        return data

    @field_validator("requester_email", "status")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        return reject_null(value)


class DonationStatusRequest(BaseModel):
    """Request body for PATCH /donations/{id}."""

    model_config = ConfigDict(extra="forbid")

    status: DonationStatus


class AssignDonorRequest(BaseModel):
    model_config = ConfigDict(**_CAMEL, extra="forbid")

    donor_email: str = Field(..., min_length=1)


class AssignedDonorResponse(BaseModel):
    """Donor snapshot embedded in a donation request (user field names)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., alias="_id")
    email: str
    name: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None
    phone: str | None = None
    avatar: str | None = None


class DonationResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL, from_attributes=True)

    id: str = Field(..., alias="_id")
    requester_email: str
    status: DonationStatus
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
    assigned_donor: AssignedDonorResponse | None = None
    created_at: datetime | None = None


class DonationPageResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL)

    donations: list[DonationResponse]
    total_count: int


class AssignDonorResponse(BaseModel):
    model_config = ConfigDict(**_CAMEL)

    message: str
    assignment_id: str
    donation_id: str
