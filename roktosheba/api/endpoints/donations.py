"""Donation request API: thin routes delegating to DonationLedger."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from roktosheba.api.dependencies import (
    get_donation_ledger,
    get_donation_status_filter,
    get_page_request,
)
from roktosheba.application.dtos.common import Page, PageRequest
from roktosheba.application.dtos.donation import DonationRequestResult
from roktosheba.application.services import DonationLedger
from roktosheba.core.constants import MESSAGE_DONOR_ASSIGNED
from roktosheba.domain.enums import DonationStatus
from roktosheba.schemas.common import DeleteResponse, InsertResponse
from roktosheba.schemas.donation import (
    AssignDonorRequest,
    AssignDonorResponse,
    DonationCreateRequest,
    DonationPageResponse,
    DonationResponse,
    DonationStatusRequest,
    DonationUpdateRequest,
)

router = APIRouter()

Ledger = Annotated[DonationLedger, Depends(get_donation_ledger)]
PageParams = Annotated[PageRequest, Depends(get_page_request)]
StatusFilter = Annotated[DonationStatus | None, Depends(get_donation_status_filter)]


def _page_response(result: Page[DonationRequestResult]) -> DonationPageResponse:
    return DonationPageResponse(
        donations=[DonationResponse.model_validate(d) for d in result.items],
        total_count=result.total,
    )


@router.post("/createDonation", response_model=InsertResponse)
async def create_donation(body: DonationCreateRequest, ledger: Ledger):
    return InsertResponse(inserted_id=await ledger.create(body.to_dto()))


@router.get("/donation-requests", response_model=list[DonationResponse])
async def list_donation_requests(ledger: Ledger, status: StatusFilter):
    return [DonationResponse.model_validate(d) for d in await ledger.list(status)]


@router.get("/donation-requests/{donation_id}", response_model=DonationResponse)
async def get_donation_request(donation_id: str, ledger: Ledger):
    return DonationResponse.model_validate(await ledger.get(donation_id))


@router.get("/myDonations", response_model=DonationPageResponse)
async def list_my_donations(
    ledger: Ledger,
    page: PageParams,
    status: StatusFilter,
    email: Annotated[str, Query(min_length=1)],
):
    """Requests filed by one requester, newest first."""
    return _page_response(await ledger.list_mine(email, page, status))


@router.get("/myDonations/{donation_id}", response_model=DonationResponse)
async def get_my_donation(donation_id: str, ledger: Ledger):
    return DonationResponse.model_validate(await ledger.get(donation_id))


@router.patch("/myDonations/{donation_id}", response_model=DonationResponse)
async def update_my_donation(donation_id: str, body: DonationUpdateRequest, ledger: Ledger):
    donation = await ledger.update(donation_id, body.model_dump(exclude_unset=True))
    return DonationResponse.model_validate(donation)


@router.delete("/myDonations/{donation_id}", response_model=DeleteResponse)
async def delete_my_donation(donation_id: str, ledger: Ledger):
    await ledger.delete(donation_id)
    return DeleteResponse(deleted_count=1)


@router.get("/all-donations", response_model=DonationPageResponse)
async def list_all_donations(ledger: Ledger, page: PageParams, status: StatusFilter):
    return _page_response(await ledger.list_all(page, status))


@router.get("/allDonations", response_model=DonationPageResponse)
async def list_all_donations_unfiltered(ledger: Ledger, page: PageParams):
    return _page_response(await ledger.list_all(page))


@router.patch("/donations/{donation_id}", response_model=DonationResponse)
async def update_donation_status(donation_id: str, body: DonationStatusRequest, ledger: Ledger):
    """Set only the status; repeating the same status is a no-op."""
    donation = await ledger.update_status(donation_id, body.status)
    return DonationResponse.model_validate(donation)


@router.patch("/donation/assign-donor/{donation_id}", response_model=AssignDonorResponse)
async def assign_donor(donation_id: str, body: AssignDonorRequest, ledger: Ledger):
    """Assign an active donor; the request moves to inprogress."""
    record = await ledger.assign_donor(donation_id, body.donor_email)
    return AssignDonorResponse(
        message=MESSAGE_DONOR_ASSIGNED,
        assignment_id=record.id,
        donation_id=record.donation_id,
    )
