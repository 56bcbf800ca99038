"""Contact form API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from roktosheba.api.dependencies import get_contact_intake
from roktosheba.application.services import ContactIntake
from roktosheba.schemas.common import InsertResponse
from roktosheba.schemas.contact import ContactRequest

router = APIRouter()


@router.post("/contact-us", response_model=InsertResponse)
async def submit_contact(
    body: ContactRequest,
    intake: Annotated[ContactIntake, Depends(get_contact_intake)],
):
    return InsertResponse(inserted_id=await intake.submit(body.to_dto()))
