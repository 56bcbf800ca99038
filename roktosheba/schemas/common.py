"""Response envelopes shared by every resource, plus partial-update helpers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def reject_null(value: Any) -> Any:
    """Partial updates may omit a required field but never set it to null."""
    if value is None:
        raise ValueError("field may be omitted but cannot be null")
    return value


class InsertResponse(BaseModel):
    """Answer to a create: acknowledgement plus the new document ID."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(..., alias="insertedId")


class DeleteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    deleted_count: int = Field(default=1, alias="deletedCount")
