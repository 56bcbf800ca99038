"""Contact form schema."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from roktosheba.application.dtos.contact import ContactMessageCreate


class ContactRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: EmailStr
    telephone: str | None = None
    message: str = Field(..., min_length=1)

    def to_dto(self) -> ContactMessageCreate:
        return ContactMessageCreate(
            name=self.name,
            email=str(self.email),
            message=self.message,
            telephone=self.telephone,
        )
