"""
Contact person models and schemas.

Dependencies: pydantic
System role: Contact person API contracts
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from acquirer_backend.models.common import (
    EmailAddress,
    PhoneNumber,
    blank_strings_to_none,
)
from acquirer_backend.models.location import AddressResponse


class ContactPersonCreateRequest(BaseModel):
    """
    Request schema for the contact persons wizard step.

    With is_same_as_business_owner the remaining fields are ignored and
    copied from the merchant's first business owner instead.
    """

    is_same_as_business_owner: bool = False
    name: str | None = Field(None, max_length=255)
    phone_number: PhoneNumber | None = None
    email: EmailAddress | None = None

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, values):
        return blank_strings_to_none(values)

    @model_validator(mode="after")
    def _require_own_details(self):
        if self.is_same_as_business_owner:
            return self
        if not self.name:
            raise ValueError("name is required")
        if not self.phone_number:
            raise ValueError("phone_number is required")
        return self


class ContactPersonResponse(BaseModel):
    """Contact person as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone_number: str
    email: str | None = None
    is_same_as_business_owner: bool
    merchant_id: int
    business_person_location: AddressResponse | None = None
