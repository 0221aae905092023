"""
Business owner models and schemas.

Dependencies: pydantic
System role: Business owner API contracts
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from acquirer_backend.boundary.db.models import BusinessOwnerIDType
from acquirer_backend.models.common import (
    EmailAddress,
    PhoneNumber,
    blank_strings_to_none,
)
from acquirer_backend.models.location import AddressResponse, BusinessPersonLocationRequest


class BusinessOwnerCreateRequest(BaseModel):
    """Request schema for the business owners wizard step."""

    name: str = Field(..., min_length=1, max_length=255)
    identification_type: BusinessOwnerIDType
    identification_number: str = Field(..., min_length=1, max_length=255)
    phone_number: PhoneNumber
    email: EmailAddress | None = None
    business_person_location: BusinessPersonLocationRequest | None = None

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, values):
        return blank_strings_to_none(values)


class BusinessOwnerResponse(BaseModel):
    """Business owner as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    identification_type: BusinessOwnerIDType
    identification_number: str
    phone_number: str
    email: str | None = None
    merchant_id: int
    business_person_location: AddressResponse | None = None
