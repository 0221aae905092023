"""
Location models and schemas.

Merchant trading locations and the person addresses attached to owners
and contact persons.

Dependencies: pydantic
System role: Location API contracts
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from acquirer_backend.boundary.db.models import MerchantLocationType
from acquirer_backend.models.common import blank_strings_to_none


class AddressFields(BaseModel):
    """Postal address fields shared by merchant and person locations."""

    address_type: str | None = Field(None, max_length=255)
    department: str | None = Field(None, max_length=255)
    sub_department: str | None = Field(None, max_length=255)
    street_name: str | None = Field(None, max_length=255)
    building_number: str | None = Field(None, max_length=64)
    building_name: str | None = Field(None, max_length=255)
    floor_number: str | None = Field(None, max_length=64)
    room_number: str | None = Field(None, max_length=64)
    post_box: str | None = Field(None, max_length=64)
    postal_code: str | None = Field(None, max_length=64)
    town_name: str | None = Field(None, max_length=255)
    district_name: str | None = Field(None, max_length=255)
    country_subdivision: str | None = Field(None, max_length=255)
    country: str | None = Field(None, max_length=255)
    address_line: str | None = Field(None, max_length=1024)
    latitude: str | None = Field(None, max_length=64)
    longitude: str | None = Field(None, max_length=64)

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, values):
        return blank_strings_to_none(values)

    @field_validator("latitude")
    @classmethod
    def _check_latitude(cls, value: str | None) -> str | None:
        return _check_coordinate(value, 90.0, "latitude")

    @field_validator("longitude")
    @classmethod
    def _check_longitude(cls, value: str | None) -> str | None:
        return _check_coordinate(value, 180.0, "longitude")


def _check_coordinate(value: str | None, bound: float, name: str) -> str | None:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number") from e
    if not -bound <= number <= bound:
        raise ValueError(f"{name} must be between -{bound:g} and {bound:g}")
    return value


class MerchantLocationCreateRequest(AddressFields):
    """Request schema for the locations wizard step."""

    location_type: MerchantLocationType
    web_url: str | None = Field(None, max_length=1024)

    @field_validator("web_url")
    @classmethod
    def _check_web_url(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError("web_url must start with http:// or https://")
        return value

    @model_validator(mode="after")
    def _virtual_needs_url(self):
        if self.location_type == MerchantLocationType.VIRTUAL and not self.web_url:
            raise ValueError("web_url is required for a Virtual location")
        return self


class BusinessPersonLocationRequest(AddressFields):
    """Address of a business owner."""


class AddressResponse(AddressFields):
    model_config = ConfigDict(from_attributes=True)

    id: int


class MerchantLocationResponse(AddressResponse):
    """Merchant location as returned by the API."""

    location_type: MerchantLocationType
    web_url: str | None = None
    merchant_id: int


class MerchantLocationSummary(BaseModel):
    """Location fields shown in the merchant registry list."""

    model_config = ConfigDict(from_attributes=True)

    country_subdivision: str | None = None
    town_name: str | None = None
