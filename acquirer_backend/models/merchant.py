"""
Merchant domain models and schemas.

Request/response schemas for merchant drafting, registry queries and the
review workflow.

Dependencies: pydantic
System role: Merchant API contracts
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from acquirer_backend.boundary.db.models import (
    MerchantAllowBlockStatus,
    MerchantRegistrationStatus,
    MerchantType,
    NumberOfEmployees,
)
from acquirer_backend.models.business_owner import BusinessOwnerResponse
from acquirer_backend.models.common import blank_strings_to_none
from acquirer_backend.models.contact_person import ContactPersonResponse
from acquirer_backend.models.dfsp import DFSPResponse
from acquirer_backend.models.location import MerchantLocationResponse, MerchantLocationSummary
from acquirer_backend.models.portal_user import PortalUserPublic, PortalUserSummary

DRAFTABLE_STATUSES = (MerchantRegistrationStatus.DRAFT, MerchantRegistrationStatus.REVIEW)


class MerchantDraftForm(BaseModel):
    """
    Multipart form fields for creating or updating a merchant draft.

    The optional license PDF travels alongside as a separate "file" part.
    """

    dba_trading_name: str = Field(..., min_length=1, max_length=255)
    registered_name: str | None = Field(None, max_length=255)
    employees_num: NumberOfEmployees | None = None
    monthly_turnover: float | None = Field(None, ge=0)
    currency_code: str | None = Field(None, description="ISO 4217 code, e.g. PHP")
    category_code: str | None = Field(None, max_length=32)
    merchant_type: MerchantType | None = None
    dfsp_id: int | None = Field(None, ge=1)
    payinto_alias: str | None = Field(None, max_length=255)
    registration_status: MerchantRegistrationStatus = MerchantRegistrationStatus.DRAFT
    registration_status_reason: str | None = Field(None, max_length=1024)
    license_number: str | None = Field(None, max_length=255)

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, values):
        values = blank_strings_to_none(values)
        if isinstance(values, dict) and values.get("registration_status") is None:
            values.pop("registration_status", None)
        return values

    @field_validator("dba_trading_name", "payinto_alias", "license_number")
    @classmethod
    def _strip(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    @field_validator("currency_code")
    @classmethod
    def _check_currency_code(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().upper()
        if len(value) != 3 or not value.isalpha():
            raise ValueError("currency_code must be a 3-letter ISO 4217 code")
        return value

    @field_validator("registration_status")
    @classmethod
    def _check_draftable_status(
        cls, value: MerchantRegistrationStatus
    ) -> MerchantRegistrationStatus:
        if value not in DRAFTABLE_STATUSES:
            raise ValueError("registration_status must be Draft or Review")
        return value


class MerchantListFilters(BaseModel):
    """Registry query filters, already mapped from the camelCase query string."""

    merchant_id: int | None = None
    dba_name: str | None = None
    registration_status: MerchantRegistrationStatus | None = None
    payinto_id: str | None = None
    added_by: int | None = None
    approved_by: int | None = None
    added_time: str | None = None
    updated_time: str | None = None
    limit: int | None = Field(None, ge=1, le=1000)
    offset: int = Field(0, ge=0)


class RegistrationStatusUpdateRequest(BaseModel):
    """Request schema for setting an arbitrary registration status."""

    registration_status: MerchantRegistrationStatus
    registration_status_reason: str | None = Field(None, max_length=1024)


class RejectRequest(BaseModel):
    """Request schema for rejecting a single merchant."""

    reason: str = Field(..., min_length=1, max_length=1024)


class BulkApproveRequest(BaseModel):
    """Request schema for approving many merchants at once."""

    ids: list[Annotated[int, Field(ge=1)]] = Field(..., min_length=1)


class BulkRejectRequest(BulkApproveRequest):
    """Request schema for rejecting many merchants at once."""

    reason: str = Field(..., min_length=1, max_length=1024)


class CheckoutCounterSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    alias_value: str
    description: str


class CheckoutCounterResponse(CheckoutCounterSummary):
    """Checkout counter as returned by the API."""

    id: int
    alias_type: str
    notification_number: str | None = None
    merchant_registry_id: int | None = None
    merchant_id: int
    checkout_location_id: int | None = None


class BusinessLicenseResponse(BaseModel):
    """Business license as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    license_number: str | None = None
    license_document_link: str | None = None
    merchant_id: int


class MerchantResponse(BaseModel):
    """Merchant scalar fields shared by every merchant response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    dba_trading_name: str
    registered_name: str | None = None
    employees_num: NumberOfEmployees | None = None
    monthly_turnover: float | None = None
    currency_code: str | None = None
    category_code: str | None = None
    merchant_type: MerchantType | None = None
    registration_status: MerchantRegistrationStatus
    registration_status_reason: str | None = None
    allow_block_status: MerchantAllowBlockStatus
    dfsp_id: int | None = None
    created_at: datetime
    updated_at: datetime


class MerchantDraftResponse(MerchantResponse):
    """Merchant returned by the drafting endpoints; created_by is omitted."""

    checkout_counters: list[CheckoutCounterResponse] = Field(default_factory=list)
    business_licenses: list[BusinessLicenseResponse] = Field(default_factory=list)


class MerchantListItem(MerchantResponse):
    """Merchant registry row."""

    created_by: PortalUserSummary | None = None
    checked_by: PortalUserSummary | None = None
    locations: list[MerchantLocationSummary] = Field(default_factory=list)
    checkout_counters: list[CheckoutCounterSummary] = Field(default_factory=list)


class MerchantDetailResponse(MerchantResponse):
    """Full merchant aggregate with sanitised portal users."""

    locations: list[MerchantLocationResponse] = Field(default_factory=list)
    checkout_counters: list[CheckoutCounterResponse] = Field(default_factory=list)
    business_licenses: list[BusinessLicenseResponse] = Field(default_factory=list)
    contact_persons: list[ContactPersonResponse] = Field(default_factory=list)
    business_owners: list[BusinessOwnerResponse] = Field(default_factory=list)
    dfsp: DFSPResponse | None = None
    created_by: PortalUserPublic | None = None
    checked_by: PortalUserPublic | None = None


class LicenseDocumentUrlResponse(BaseModel):
    """Presigned download URL for a license document."""

    url: str
    expires_at: datetime
