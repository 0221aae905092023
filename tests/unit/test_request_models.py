"""
Test suite for request schema validation.

Tests blank form handling, status restrictions, address coordinates and
contact person requirements.

System role: Verification of API request contracts
"""

import pytest
from pydantic import ValidationError

from acquirer_backend.boundary.db.models import (
    MerchantLocationType,
    MerchantRegistrationStatus,
    MerchantType,
    NumberOfEmployees,
)
from acquirer_backend.models.business_owner import BusinessOwnerCreateRequest
from acquirer_backend.models.contact_person import ContactPersonCreateRequest
from acquirer_backend.models.location import MerchantLocationCreateRequest
from acquirer_backend.models.merchant import BulkApproveRequest, MerchantDraftForm
from acquirer_backend.models.portal_user import LoginRequest


class TestMerchantDraftForm:
    """Test suite for MerchantDraftForm."""

    def test_blank_fields_should_become_none(self) -> None:
        form = MerchantDraftForm.model_validate(
            {
                "dba_trading_name": "Corner Shop",
                "employees_num": "",
                "monthly_turnover": "",
                "merchant_type": "",
                "dfsp_id": "",
                "payinto_alias": "  ",
            }
        )

        assert form.employees_num is None
        assert form.monthly_turnover is None
        assert form.merchant_type is None
        assert form.dfsp_id is None
        assert form.payinto_alias is None

    def test_blank_status_should_default_to_draft(self) -> None:
        form = MerchantDraftForm.model_validate(
            {"dba_trading_name": "Corner Shop", "registration_status": ""}
        )

        assert form.registration_status == MerchantRegistrationStatus.DRAFT

    def test_enum_values_should_parse(self) -> None:
        form = MerchantDraftForm.model_validate(
            {
                "dba_trading_name": "Corner Shop",
                "employees_num": "1 - 5",
                "merchant_type": "Small Shop",
                "registration_status": "Review",
            }
        )

        assert form.employees_num == NumberOfEmployees.ONE_TO_FIVE
        assert form.merchant_type == MerchantType.SMALL_SHOP
        assert form.registration_status == MerchantRegistrationStatus.REVIEW

    @pytest.mark.parametrize("status", ["Approved", "Rejected", "WaitingAliasGeneration"])
    def test_should_reject_non_draftable_status(self, status: str) -> None:
        with pytest.raises(ValidationError, match="Draft or Review"):
            MerchantDraftForm.model_validate(
                {"dba_trading_name": "Corner Shop", "registration_status": status}
            )

    def test_should_require_dba_trading_name(self) -> None:
        with pytest.raises(ValidationError):
            MerchantDraftForm.model_validate({"dba_trading_name": ""})

    def test_currency_code_should_be_uppercased(self) -> None:
        form = MerchantDraftForm.model_validate(
            {"dba_trading_name": "Corner Shop", "currency_code": "php"}
        )

        assert form.currency_code == "PHP"

    @pytest.mark.parametrize("code", ["PH", "PESO", "12A"])
    def test_should_reject_malformed_currency(self, code: str) -> None:
        with pytest.raises(ValidationError, match="ISO 4217"):
            MerchantDraftForm.model_validate({"dba_trading_name": "Shop", "currency_code": code})

    def test_should_strip_alias_and_name(self) -> None:
        form = MerchantDraftForm.model_validate(
            {"dba_trading_name": "  Shop ", "payinto_alias": " 000123 "}
        )

        assert form.dba_trading_name == "Shop"
        assert form.payinto_alias == "000123"


class TestMerchantLocationCreateRequest:
    """Test suite for MerchantLocationCreateRequest."""

    def test_virtual_location_should_require_url(self) -> None:
        with pytest.raises(ValidationError, match="web_url is required"):
            MerchantLocationCreateRequest(location_type=MerchantLocationType.VIRTUAL)

    def test_url_should_be_http(self) -> None:
        with pytest.raises(ValidationError, match="http"):
            MerchantLocationCreateRequest(location_type="Virtual", web_url="ftp://shop.example")

    def test_physical_location_should_accept_address(self) -> None:
        location = MerchantLocationCreateRequest(
            location_type="Physical",
            town_name="Makati",
            latitude="14.55",
            longitude="121.02",
            postal_code="",
        )

        assert location.location_type == MerchantLocationType.PHYSICAL
        assert location.postal_code is None

    @pytest.mark.parametrize(
        "field, value",
        [("latitude", "91"), ("longitude", "-181"), ("latitude", "north")],
    )
    def test_should_reject_bad_coordinates(self, field: str, value: str) -> None:
        with pytest.raises(ValidationError, match=field):
            MerchantLocationCreateRequest(location_type="Physical", **{field: value})


class TestPartyRequests:
    """Test suite for business owner and contact person requests."""

    def test_owner_should_validate_phone_and_email(self) -> None:
        with pytest.raises(ValidationError):
            BusinessOwnerCreateRequest(
                name="Ana",
                identification_type="National ID",
                identification_number="X1",
                phone_number="call me",
                email="not-an-email",
            )

    def test_owner_should_accept_nested_location(self) -> None:
        owner = BusinessOwnerCreateRequest(
            name="Ana",
            identification_type="Passport",
            identification_number="P123",
            phone_number="+63 917 123 4567",
            email="",
            business_person_location={"town_name": "Cebu"},
        )

        assert owner.email is None
        assert owner.business_person_location.town_name == "Cebu"

    def test_contact_should_require_name_unless_same_as_owner(self) -> None:
        with pytest.raises(ValidationError, match="name is required"):
            ContactPersonCreateRequest(phone_number="+639171234567")

    def test_contact_same_as_owner_needs_no_details(self) -> None:
        contact = ContactPersonCreateRequest(is_same_as_business_owner=True)

        assert contact.name is None


class TestMiscRequests:
    """Test suite for small request bodies."""

    def test_bulk_ids_should_not_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            BulkApproveRequest(ids=[])

    def test_bulk_ids_should_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BulkApproveRequest(ids=[1, 0])

    def test_login_password_should_have_minimum_length(self) -> None:
        with pytest.raises(ValidationError):
            LoginRequest(email="hub@example.com", password="short")
