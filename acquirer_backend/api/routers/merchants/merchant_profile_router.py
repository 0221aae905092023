"""
Merchant profile API endpoints (drafting wizard steps).

Routes:
- POST /merchants/{id}/locations - Attach a trading location
- POST /merchants/{id}/business-owners - Attach a business owner
- POST /merchants/{id}/contact-persons - Attach a contact person

Dependencies: acquirer_backend.application.services, acquirer_backend.models
System role: Merchant profile HTTP API
"""

from fastapi import APIRouter, Depends, status

from acquirer_backend.api.deps.dependencies import (
    get_current_portal_user,
    get_merchant_profile_service,
)
from acquirer_backend.api.routers.router_utils.error_handling import handle_acquirer_errors
from acquirer_backend.application.services.merchant_profile_service import MerchantProfileService
from acquirer_backend.boundary.db.models import PortalUserModel
from acquirer_backend.models.business_owner import BusinessOwnerCreateRequest, BusinessOwnerResponse
from acquirer_backend.models.common import DataResponse
from acquirer_backend.models.contact_person import ContactPersonCreateRequest, ContactPersonResponse
from acquirer_backend.models.location import MerchantLocationCreateRequest, MerchantLocationResponse

router = APIRouter(prefix="/merchants", tags=["merchants"])


@router.post(
    "/{merchant_id}/locations",
    response_model=DataResponse[MerchantLocationResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_acquirer_errors
async def post_merchant_location(
    merchant_id: int,
    request: MerchantLocationCreateRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    profile_service: MerchantProfileService = Depends(get_merchant_profile_service),
) -> DataResponse[MerchantLocationResponse]:
    """
    Attach a physical or virtual location to a Draft merchant.

    Raises:
        HTTPException(404): Merchant not found
        HTTPException(401): Caller is not the drafting user
        HTTPException(422): Merchant is not Draft or invalid body
    """
    location = await profile_service.add_location(merchant_id, request, portal_user)
    return DataResponse(
        message="Merchant Location Saved",
        data=MerchantLocationResponse.model_validate(location),
    )


@router.post(
    "/{merchant_id}/business-owners",
    response_model=DataResponse[BusinessOwnerResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_acquirer_errors
async def post_business_owner(
    merchant_id: int,
    request: BusinessOwnerCreateRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    profile_service: MerchantProfileService = Depends(get_merchant_profile_service),
) -> DataResponse[BusinessOwnerResponse]:
    """Attach a business owner with an optional address."""
    owner = await profile_service.add_business_owner(merchant_id, request, portal_user)
    return DataResponse(
        message="Business Owner Saved",
        data=BusinessOwnerResponse.model_validate(owner),
    )


@router.post(
    "/{merchant_id}/contact-persons",
    response_model=DataResponse[ContactPersonResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_acquirer_errors
async def post_contact_person(
    merchant_id: int,
    request: ContactPersonCreateRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    profile_service: MerchantProfileService = Depends(get_merchant_profile_service),
) -> DataResponse[ContactPersonResponse]:
    """
    Attach a contact person.

    With is_same_as_business_owner the owner's details are copied.

    Raises:
        HTTPException(404): Merchant or business owner not found
    """
    contact = await profile_service.add_contact_person(merchant_id, request, portal_user)
    return DataResponse(
        message="Contact Person Saved",
        data=ContactPersonResponse.model_validate(contact),
    )
