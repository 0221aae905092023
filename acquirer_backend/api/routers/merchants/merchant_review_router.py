"""
Merchant registration status API endpoints (maker/checker workflow).

Routes:
- PUT /merchants/bulk-approve - Review -> WaitingAliasGeneration for many merchants
- PUT /merchants/bulk-reject - Review -> Rejected for many merchants
- PUT /merchants/{id}/ready-to-review - Draft -> Review
- PUT /merchants/{id}/registration-status - Set any status as checker
- PUT /merchants/{id}/approve - Review -> WaitingAliasGeneration
- PUT /merchants/{id}/reject - Review -> Rejected

Dependencies: acquirer_backend.application.services, acquirer_backend.models
System role: Merchant review HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from acquirer_backend.api.deps.dependencies import (
    get_current_portal_user,
    get_merchant_review_service,
)
from acquirer_backend.api.routers.router_utils.error_handling import handle_acquirer_errors
from acquirer_backend.application.services.merchant_review_service import MerchantReviewService
from acquirer_backend.boundary.db.models import PortalUserModel
from acquirer_backend.models.common import DataResponse, MessageResponse
from acquirer_backend.models.merchant import (
    BulkApproveRequest,
    BulkRejectRequest,
    MerchantResponse,
    RegistrationStatusUpdateRequest,
    RejectRequest,
)

from .merchant_responses import map_merchant_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/merchants", tags=["merchants"])


@router.put("/bulk-approve", response_model=MessageResponse)
@handle_acquirer_errors
async def put_bulk_approve(
    request: BulkApproveRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    review_service: MerchantReviewService = Depends(get_merchant_review_service),
) -> MessageResponse:
    """
    Approve every listed merchant or none of them.

    Raises:
        HTTPException(422): Any id is unknown, not in Review or drafted by the caller
    """
    updated = await review_service.bulk_approve(request.ids, portal_user)
    logger.info("Bulk approve completed", extra={"updated": updated})
    return MessageResponse(message="WAITINGALIASGENERATION Status Updated for multiple merchants")


@router.put("/bulk-reject", response_model=MessageResponse)
@handle_acquirer_errors
async def put_bulk_reject(
    request: BulkRejectRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    review_service: MerchantReviewService = Depends(get_merchant_review_service),
) -> MessageResponse:
    """Reject every listed merchant or none of them."""
    updated = await review_service.bulk_reject(request.ids, request.reason, portal_user)
    logger.info("Bulk reject completed", extra={"updated": updated})
    return MessageResponse(message="REJECTED Status Updated for multiple merchants")


@router.put("/{merchant_id}/ready-to-review", response_model=DataResponse[MerchantResponse])
@handle_acquirer_errors
async def put_ready_to_review(
    merchant_id: int,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    review_service: MerchantReviewService = Depends(get_merchant_review_service),
) -> DataResponse[MerchantResponse]:
    """
    Submit a Draft merchant for checker review.

    Raises:
        HTTPException(404): Merchant not found
        HTTPException(401): Caller is not the drafting user
        HTTPException(422): Merchant is not Draft
    """
    merchant = await review_service.submit_for_review(merchant_id, portal_user)
    return DataResponse(
        message="Status Updated to Review", data=map_merchant_to_response(merchant)
    )


@router.put("/{merchant_id}/registration-status", response_model=DataResponse[MerchantResponse])
@handle_acquirer_errors
async def put_registration_status(
    merchant_id: int,
    request: RegistrationStatusUpdateRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    review_service: MerchantReviewService = Depends(get_merchant_review_service),
) -> DataResponse[MerchantResponse]:
    """Set an arbitrary registration status; the caller must not be the maker."""
    merchant = await review_service.update_registration_status(
        merchant_id,
        request.registration_status,
        request.registration_status_reason,
        portal_user,
    )
    return DataResponse(message="Status Updated", data=map_merchant_to_response(merchant))


@router.put("/{merchant_id}/approve", response_model=DataResponse[MerchantResponse])
@handle_acquirer_errors
async def put_approve(
    merchant_id: int,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    review_service: MerchantReviewService = Depends(get_merchant_review_service),
) -> DataResponse[MerchantResponse]:
    """
    Approve a Review merchant pending PayInto alias generation.

    Raises:
        HTTPException(404): Merchant not found
        HTTPException(401): Caller drafted the merchant
        HTTPException(422): Merchant is not in Review
    """
    merchant = await review_service.approve(merchant_id, portal_user)
    return DataResponse(
        message="Status Updated to WaitingAliasGeneration",
        data=map_merchant_to_response(merchant),
    )


@router.put("/{merchant_id}/reject", response_model=DataResponse[MerchantResponse])
@handle_acquirer_errors
async def put_reject(
    merchant_id: int,
    request: RejectRequest,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    review_service: MerchantReviewService = Depends(get_merchant_review_service),
) -> DataResponse[MerchantResponse]:
    """Reject a Review merchant with a reason."""
    merchant = await review_service.reject(merchant_id, request.reason, portal_user)
    return DataResponse(
        message="Status Updated to Rejected", data=map_merchant_to_response(merchant)
    )
