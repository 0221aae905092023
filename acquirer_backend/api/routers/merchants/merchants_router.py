"""
Merchant registry and drafting API endpoints.

Routes:
- GET /merchants - Filtered merchant registry
- GET /merchants/draft-counts - Caller's Draft merchant count
- GET /merchants/{id} - Full merchant aggregate
- POST /merchants/draft - Create merchant draft (multipart)
- PUT /merchants/{id}/draft - Update merchant draft (multipart)
- POST /merchants/{id}/upload-license-document - Upload/replace license PDF
- GET /merchants/{id}/license-document-url - Presigned license download URL

Dependencies: acquirer_backend.application.services, acquirer_backend.models
System role: Merchant drafting HTTP API
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from acquirer_backend.api.deps.dependencies import get_current_portal_user, get_merchant_service
from acquirer_backend.api.routers.router_utils.error_handling import handle_acquirer_errors
from acquirer_backend.api.routers.router_utils.form_utils import merchant_draft_form
from acquirer_backend.api.routers.router_utils.upload_utils import read_license_upload
from acquirer_backend.application.services.merchant_service import MerchantService
from acquirer_backend.boundary.db.models import MerchantRegistrationStatus, PortalUserModel
from acquirer_backend.core.exceptions import DocumentValidationError
from acquirer_backend.models.common import DataResponse
from acquirer_backend.models.merchant import (
    LicenseDocumentUrlResponse,
    MerchantDetailResponse,
    MerchantDraftForm,
    MerchantDraftResponse,
    MerchantListFilters,
    MerchantListItem,
)

from .merchant_responses import (
    map_merchant_to_detail,
    map_merchant_to_draft_response,
    map_merchants_to_list_items,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/merchants", tags=["merchants"])


@router.get("", response_model=DataResponse[list[MerchantListItem]])
@handle_acquirer_errors
async def get_merchants(
    merchant_id: Annotated[int | None, Query(alias="merchantId")] = None,
    dba_name: Annotated[str | None, Query(alias="dbaName")] = None,
    registration_status: Annotated[
        MerchantRegistrationStatus | None, Query(alias="registrationStatus")
    ] = None,
    payinto_id: Annotated[str | None, Query(alias="payintoId")] = None,
    added_by: Annotated[int | None, Query(alias="addedBy")] = None,
    approved_by: Annotated[int | None, Query(alias="approvedBy")] = None,
    added_time: Annotated[str | None, Query(alias="addedTime")] = None,
    updated_time: Annotated[str | None, Query(alias="updatedTime")] = None,
    limit: Annotated[int | None, Query(ge=1, le=1000)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[list[MerchantListItem]]:
    """
    List merchants newest first; every filter is optional and AND-combined.

    Raises:
        HTTPException(401): Missing or invalid token
        HTTPException(422): registrationStatus is not a valid status
    """
    filters = MerchantListFilters(
        merchant_id=merchant_id,
        dba_name=dba_name,
        registration_status=registration_status,
        payinto_id=payinto_id,
        added_by=added_by,
        approved_by=approved_by,
        added_time=added_time,
        updated_time=updated_time,
        limit=limit,
        offset=offset,
    )
    merchants = await merchant_service.list_merchants(filters, portal_user)
    return DataResponse(message="OK", data=map_merchants_to_list_items(merchants))


@router.get("/draft-counts", response_model=DataResponse[int])
@handle_acquirer_errors
async def get_merchant_draft_counts(
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[int]:
    """Number of merchants the caller created that are still Draft."""
    count = await merchant_service.count_drafts(portal_user)
    return DataResponse(message="OK", data=count)


@router.post(
    "/draft",
    response_model=DataResponse[MerchantDraftResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_acquirer_errors
async def post_merchant_draft(
    form: MerchantDraftForm = Depends(merchant_draft_form),
    file: UploadFile | None = File(None),
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[MerchantDraftResponse]:
    """
    Create a merchant draft with optional PayInto alias and license PDF.

    Raises:
        HTTPException(422): Invalid form, duplicate alias, unknown DFSP or bad file
    """
    logger.info(
        "Creating merchant draft",
        extra={"dba_trading_name": form.dba_trading_name, "has_file": file is not None},
    )
    upload = await read_license_upload(file)
    merchant = await merchant_service.create_draft(form, upload, portal_user)
    return DataResponse(
        message="Drafting Merchant Successful",
        data=map_merchant_to_draft_response(merchant),
    )


@router.get("/{merchant_id}", response_model=DataResponse[MerchantDetailResponse])
@handle_acquirer_errors
async def get_merchant(
    merchant_id: int,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[MerchantDetailResponse]:
    """
    Full merchant aggregate with sanitised creator and checker.

    Raises:
        HTTPException(404): Merchant not found
    """
    merchant = await merchant_service.get_merchant(merchant_id)
    return DataResponse(message="OK", data=map_merchant_to_detail(merchant))


@router.put("/{merchant_id}/draft", response_model=DataResponse[MerchantDraftResponse])
@handle_acquirer_errors
async def put_merchant_draft(
    merchant_id: int,
    form: MerchantDraftForm = Depends(merchant_draft_form),
    file: UploadFile | None = File(None),
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[MerchantDraftResponse]:
    """
    Update a Draft merchant created by the caller.

    Raises:
        HTTPException(404): Merchant not found
        HTTPException(422): Not in Draft, duplicate alias or invalid form
        HTTPException(401): Caller is not the drafting user
    """
    upload = await read_license_upload(file)
    merchant = await merchant_service.update_draft(merchant_id, form, upload, portal_user)
    return DataResponse(
        message="Updating Merchant Draft Successful",
        data=map_merchant_to_draft_response(merchant),
    )


@router.post(
    "/{merchant_id}/upload-license-document",
    response_model=DataResponse[MerchantDraftResponse],
)
@handle_acquirer_errors
async def post_license_document(
    merchant_id: int,
    file: UploadFile = File(...),
    license_number: str | None = Form(None),
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[MerchantDraftResponse]:
    """
    Upload or replace the license PDF of a Draft merchant.

    Raises:
        HTTPException(404): Merchant not found
        HTTPException(422): Missing or invalid file
    """
    upload = await read_license_upload(file)
    if upload is None:
        # An unnamed file part is treated the same as a missing one
        raise DocumentValidationError("File is required")

    merchant = await merchant_service.upload_license_document(
        merchant_id, upload, license_number or None, portal_user
    )
    return DataResponse(
        message="License Document Uploaded",
        data=map_merchant_to_draft_response(merchant),
    )


@router.get(
    "/{merchant_id}/license-document-url",
    response_model=DataResponse[LicenseDocumentUrlResponse],
)
@handle_acquirer_errors
async def get_license_document_url(
    merchant_id: int,
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> DataResponse[LicenseDocumentUrlResponse]:
    """
    Time-limited download URL for the merchant's license document.

    Raises:
        HTTPException(404): Merchant or document not found
    """
    url, expires_at = await merchant_service.get_license_document_url(merchant_id)
    return DataResponse(
        message="OK",
        data=LicenseDocumentUrlResponse(url=url, expires_at=expires_at),
    )
