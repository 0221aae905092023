"""
Merchant response mapping utilities.

Transforms ORM merchant aggregates into Pydantic response models.
Centralizes response construction so portal users are always sanitised.

Dependencies: acquirer_backend.models.merchant
System role: Merchant response transformation
"""

from typing import Sequence

from acquirer_backend.boundary.db.models import MerchantModel
from acquirer_backend.models.merchant import (
    MerchantDetailResponse,
    MerchantDraftResponse,
    MerchantListItem,
    MerchantResponse,
)


def map_merchant_to_response(merchant: MerchantModel) -> MerchantResponse:
    """Scalar merchant fields only, used by the status endpoints."""
    return MerchantResponse.model_validate(merchant)


def map_merchant_to_draft_response(merchant: MerchantModel) -> MerchantDraftResponse:
    """
    Transform a merchant aggregate into the drafting response.

    created_by is not part of MerchantDraftResponse, so the maker's record
    never leaves the API on these endpoints.
    """
    return MerchantDraftResponse.model_validate(merchant)


def map_merchant_to_detail(merchant: MerchantModel) -> MerchantDetailResponse:
    """
    Transform a fully loaded merchant into MerchantDetailResponse.

    created_by/checked_by go through PortalUserPublic, which has no
    password field.
    """
    return MerchantDetailResponse.model_validate(merchant)


def map_merchants_to_list_items(merchants: Sequence[MerchantModel]) -> list[MerchantListItem]:
    """
    Transform registry query results into list items.

    Args:
        merchants: Merchants with created_by, checked_by, locations and
            checkout_counters loaded

    Returns:
        list[MerchantListItem]: API list items
    """
    return [MerchantListItem.model_validate(m) for m in merchants]
