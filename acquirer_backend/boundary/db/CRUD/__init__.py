"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from acquirer_backend.boundary.db.CRUD import merchant_crud

    merchant = await merchant_crud.get_with_relations(db, merchant_id)
"""

from acquirer_backend.boundary.db.CRUD.audit_crud import AuditCRUD, audit_crud
from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.CRUD.business_license_crud import (
    BusinessLicenseCRUD,
    business_license_crud,
)
from acquirer_backend.boundary.db.CRUD.checkout_counter_crud import (
    CheckoutCounterCRUD,
    checkout_counter_crud,
)
from acquirer_backend.boundary.db.CRUD.dfsp_crud import DFSPCRUD, dfsp_crud
from acquirer_backend.boundary.db.CRUD.merchant_crud import MerchantCRUD, merchant_crud
from acquirer_backend.boundary.db.CRUD.merchant_party_crud import (
    BusinessOwnerCRUD,
    BusinessPersonLocationCRUD,
    ContactPersonCRUD,
    MerchantLocationCRUD,
    business_owner_crud,
    business_person_location_crud,
    contact_person_crud,
    merchant_location_crud,
)
from acquirer_backend.boundary.db.CRUD.portal_user_crud import PortalUserCRUD, portal_user_crud

__all__ = [
    "AuditCRUD",
    "BaseCRUD",
    "BusinessLicenseCRUD",
    "BusinessOwnerCRUD",
    "BusinessPersonLocationCRUD",
    "CheckoutCounterCRUD",
    "ContactPersonCRUD",
    "DFSPCRUD",
    "MerchantCRUD",
    "MerchantLocationCRUD",
    "PortalUserCRUD",
    "audit_crud",
    "business_license_crud",
    "business_owner_crud",
    "business_person_location_crud",
    "checkout_counter_crud",
    "contact_person_crud",
    "dfsp_crud",
    "merchant_crud",
    "merchant_location_crud",
    "portal_user_crud",
]
