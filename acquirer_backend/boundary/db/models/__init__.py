"""
Database models package.

Exports every ORM model and its enums so that importing this package
registers all tables with Base.metadata.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from acquirer_backend.boundary.db.models.audit_model import (
    AuditActionType,
    AuditModel,
    AuditTransactionStatus,
)
from acquirer_backend.boundary.db.models.business_license_model import BusinessLicenseModel
from acquirer_backend.boundary.db.models.business_owner_model import (
    BusinessOwnerIDType,
    BusinessOwnerModel,
)
from acquirer_backend.boundary.db.models.business_person_location_model import (
    BusinessPersonLocationModel,
)
from acquirer_backend.boundary.db.models.checkout_counter_model import CheckoutCounterModel
from acquirer_backend.boundary.db.models.contact_person_model import ContactPersonModel
from acquirer_backend.boundary.db.models.dfsp_model import DFSPModel
from acquirer_backend.boundary.db.models.merchant_location_model import (
    MerchantLocationModel,
    MerchantLocationType,
)
from acquirer_backend.boundary.db.models.merchant_model import (
    MerchantAllowBlockStatus,
    MerchantModel,
    MerchantRegistrationStatus,
    MerchantType,
    NumberOfEmployees,
)
from acquirer_backend.boundary.db.models.portal_user_model import PortalUserModel, PortalUserType

__all__ = [
    "AuditActionType",
    "AuditModel",
    "AuditTransactionStatus",
    "BusinessLicenseModel",
    "BusinessOwnerIDType",
    "BusinessOwnerModel",
    "BusinessPersonLocationModel",
    "CheckoutCounterModel",
    "ContactPersonModel",
    "DFSPModel",
    "MerchantAllowBlockStatus",
    "MerchantLocationModel",
    "MerchantLocationType",
    "MerchantModel",
    "MerchantRegistrationStatus",
    "MerchantType",
    "NumberOfEmployees",
    "PortalUserModel",
    "PortalUserType",
]
