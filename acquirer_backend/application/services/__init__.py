"""Service orchestrators."""

from .audit_service import AuditService
from .auth_service import AuthService
from .dfsp_service import DFSPService
from .merchant_profile_service import MerchantProfileService
from .merchant_review_service import MerchantReviewService
from .merchant_service import MerchantService

__all__ = [
    "AuditService",
    "AuthService",
    "DFSPService",
    "MerchantProfileService",
    "MerchantReviewService",
    "MerchantService",
]
