"""
Merchant API routers.

Static paths (bulk-approve, bulk-reject, draft-counts, draft) are registered
before the /{merchant_id} routes.
"""

from fastapi import APIRouter

from .merchant_profile_router import router as merchant_profile_router
from .merchant_review_router import router as merchant_review_router
from .merchants_router import router as merchants_router

router = APIRouter()
router.include_router(merchant_review_router)
router.include_router(merchants_router)
router.include_router(merchant_profile_router)

__all__ = ["router"]
