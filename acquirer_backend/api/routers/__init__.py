"""API routers mounted under /api/v1."""

from fastapi import APIRouter

from .config import router as config_router
from .dfsps import router as dfsps_router
from .health import router as health_router
from .merchants import router as merchants_router
from .users import router as users_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(config_router)
api_router.include_router(users_router)
api_router.include_router(dfsps_router)
api_router.include_router(merchants_router)

__all__ = ["api_router"]
