"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: acquirer_backend.configs, acquirer_backend.application, acquirer_backend.boundary
System role: DI container for service injection
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.application.services import (
    AuthService,
    DFSPService,
    MerchantProfileService,
    MerchantReviewService,
    MerchantService,
)
from acquirer_backend.boundary.aws.s3_client import LicenseDocumentClient
from acquirer_backend.boundary.db import get_async_db
from acquirer_backend.boundary.db.models import PortalUserModel
from acquirer_backend.configs import Settings, get_settings
from acquirer_backend.core.exceptions import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._document_client = None

    @property
    def document_client(self) -> LicenseDocumentClient:
        """Get cached license document client."""
        if self._document_client is None:
            storage = get_settings().license_storage
            self._document_client = LicenseDocumentClient(
                bucket=storage.bucket,
                region=storage.region,
                endpoint_url=storage.endpoint_url,
                access_key_id=storage.access_key_id,
                secret_access_key=storage.secret_access_key,
            )
        return self._document_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._document_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_document_client() -> LicenseDocumentClient:
    """
    Get license document client.

    Returns:
        LicenseDocumentClient: Client for license bucket operations
    """
    return get_service_cache().document_client


def get_auth_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(db=db, auth_settings=settings.auth)


async def get_current_portal_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> PortalUserModel:
    """
    Resolve the authenticated portal user from the bearer token.

    Raises:
        HTTPException(401): Missing header, invalid/expired token or unknown user
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await auth_service.authenticate_token(credentials.credentials)
    except AuthenticationError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_dfsp_service(db: AsyncSession = Depends(get_async_db)) -> DFSPService:
    """Get DFSP service instance."""
    return DFSPService(db=db)


def get_merchant_service(
    db: AsyncSession = Depends(get_async_db),
    document_client: LicenseDocumentClient = Depends(get_document_client),
    settings: Settings = Depends(get_settings_dependency),
) -> MerchantService:
    """
    Get merchant service instance.

    Args:
        db: Async database session (injected via Depends)
        document_client: License document storage client
        settings: Application settings

    Returns:
        MerchantService: Merchant drafting and query service
    """
    return MerchantService(
        db=db,
        document_client=document_client,
        storage_settings=settings.license_storage,
    )


def get_merchant_profile_service(
    db: AsyncSession = Depends(get_async_db),
) -> MerchantProfileService:
    """Get merchant wizard step service instance."""
    return MerchantProfileService(db=db)


def get_merchant_review_service(
    db: AsyncSession = Depends(get_async_db),
) -> MerchantReviewService:
    """Get merchant review workflow service instance."""
    return MerchantReviewService(db=db)
