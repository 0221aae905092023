"""
Authentication service.

Verifies portal user credentials, issues access tokens and resolves the
portal user behind a bearer token.

Dependencies: acquirer_backend.boundary.db.CRUD, acquirer_backend.core.security
System role: Login and request authentication use cases
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.application.services.audit_service import AuditService
from acquirer_backend.boundary.db.CRUD.portal_user_crud import portal_user_crud
from acquirer_backend.boundary.db.models import (
    AuditActionType,
    AuditTransactionStatus,
    PortalUserModel,
)
from acquirer_backend.configs.auth import AuthSettings
from acquirer_backend.core.exceptions import AuthenticationError, InvalidCredentialsError
from acquirer_backend.core.security import (
    create_access_token,
    decode_access_token,
    verify_password,
)

logger = logging.getLogger(__name__)

LOGIN_MODULE = "postUserLogin"


class AuthService:
    """Authentication service orchestrator."""

    def __init__(self, db: AsyncSession, auth_settings: AuthSettings) -> None:
        """
        Initialize auth service.

        Args:
            db: Async SQLAlchemy session
            auth_settings: JWT signing configuration
        """
        self.db = db
        self.settings = auth_settings
        self.audit = AuditService(db)

    async def login(self, email: str, password: str) -> str:
        """
        Verify credentials and issue an access token.

        Both outcomes are audited; the failure audit carries no portal user
        when the email is unknown.

        Args:
            email: Login email
            password: Clear text password

        Returns:
            str: Signed JWT

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await portal_user_crud.get_by_email(self.db, email)

        if user is None or not verify_password(password, user.password):
            logger.warning("Login failed", extra={"email": email})
            await self.audit.failure(
                AuditActionType.ACCESS,
                LOGIN_MODULE,
                "User Login failed: Invalid credentials",
                "PortalUser",
                portal_user_id=user.id if user else None,
                new_value={"email": email},
            )
            raise InvalidCredentialsError()

        token = create_access_token(
            user_id=user.id,
            email=user.email,
            secret=self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
            expires_minutes=self.settings.access_token_expire_minutes,
        )

        await self.audit.record_and_commit(
            action_type=AuditActionType.ACCESS,
            transaction_status=AuditTransactionStatus.SUCCESS,
            application_module=LOGIN_MODULE,
            event_description="User Login successful",
            entity_name="PortalUser",
            new_value={"email": email},
            portal_user_id=user.id,
        )
        logger.info("Login successful", extra={"portal_user_id": user.id})
        return token

    async def authenticate_token(self, token: str) -> PortalUserModel:
        """
        Resolve the portal user behind a bearer token.

        Args:
            token: Encoded JWT

        Returns:
            PortalUserModel: Authenticated user

        Raises:
            AuthenticationError: If the token is invalid, expired or the user is gone
        """
        claims = decode_access_token(token, self.settings.jwt_secret, self.settings.jwt_algorithm)
        user = await portal_user_crud.get_by_id(self.db, claims["id"])
        if user is None:
            raise AuthenticationError()
        return user
