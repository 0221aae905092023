"""
Test suite for AuthService.

System role: Verification of login and token authentication
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.application.services.auth_service import LOGIN_MODULE, AuthService
from acquirer_backend.boundary.db.CRUD import audit_crud
from acquirer_backend.boundary.db.models import AuditTransactionStatus
from acquirer_backend.configs.auth import AuthSettings
from acquirer_backend.core.exceptions import AuthenticationError, InvalidCredentialsError
from acquirer_backend.core.security import create_access_token, decode_access_token

SECRET = "auth-service-secret"


@pytest.fixture
def auth_service(test_async_db: AsyncSession) -> AuthService:
    """Provide AuthService with a fixed signing secret."""
    return AuthService(db=test_async_db, auth_settings=AuthSettings(jwt_secret=SECRET))


class TestLogin:
    """Test suite for AuthService.login()."""

    @pytest.mark.asyncio
    async def test_should_issue_token_and_audit(
        self, auth_service: AuthService, test_async_db: AsyncSession, maker, user_password
    ) -> None:
        token = await auth_service.login("maker@example.com", user_password)

        claims = decode_access_token(token, SECRET)
        assert claims["id"] == maker.id
        audits = await audit_crud.get_by_module(test_async_db, LOGIN_MODULE)
        assert audits[0].transaction_status == AuditTransactionStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_wrong_password_should_fail_and_audit(
        self, auth_service: AuthService, test_async_db: AsyncSession, maker
    ) -> None:
        maker_id = maker.id

        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await auth_service.login("maker@example.com", "wrong-password")

        audits = await audit_crud.get_by_module(test_async_db, LOGIN_MODULE)
        assert audits[0].transaction_status == AuditTransactionStatus.FAILURE
        assert audits[0].portal_user_id == maker_id

    @pytest.mark.asyncio
    async def test_unknown_email_should_fail(
        self, auth_service: AuthService, test_async_db: AsyncSession, user_password
    ) -> None:
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("nobody@example.com", user_password)

        audits = await audit_crud.get_by_module(test_async_db, LOGIN_MODULE)
        assert audits[0].portal_user_id is None


class TestAuthenticateToken:
    """Test suite for AuthService.authenticate_token()."""

    @pytest.mark.asyncio
    async def test_should_resolve_user(self, auth_service: AuthService, maker) -> None:
        token = create_access_token(maker.id, maker.email, SECRET)

        user = await auth_service.authenticate_token(token)

        assert user.id == maker.id

    @pytest.mark.asyncio
    async def test_should_reject_unknown_user(self, auth_service: AuthService) -> None:
        token = create_access_token(999, "ghost@example.com", SECRET)

        with pytest.raises(AuthenticationError):
            await auth_service.authenticate_token(token)
