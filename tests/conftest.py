"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite database, portal user/merchant factories, bearer
tokens, mocked S3 document client and an HTTP client over the ASGI app
Dependencies: pytest, sqlalchemy, httpx, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from acquirer_backend.api.deps.dependencies import get_document_client
from acquirer_backend.boundary.aws.s3_client import LicenseDocumentClient
from acquirer_backend.boundary.db import get_async_db
from acquirer_backend.boundary.db.base import Base
from acquirer_backend.boundary.db.models import (
    DFSPModel,
    MerchantModel,
    MerchantRegistrationStatus,
    PortalUserModel,
)
from acquirer_backend.configs import get_settings
from acquirer_backend.configs.license_storage import LicenseStorageSettings
from acquirer_backend.core.security import create_access_token, hash_password

TEST_PASSWORD = "s3cret-password"
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n%%EOF\n"


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    StaticPool keeps a single connection so every session sees the same
    database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create a test database session.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def create_portal_user(test_async_db: AsyncSession):
    """
    Factory fixture creating committed portal users.

    Returns:
        Callable: async (email, name) -> PortalUserModel
    """

    async def _create(email: str = "maker@example.com", name: str = "Maker") -> PortalUserModel:
        user = PortalUserModel(
            email=email,
            name=name,
            password=hash_password(TEST_PASSWORD, iterations=1000),
            phone_number="+639171234567",
        )
        test_async_db.add(user)
        await test_async_db.commit()
        return user

    return _create


@pytest.fixture
def user_password() -> str:
    """Clear text password of every factory-made portal user."""
    return TEST_PASSWORD


@pytest.fixture
async def maker(create_portal_user) -> PortalUserModel:
    """Portal user drafting merchants."""
    return await create_portal_user("maker@example.com", "Maker")


@pytest.fixture
async def checker(create_portal_user) -> PortalUserModel:
    """Portal user reviewing merchants."""
    return await create_portal_user("checker@example.com", "Checker")


@pytest.fixture
async def dfsp(test_async_db: AsyncSession) -> DFSPModel:
    """A DFSP merchants can reference."""
    row = DFSPModel(fsp_id="dfsp-a", name="DFSP A", dfsp_type="Bank", activated=True)
    test_async_db.add(row)
    await test_async_db.commit()
    return row


@pytest.fixture
def create_merchant(test_async_db: AsyncSession):
    """
    Factory fixture creating committed merchants directly in the database.

    Returns:
        Callable: async (creator, dba_trading_name, registration_status) -> MerchantModel
    """

    async def _create(
        creator: PortalUserModel,
        dba_trading_name: str = "Corner Shop",
        registration_status: MerchantRegistrationStatus = MerchantRegistrationStatus.DRAFT,
        **kwargs,
    ) -> MerchantModel:
        merchant = MerchantModel(
            dba_trading_name=dba_trading_name,
            registration_status=registration_status,
            created_by_id=creator.id,
            **kwargs,
        )
        test_async_db.add(merchant)
        await test_async_db.commit()
        return merchant

    return _create


@pytest.fixture
def auth_headers():
    """
    Build bearer headers for a portal user.

    Returns:
        Callable: (PortalUserModel) -> dict
    """
    auth = get_settings().auth

    def _headers(user: PortalUserModel) -> dict[str, str]:
        token = create_access_token(
            user_id=user.id,
            email=user.email,
            secret=auth.jwt_secret,
            algorithm=auth.jwt_algorithm,
            expires_minutes=5,
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def mock_s3_client() -> MagicMock:
    """Mock boto3 S3 client."""
    client = MagicMock()
    client.put_object.return_value = {}
    client.head_object.return_value = {}
    client.delete_object.return_value = {}
    client.generate_presigned_url.return_value = "https://bucket.example.com/license.pdf?sig=abc"
    return client


@pytest.fixture
def document_client(mock_s3_client: MagicMock) -> LicenseDocumentClient:
    """License document client over the mocked S3 client."""
    return LicenseDocumentClient(bucket="test-licenses", s3_client=mock_s3_client)


@pytest.fixture
def storage_settings() -> LicenseStorageSettings:
    """Storage settings with a 1MB upload limit."""
    return LicenseStorageSettings(bucket="test-licenses", max_file_size_mb=1)


@pytest.fixture
def pdf_bytes() -> bytes:
    """Minimal PDF content."""
    return PDF_BYTES


@pytest.fixture
async def client(test_session_factory, document_client):
    """
    HTTP client over the FastAPI app with database and S3 overridden.

    Each request gets its own session, like get_async_db does in production.
    """
    from acquirer_backend.main import create_app

    app = create_app()

    async def _override_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = _override_db
    app.dependency_overrides[get_document_client] = lambda: document_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
