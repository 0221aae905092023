"""
Test suite for the router error handling decorator.

System role: Verification of domain error to HTTP status mapping
"""

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from acquirer_backend.api.routers.router_utils.error_handling import handle_acquirer_errors
from acquirer_backend.core.exceptions import (
    AcquirerException,
    AuthenticationError,
    DocumentValidationError,
    DuplicateAliasError,
    EntityNotFoundError,
    InvalidCredentialsError,
    InvalidStatusError,
    MerchantNotFoundError,
    OwnershipError,
    StorageError,
    ValidationError,
)


def _raising(exc: Exception):
    @handle_acquirer_errors
    async def handler():
        raise exc

    return handler


class TestHandleAcquirerErrors:
    """Test suite for handle_acquirer_errors()."""

    @pytest.mark.asyncio
    async def test_should_return_result_unchanged(self) -> None:
        @handle_acquirer_errors
        async def handler(value: int) -> int:
            return value * 2

        assert await handler(value=21) == 42

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc, status_code, detail",
        [
            (MerchantNotFoundError(1), 404, "Merchant not found"),
            (EntityNotFoundError("License Document"), 404, "License Document not found"),
            (OwnershipError("Only The Same Drafted User is allowed."), 401,
             "Only The Same Drafted User is allowed."),
            (AuthenticationError(), 401, "Unauthorized"),
            (InvalidCredentialsError(), 400, "Invalid credentials"),
            (ValidationError("DFSP not found"), 422, "DFSP not found"),
            (DuplicateAliasError("000123"), 422, "Alias Value already exists: 000123"),
            (InvalidStatusError("Merchant is not in Draft Status. Current Status: Review"), 422,
             "Merchant is not in Draft Status. Current Status: Review"),
            (DocumentValidationError("File is empty", "a.pdf"), 422, "File is empty"),
            (StorageError("put failed"), 502, "Document storage unavailable"),
            (AcquirerException("odd"), 400, "odd"),
            (OperationalError("SELECT 1", {}, Exception("down")), 500, "Database error"),
            (RuntimeError("boom"), 500, "An internal error occurred"),
        ],
    )
    async def test_should_map_exceptions(
        self, exc: Exception, status_code: int, detail: str
    ) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await _raising(exc)()

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == detail

    @pytest.mark.asyncio
    async def test_should_pass_http_exceptions_through(self) -> None:
        original = HTTPException(status_code=418, detail="teapot")

        with pytest.raises(HTTPException) as exc_info:
            await _raising(original)()

        assert exc_info.value is original

    def test_should_preserve_signature_for_fastapi(self) -> None:
        @handle_acquirer_errors
        async def handler(merchant_id: int) -> None:
            """Docstring."""

        assert handler.__name__ == "handler"
        assert handler.__wrapped__.__doc__ == "Docstring."
