"""
Exception hierarchy for the acquirer back office.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AcquirerException(Exception):
    """Base exception for all acquirer application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AcquirerException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DuplicateAliasError(ValidationError):
    """Raised when a PayInto alias is already used by another checkout counter."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"Alias Value already exists: {alias}", field="payinto_alias")
        self.alias = alias


class InvalidStatusError(ValidationError):
    """Raised when a merchant is not in the status an operation requires."""

    def __init__(
        self,
        message: str,
        merchant_id: int | None = None,
        current_status: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if merchant_id is not None:
            details["merchant_id"] = merchant_id
        if current_status is not None:
            details["current_status"] = current_status
        super().__init__(message, field="registration_status", details=details)


class DocumentValidationError(ValidationError):
    """Raised when an uploaded license document is rejected."""

    def __init__(self, message: str, filename: str | None = None) -> None:
        super().__init__(message, field="file", details={"filename": filename})


class EntityNotFoundError(AcquirerException):
    """Raised when a requested row does not exist."""

    def __init__(self, entity: str, entity_id: Any | None = None) -> None:
        """
        Initialize not found error.

        Args:
            entity: Human-readable entity name (e.g. "Merchant")
            entity_id: Identifier that was looked up
        """
        details = {"entity": entity}
        if entity_id is not None:
            details["id"] = entity_id
        super().__init__(f"{entity} not found", details)
        self.entity = entity
        self.entity_id = entity_id


class MerchantNotFoundError(EntityNotFoundError):
    """Raised when a merchant cannot be found."""

    def __init__(self, merchant_id: int | None = None) -> None:
        super().__init__("Merchant", merchant_id)


class AuthenticationError(AcquirerException):
    """Raised when a request carries no valid portal user identity."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class InvalidCredentialsError(AcquirerException):
    """Raised when a login attempt fails."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class OwnershipError(AcquirerException):
    """Raised when maker/checker separation or draft ownership is violated."""

    def __init__(
        self,
        message: str,
        merchant_id: int | None = None,
        portal_user_id: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if merchant_id is not None:
            details["merchant_id"] = merchant_id
        if portal_user_id is not None:
            details["portal_user_id"] = portal_user_id
        super().__init__(message, details)


class StorageError(AcquirerException):
    """Raised when object storage operations fail."""

    def __init__(
        self,
        message: str,
        object_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if object_key:
            details["object_key"] = object_key
        super().__init__(message, details)
