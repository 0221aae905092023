"""
Audit service.

Writes audit trail rows for access and state changes.

Dependencies: acquirer_backend.boundary.db.CRUD, sqlalchemy
System role: Compliance audit recording
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.boundary.db.CRUD.audit_crud import audit_crud
from acquirer_backend.boundary.db.models import (
    AuditActionType,
    AuditModel,
    AuditTransactionStatus,
)
from acquirer_backend.observability.log_utils import redact

logger = logging.getLogger(__name__)


class AuditService:
    """Audit trail writer bound to the request's database session."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize audit service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def record(
        self,
        action_type: AuditActionType,
        transaction_status: AuditTransactionStatus,
        application_module: str,
        event_description: str,
        entity_name: str,
        old_value: dict[str, Any] | None = None,
        new_value: dict[str, Any] | None = None,
        portal_user_id: int | None = None,
    ) -> AuditModel:
        """
        Add an audit row to the current transaction without committing.

        Used on success paths so the audit row commits atomically with the
        change it describes.

        Returns:
            AuditModel: Flushed audit row
        """
        return await audit_crud.create(
            self.db,
            action_type=action_type,
            transaction_status=transaction_status,
            application_module=application_module,
            event_description=event_description,
            entity_name=entity_name,
            old_value=redact(old_value or {}),
            new_value=redact(new_value or {}),
            portal_user_id=portal_user_id,
        )

    async def record_and_commit(self, **kwargs) -> None:
        """
        Write an audit row in its own transaction.

        Used for reads and for failures after the use case rolled back. A
        failure to write the audit row is logged and does not mask the
        caller's outcome.

        Args:
            **kwargs: Same arguments as record()
        """
        try:
            await self.record(**kwargs)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to write audit row",
                extra={
                    "error": str(e),
                    "application_module": kwargs.get("application_module"),
                },
            )

    async def failure(
        self,
        action_type: AuditActionType,
        application_module: str,
        event_description: str,
        entity_name: str,
        portal_user_id: int | None = None,
        old_value: dict[str, Any] | None = None,
        new_value: dict[str, Any] | None = None,
    ) -> None:
        """Record a failed operation in its own transaction."""
        await self.record_and_commit(
            action_type=action_type,
            transaction_status=AuditTransactionStatus.FAILURE,
            application_module=application_module,
            event_description=event_description,
            entity_name=entity_name,
            old_value=old_value,
            new_value=new_value,
            portal_user_id=portal_user_id,
        )
