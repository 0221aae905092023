"""
Shared plumbing for merchant use cases.

Loading guards (exists / owned / in status) and the rollback-log-audit
sequence every failed use case goes through.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.CRUD
System role: Base class for merchant service orchestrators
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.application.services.audit_service import AuditService
from acquirer_backend.boundary.db.CRUD.merchant_crud import merchant_crud
from acquirer_backend.boundary.db.models import (
    AuditActionType,
    MerchantModel,
    MerchantRegistrationStatus,
    PortalUserModel,
)
from acquirer_backend.core.exceptions import (
    AcquirerException,
    InvalidStatusError,
    MerchantNotFoundError,
    OwnershipError,
)
from acquirer_backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

MERCHANT_ENTITY = "Merchant"
NOT_CREATOR_MESSAGE = "Only The Same Drafted User is allowed."


class MerchantUseCaseService:
    """Base class binding a request session, an audit writer and merchant guards."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.audit = AuditService(db)

    async def _load_merchant(self, merchant_id: int, with_relations: bool = False) -> MerchantModel:
        if with_relations:
            merchant = await merchant_crud.get_with_relations(self.db, merchant_id)
        else:
            merchant = await merchant_crud.get_by_id(self.db, merchant_id)
        if merchant is None:
            raise MerchantNotFoundError(merchant_id)
        return merchant

    @staticmethod
    def _require_creator(merchant: MerchantModel, portal_user: PortalUserModel) -> None:
        if merchant.created_by_id != portal_user.id:
            raise OwnershipError(
                NOT_CREATOR_MESSAGE, merchant_id=merchant.id, portal_user_id=portal_user.id
            )

    @staticmethod
    def _require_draft(merchant: MerchantModel) -> None:
        if merchant.registration_status != MerchantRegistrationStatus.DRAFT:
            raise InvalidStatusError(
                "Merchant is not in Draft Status. "
                f"Current Status: {merchant.registration_status.value}",
                merchant_id=merchant.id,
                current_status=merchant.registration_status.value,
            )

    async def _fail(
        self,
        exc: Exception,
        action_type: AuditActionType,
        application_module: str,
        portal_user: PortalUserModel | None,
        merchant_id: int | None = None,
        entity_name: str = MERCHANT_ENTITY,
    ) -> None:
        """
        Roll back the use case, log it and write a failure audit row.

        The caller re-raises the original exception afterwards.
        """
        # rollback expires every loaded instance, read ids first
        portal_user_id = portal_user.id if portal_user else None
        await self.db.rollback()

        if isinstance(exc, AcquirerException):
            description = exc.message
            logger.warning(
                f"{application_module} rejected",
                extra={"merchant_id": merchant_id, "reason": exc.message, "details": exc.details},
            )
        else:
            description = f"{type(exc).__name__}: {exc}"
            log_exception_with_context(
                logger, f"{application_module} failed", exc, merchant_id=merchant_id
            )

        await self.audit.failure(
            action_type,
            application_module,
            description[:2048],
            entity_name,
            portal_user_id=portal_user_id,
            old_value={"merchant_id": merchant_id} if merchant_id is not None else None,
        )
