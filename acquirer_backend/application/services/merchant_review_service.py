"""
Merchant review workflow service.

Moves merchants through Draft → Review → WaitingAliasGeneration →
Approved/Rejected while enforcing maker/checker separation.

Dependencies: acquirer_backend.boundary.db.CRUD
System role: Registration status transition use cases
"""

import logging
from typing import Sequence

from acquirer_backend.application.services.base_service import (
    MERCHANT_ENTITY,
    MerchantUseCaseService,
)
from acquirer_backend.boundary.db.CRUD.merchant_crud import merchant_crud
from acquirer_backend.boundary.db.models import (
    AuditActionType,
    AuditTransactionStatus,
    MerchantModel,
    MerchantRegistrationStatus,
    PortalUserModel,
)
from acquirer_backend.core.exceptions import InvalidStatusError, OwnershipError, ValidationError

logger = logging.getLogger(__name__)

SAME_USER_REVIEW_MESSAGE = "Same Hub User cannot do both Sumitting and Review Checking"
APPROVE_REASON = "Status Updated to WaitingAliasGeneration"
BULK_APPROVE_REASON = "Bulk Updated to Waiting Alias Generation"
BULK_IDS_MESSAGE = (
    'All IDs must be valid and have a status of "Review". and not created by you'
)


class MerchantReviewService(MerchantUseCaseService):
    """Registration status workflow orchestrator."""

    async def submit_for_review(
        self,
        merchant_id: int,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        """
        Move a Draft merchant to Review.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller did not create the draft
            InvalidStatusError: If the merchant is not Draft
        """
        try:
            merchant = await self._load_merchant(merchant_id)
            self._require_creator(merchant, portal_user)
            self._require_draft(merchant)
            await self._transition(
                merchant,
                MerchantRegistrationStatus.REVIEW,
                merchant.registration_status_reason,
                portal_user,
                application_module="putMerchantReadyToReview",
                record_checker=False,
            )
        except Exception as e:
            await self._fail(
                e, AuditActionType.UPDATE, "putMerchantReadyToReview", portal_user, merchant_id
            )
            raise
        return merchant

    async def update_registration_status(
        self,
        merchant_id: int,
        status: MerchantRegistrationStatus,
        reason: str | None,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        """
        Set any registration status as a checker.

        Used to finish WaitingAliasGeneration → Approved once the alias exists.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller created the merchant
        """
        try:
            merchant = await self._load_merchant(merchant_id)
            self._require_checker(merchant, portal_user)
            await self._transition(
                merchant,
                status,
                reason if reason is not None else merchant.registration_status_reason,
                portal_user,
                application_module="putMerchantStatus",
            )
        except Exception as e:
            await self._fail(e, AuditActionType.UPDATE, "putMerchantStatus", portal_user, merchant_id)
            raise
        return merchant

    async def approve(self, merchant_id: int, portal_user: PortalUserModel) -> MerchantModel:
        """
        Move a Review merchant to WaitingAliasGeneration.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller created the merchant
            InvalidStatusError: If the merchant is not in Review
        """
        try:
            merchant = await self._load_merchant(merchant_id)
            self._require_checker(merchant, portal_user)
            self._require_review(
                merchant, "Only Review Merchant can be approved with WaitingAliasGeneration"
            )
            await self._transition(
                merchant,
                MerchantRegistrationStatus.WAITING_ALIAS_GENERATION,
                APPROVE_REASON,
                portal_user,
                application_module="putWaitingAliasGeneration",
            )
        except Exception as e:
            await self._fail(
                e, AuditActionType.UPDATE, "putWaitingAliasGeneration", portal_user, merchant_id
            )
            raise
        return merchant

    async def reject(
        self,
        merchant_id: int,
        reason: str,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        """
        Move a Review merchant to Rejected.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller created the merchant
            InvalidStatusError: If the merchant is not in Review
        """
        try:
            merchant = await self._load_merchant(merchant_id)
            self._require_checker(merchant, portal_user)
            self._require_review(merchant, "Only Review Merchant can be rejected")
            await self._transition(
                merchant,
                MerchantRegistrationStatus.REJECTED,
                reason,
                portal_user,
                application_module="putMerchantReject",
            )
        except Exception as e:
            await self._fail(e, AuditActionType.UPDATE, "putMerchantReject", portal_user, merchant_id)
            raise
        return merchant

    async def bulk_approve(self, ids: Sequence[int], portal_user: PortalUserModel) -> int:
        """
        Move many Review merchants to WaitingAliasGeneration in one statement.

        Returns:
            int: Number of merchants updated

        Raises:
            ValidationError: If any id is unknown, not in Review or created by the caller
        """
        return await self._bulk_transition(
            ids,
            MerchantRegistrationStatus.WAITING_ALIAS_GENERATION,
            BULK_APPROVE_REASON,
            portal_user,
            application_module="putBulkApprove",
        )

    async def bulk_reject(
        self,
        ids: Sequence[int],
        reason: str,
        portal_user: PortalUserModel,
    ) -> int:
        """
        Move many Review merchants to Rejected in one statement.

        Raises:
            ValidationError: If any id is unknown, not in Review or created by the caller
        """
        return await self._bulk_transition(
            ids,
            MerchantRegistrationStatus.REJECTED,
            reason,
            portal_user,
            application_module="putBulkReject",
        )

    @staticmethod
    def _require_checker(merchant: MerchantModel, portal_user: PortalUserModel) -> None:
        if merchant.created_by_id == portal_user.id:
            raise OwnershipError(
                SAME_USER_REVIEW_MESSAGE, merchant_id=merchant.id, portal_user_id=portal_user.id
            )

    @staticmethod
    def _require_review(merchant: MerchantModel, message: str) -> None:
        if merchant.registration_status != MerchantRegistrationStatus.REVIEW:
            raise InvalidStatusError(
                message,
                merchant_id=merchant.id,
                current_status=merchant.registration_status.value,
            )

    async def _transition(
        self,
        merchant: MerchantModel,
        status: MerchantRegistrationStatus,
        reason: str | None,
        portal_user: PortalUserModel,
        application_module: str,
        record_checker: bool = True,
    ) -> None:
        old_status = merchant.registration_status

        merchant.registration_status = status
        merchant.registration_status_reason = reason
        if record_checker:
            merchant.checked_by_id = portal_user.id

        await self.audit.record(
            action_type=AuditActionType.UPDATE,
            transaction_status=AuditTransactionStatus.SUCCESS,
            application_module=application_module,
            event_description=f"Updating Merchant Status to {status.value} Successful",
            entity_name=MERCHANT_ENTITY,
            old_value={"id": merchant.id, "registration_status": old_status.value},
            new_value={"id": merchant.id, "registration_status": status.value},
            portal_user_id=portal_user.id,
        )
        await self.db.commit()
        await self.db.refresh(merchant)

        logger.info(
            "Merchant status updated",
            extra={
                "merchant_id": merchant.id,
                "old_status": old_status.value,
                "new_status": status.value,
                "portal_user_id": portal_user.id,
            },
        )

    async def _bulk_transition(
        self,
        ids: Sequence[int],
        status: MerchantRegistrationStatus,
        reason: str,
        portal_user: PortalUserModel,
        application_module: str,
    ) -> int:
        unique_ids = sorted(set(ids))
        try:
            if not unique_ids or any(merchant_id < 1 for merchant_id in unique_ids):
                raise ValidationError(BULK_IDS_MESSAGE, field="ids")

            reviewable = await merchant_crud.count_reviewable(self.db, unique_ids, portal_user.id)
            if reviewable != len(unique_ids):
                raise ValidationError(
                    BULK_IDS_MESSAGE,
                    field="ids",
                    details={"requested": len(unique_ids), "reviewable": reviewable},
                )

            updated = await merchant_crud.bulk_update_status(
                self.db, unique_ids, status, reason, checked_by_id=portal_user.id
            )
            await self.audit.record(
                action_type=AuditActionType.UPDATE,
                transaction_status=AuditTransactionStatus.SUCCESS,
                application_module=application_module,
                event_description=f"Bulk Updating Merchant Status to {status.value} Successful",
                entity_name=MERCHANT_ENTITY,
                old_value={
                    "ids": unique_ids,
                    "registration_status": MerchantRegistrationStatus.REVIEW.value,
                },
                new_value={"ids": unique_ids, "registration_status": status.value},
                portal_user_id=portal_user.id,
            )
            await self.db.commit()
        except Exception as e:
            await self._fail(e, AuditActionType.UPDATE, application_module, portal_user)
            raise

        logger.info(
            "Merchants bulk updated",
            extra={"merchant_ids": unique_ids, "new_status": status.value, "count": updated},
        )
        return updated
