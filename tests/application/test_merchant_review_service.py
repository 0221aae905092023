"""
Test suite for MerchantReviewService.

Tests the registration status workflow and maker/checker separation.

System role: Verification of review workflow orchestration
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.application.services.merchant_review_service import (
    APPROVE_REASON,
    BULK_APPROVE_REASON,
    MerchantReviewService,
)
from acquirer_backend.boundary.db.CRUD import audit_crud, merchant_crud
from acquirer_backend.boundary.db.models import (
    AuditTransactionStatus,
    MerchantRegistrationStatus,
)
from acquirer_backend.core.exceptions import (
    InvalidStatusError,
    MerchantNotFoundError,
    OwnershipError,
    ValidationError,
)

DRAFT = MerchantRegistrationStatus.DRAFT
REVIEW = MerchantRegistrationStatus.REVIEW
WAITING = MerchantRegistrationStatus.WAITING_ALIAS_GENERATION


@pytest.fixture
def review_service(test_async_db: AsyncSession) -> MerchantReviewService:
    """Provide MerchantReviewService bound to the test session."""
    return MerchantReviewService(db=test_async_db)


class TestSubmitForReview:
    """Test suite for MerchantReviewService.submit_for_review()."""

    @pytest.mark.asyncio
    async def test_should_move_draft_to_review(
        self, review_service: MerchantReviewService, maker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker)

        updated = await review_service.submit_for_review(merchant.id, maker)

        assert updated.registration_status == REVIEW
        assert updated.checked_by_id is None

    @pytest.mark.asyncio
    async def test_should_require_creator(
        self, review_service: MerchantReviewService, maker, checker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker)

        with pytest.raises(OwnershipError):
            await review_service.submit_for_review(merchant.id, checker)

    @pytest.mark.asyncio
    async def test_should_require_draft(
        self, review_service: MerchantReviewService, maker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker, registration_status=REVIEW)

        with pytest.raises(InvalidStatusError):
            await review_service.submit_for_review(merchant.id, maker)


class TestApproveAndReject:
    """Test suite for single merchant approve/reject."""

    @pytest.mark.asyncio
    async def test_approve_should_wait_for_alias_generation(
        self,
        review_service: MerchantReviewService,
        test_async_db: AsyncSession,
        maker,
        checker,
        create_merchant,
    ) -> None:
        # Arrange
        merchant = await create_merchant(maker, registration_status=REVIEW)

        # Act
        updated = await review_service.approve(merchant.id, checker)

        # Assert
        assert updated.registration_status == WAITING
        assert updated.registration_status_reason == APPROVE_REASON
        assert updated.checked_by_id == checker.id
        audits = await audit_crud.get_by_module(test_async_db, "putWaitingAliasGeneration")
        assert audits[0].old_value["registration_status"] == "Review"
        assert audits[0].new_value["registration_status"] == "WaitingAliasGeneration"

    @pytest.mark.asyncio
    async def test_approve_should_reject_maker(
        self,
        review_service: MerchantReviewService,
        test_async_db: AsyncSession,
        maker,
        create_merchant,
    ) -> None:
        merchant = await create_merchant(maker, registration_status=REVIEW)
        merchant_id = merchant.id

        with pytest.raises(OwnershipError, match="Same Hub User cannot do both"):
            await review_service.approve(merchant_id, maker)

        reloaded = await merchant_crud.get_with_relations(test_async_db, merchant_id)
        assert reloaded.registration_status == REVIEW
        audits = await audit_crud.get_by_module(test_async_db, "putWaitingAliasGeneration")
        assert audits[0].transaction_status == AuditTransactionStatus.FAILURE

    @pytest.mark.asyncio
    async def test_approve_should_require_review(
        self, review_service: MerchantReviewService, maker, checker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker)

        with pytest.raises(InvalidStatusError, match="Only Review Merchant can be approved"):
            await review_service.approve(merchant.id, checker)

    @pytest.mark.asyncio
    async def test_approve_should_404(
        self, review_service: MerchantReviewService, checker
    ) -> None:
        with pytest.raises(MerchantNotFoundError):
            await review_service.approve(404, checker)

    @pytest.mark.asyncio
    async def test_reject_should_store_reason(
        self, review_service: MerchantReviewService, maker, checker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker, registration_status=REVIEW)

        updated = await review_service.reject(merchant.id, "Blurry license", checker)

        assert updated.registration_status == MerchantRegistrationStatus.REJECTED
        assert updated.registration_status_reason == "Blurry license"

    @pytest.mark.asyncio
    async def test_reject_should_require_review(
        self, review_service: MerchantReviewService, maker, checker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker, registration_status=WAITING)

        with pytest.raises(InvalidStatusError, match="Only Review Merchant can be rejected"):
            await review_service.reject(merchant.id, "late", checker)


class TestUpdateRegistrationStatus:
    """Test suite for MerchantReviewService.update_registration_status()."""

    @pytest.mark.asyncio
    async def test_should_finish_approval(
        self, review_service: MerchantReviewService, maker, checker, create_merchant
    ) -> None:
        merchant = await create_merchant(
            maker, registration_status=WAITING, registration_status_reason="pending alias"
        )

        updated = await review_service.update_registration_status(
            merchant.id, MerchantRegistrationStatus.APPROVED, None, checker
        )

        assert updated.registration_status == MerchantRegistrationStatus.APPROVED
        assert updated.registration_status_reason == "pending alias"

    @pytest.mark.asyncio
    async def test_should_reject_maker(
        self, review_service: MerchantReviewService, maker, create_merchant
    ) -> None:
        merchant = await create_merchant(maker, registration_status=WAITING)

        with pytest.raises(OwnershipError):
            await review_service.update_registration_status(
                merchant.id, MerchantRegistrationStatus.APPROVED, "ok", maker
            )


class TestBulkTransitions:
    """Test suite for bulk approve/reject."""

    @pytest.mark.asyncio
    async def test_bulk_approve_should_dedupe_and_update_all(
        self,
        review_service: MerchantReviewService,
        test_async_db: AsyncSession,
        maker,
        checker,
        create_merchant,
    ) -> None:
        a = await create_merchant(maker, "A", REVIEW)
        b = await create_merchant(maker, "B", REVIEW)

        updated = await review_service.bulk_approve([b.id, a.id, a.id], checker)

        assert updated == 2
        for merchant_id in (a.id, b.id):
            reloaded = await merchant_crud.get_with_relations(test_async_db, merchant_id)
            assert reloaded.registration_status == WAITING
            assert reloaded.registration_status_reason == BULK_APPROVE_REASON
            assert reloaded.checked_by_id == checker.id

    @pytest.mark.asyncio
    async def test_bulk_should_be_all_or_nothing(
        self,
        review_service: MerchantReviewService,
        test_async_db: AsyncSession,
        maker,
        checker,
        create_merchant,
    ) -> None:
        # Arrange
        reviewable = await create_merchant(maker, "A", REVIEW)
        draft = await create_merchant(maker, "B", DRAFT)
        ids = [reviewable.id, draft.id]

        # Act
        with pytest.raises(ValidationError, match="All IDs must be valid"):
            await review_service.bulk_reject(ids, "Missing documents", checker)

        # Assert
        reloaded = await merchant_crud.get_with_relations(test_async_db, ids[0])
        assert reloaded.registration_status == REVIEW

    @pytest.mark.asyncio
    async def test_bulk_should_reject_own_merchants(
        self, review_service: MerchantReviewService, maker, create_merchant
    ) -> None:
        own = await create_merchant(maker, "A", REVIEW)

        with pytest.raises(ValidationError):
            await review_service.bulk_approve([own.id], maker)

    @pytest.mark.asyncio
    async def test_bulk_should_reject_unknown_ids(
        self, review_service: MerchantReviewService, checker
    ) -> None:
        with pytest.raises(ValidationError):
            await review_service.bulk_approve([999], checker)
