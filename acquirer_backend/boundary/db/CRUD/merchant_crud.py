"""
Merchant CRUD operations.

Provides Create, Read, Update, Delete operations for MerchantModel with
filtered listing, eager loading of the merchant aggregate and the bulk
status update used by the review workflow.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: Merchant persistence operations
"""

from datetime import datetime, timedelta
from typing import Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from acquirer_backend.boundary.db.base import utcnow
from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import (
    BusinessOwnerModel,
    CheckoutCounterModel,
    ContactPersonModel,
    MerchantModel,
    MerchantRegistrationStatus,
)


def _day_bounds(day: datetime) -> tuple[datetime, datetime]:
    start = day.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


class MerchantCRUD(BaseCRUD[MerchantModel]):
    """
    CRUD operations for MerchantModel.

    Extends BaseCRUD with aggregate loading, registry filtering and
    workflow-specific counts and bulk updates.
    """

    def __init__(self) -> None:
        """Initialize MerchantCRUD with MerchantModel."""
        super().__init__(MerchantModel)

    async def get_with_relations(
        self,
        session: AsyncSession,
        id: int,
    ) -> MerchantModel | None:
        """
        Retrieve a merchant with its full aggregate eagerly loaded.

        populate_existing refreshes rows already in the identity map, so this
        also serves as a reload after a service commit.

        Args:
            session: Async database session
            id: Merchant primary key

        Returns:
            MerchantModel with locations, counters, licenses, owners, contacts,
            DFSP and portal users loaded, or None
        """
        stmt = (
            select(MerchantModel)
            .where(MerchantModel.id == id)
            .options(
                selectinload(MerchantModel.locations),
                selectinload(MerchantModel.checkout_counters),
                selectinload(MerchantModel.business_licenses),
                selectinload(MerchantModel.business_owners).selectinload(
                    BusinessOwnerModel.business_person_location
                ),
                selectinload(MerchantModel.contact_persons).selectinload(
                    ContactPersonModel.business_person_location
                ),
                selectinload(MerchantModel.dfsp),
                selectinload(MerchantModel.created_by),
                selectinload(MerchantModel.checked_by),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        session: AsyncSession,
        merchant_id: int | None = None,
        dba_name: str | None = None,
        registration_status: MerchantRegistrationStatus | None = None,
        payinto_id: str | None = None,
        added_by: int | None = None,
        approved_by: int | None = None,
        added_day: datetime | None = None,
        updated_day: datetime | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[MerchantModel]:
        """
        List merchants newest first, AND-combining every filter that is set.

        Args:
            session: Async database session
            merchant_id: Exact merchant id
            dba_name: Case-insensitive substring of dba_trading_name
            registration_status: Workflow state
            payinto_id: Alias value of any of the merchant's checkout counters
            added_by: Creator portal user id
            approved_by: Checker portal user id
            added_day: Any moment of the UTC day the merchant was created
            updated_day: Any moment of the UTC day the merchant was last updated
            limit: Maximum number of rows
            offset: Rows to skip

        Returns:
            Sequence of MerchantModel with portal users, locations and
            checkout counters loaded
        """
        stmt = select(MerchantModel).options(
            selectinload(MerchantModel.created_by),
            selectinload(MerchantModel.checked_by),
            selectinload(MerchantModel.locations),
            selectinload(MerchantModel.checkout_counters),
        )

        if merchant_id is not None:
            stmt = stmt.where(MerchantModel.id == merchant_id)
        if dba_name:
            stmt = stmt.where(MerchantModel.dba_trading_name.ilike(f"%{dba_name}%"))
        if registration_status is not None:
            stmt = stmt.where(MerchantModel.registration_status == registration_status)
        if payinto_id:
            stmt = stmt.where(
                MerchantModel.checkout_counters.any(
                    CheckoutCounterModel.alias_value == payinto_id
                )
            )
        if added_by is not None:
            stmt = stmt.where(MerchantModel.created_by_id == added_by)
        if approved_by is not None:
            stmt = stmt.where(MerchantModel.checked_by_id == approved_by)
        if added_day is not None:
            start, end = _day_bounds(added_day)
            stmt = stmt.where(MerchantModel.created_at >= start, MerchantModel.created_at < end)
        if updated_day is not None:
            start, end = _day_bounds(updated_day)
            stmt = stmt.where(MerchantModel.updated_at >= start, MerchantModel.updated_at < end)

        stmt = stmt.order_by(MerchantModel.created_at.desc(), MerchantModel.id.desc())
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_drafts_by_creator(self, session: AsyncSession, portal_user_id: int) -> int:
        """
        Count merchants a portal user created that are still Draft.

        Args:
            session: Async database session
            portal_user_id: Creator id

        Returns:
            int: Number of draft merchants
        """
        stmt = select(func.count(MerchantModel.id)).where(
            MerchantModel.created_by_id == portal_user_id,
            MerchantModel.registration_status == MerchantRegistrationStatus.DRAFT,
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def count_reviewable(
        self,
        session: AsyncSession,
        ids: Sequence[int],
        checker_id: int,
    ) -> int:
        """
        Count how many of the given merchants a checker may act on.

        A merchant qualifies when it is in Review and was not created by
        the checker.

        Args:
            session: Async database session
            ids: Distinct merchant ids
            checker_id: Portal user performing the review

        Returns:
            int: Number of qualifying merchants
        """
        stmt = select(func.count(MerchantModel.id)).where(
            MerchantModel.id.in_(ids),
            MerchantModel.registration_status == MerchantRegistrationStatus.REVIEW,
            MerchantModel.created_by_id != checker_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def bulk_update_status(
        self,
        session: AsyncSession,
        ids: Sequence[int],
        status: MerchantRegistrationStatus,
        reason: str | None,
        checked_by_id: int,
    ) -> int:
        """
        Move many merchants to a new status in one UPDATE statement.

        Args:
            session: Async database session
            ids: Merchant ids
            status: Target registration status
            reason: Registration status reason to store
            checked_by_id: Checker portal user id

        Returns:
            int: Number of rows updated
        """
        stmt = (
            update(MerchantModel)
            .where(MerchantModel.id.in_(ids))
            .values(
                registration_status=status,
                registration_status_reason=reason,
                checked_by_id=checked_by_id,
                updated_at=utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount


merchant_crud = MerchantCRUD()
