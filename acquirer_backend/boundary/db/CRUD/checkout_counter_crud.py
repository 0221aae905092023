"""
Checkout counter CRUD operations.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: PayInto alias persistence and uniqueness lookups
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import CheckoutCounterModel


class CheckoutCounterCRUD(BaseCRUD[CheckoutCounterModel]):
    """CRUD operations for CheckoutCounterModel."""

    def __init__(self) -> None:
        super().__init__(CheckoutCounterModel)

    async def alias_exists(
        self,
        session: AsyncSession,
        alias_value: str,
        exclude_counter_id: int | None = None,
    ) -> bool:
        """Whether any other checkout counter already uses the alias."""
        stmt = select(CheckoutCounterModel.id).where(
            CheckoutCounterModel.alias_value == alias_value
        )
        if exclude_counter_id is not None:
            stmt = stmt.where(CheckoutCounterModel.id != exclude_counter_id)
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None


checkout_counter_crud = CheckoutCounterCRUD()
