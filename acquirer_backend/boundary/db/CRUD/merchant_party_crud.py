"""
CRUD operations for the rows collected by the merchant wizard steps.

Locations, business owners, contact persons and the person addresses
they share.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: Merchant profile persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import (
    BusinessOwnerModel,
    BusinessPersonLocationModel,
    ContactPersonModel,
    MerchantLocationModel,
)


class MerchantLocationCRUD(BaseCRUD[MerchantLocationModel]):
    """CRUD operations for MerchantLocationModel."""

    def __init__(self) -> None:
        super().__init__(MerchantLocationModel)


class BusinessPersonLocationCRUD(BaseCRUD[BusinessPersonLocationModel]):
    """CRUD operations for BusinessPersonLocationModel."""

    def __init__(self) -> None:
        super().__init__(BusinessPersonLocationModel)


class BusinessOwnerCRUD(BaseCRUD[BusinessOwnerModel]):
    """CRUD operations for BusinessOwnerModel."""

    def __init__(self) -> None:
        super().__init__(BusinessOwnerModel)

    async def get_first_for_merchant(
        self,
        session: AsyncSession,
        merchant_id: int,
    ) -> BusinessOwnerModel | None:
        """
        Retrieve the merchant's first business owner with its address.

        Args:
            session: Async database session
            merchant_id: Owning merchant id

        Returns:
            BusinessOwnerModel or None when no owner was recorded
        """
        stmt = (
            select(BusinessOwnerModel)
            .where(BusinessOwnerModel.merchant_id == merchant_id)
            .options(selectinload(BusinessOwnerModel.business_person_location))
            .order_by(BusinessOwnerModel.id)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_location(
        self,
        session: AsyncSession,
        id: int,
    ) -> BusinessOwnerModel | None:
        stmt = (
            select(BusinessOwnerModel)
            .where(BusinessOwnerModel.id == id)
            .options(selectinload(BusinessOwnerModel.business_person_location))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


class ContactPersonCRUD(BaseCRUD[ContactPersonModel]):
    """CRUD operations for ContactPersonModel."""

    def __init__(self) -> None:
        super().__init__(ContactPersonModel)

    async def get_with_location(
        self,
        session: AsyncSession,
        id: int,
    ) -> ContactPersonModel | None:
        stmt = (
            select(ContactPersonModel)
            .where(ContactPersonModel.id == id)
            .options(selectinload(ContactPersonModel.business_person_location))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


merchant_location_crud = MerchantLocationCRUD()
business_person_location_crud = BusinessPersonLocationCRUD()
business_owner_crud = BusinessOwnerCRUD()
contact_person_crud = ContactPersonCRUD()
