"""
Business license CRUD operations.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: License row persistence
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import BusinessLicenseModel


class BusinessLicenseCRUD(BaseCRUD[BusinessLicenseModel]):
    """CRUD operations for BusinessLicenseModel."""

    def __init__(self) -> None:
        super().__init__(BusinessLicenseModel)

    async def get_first_for_merchant(
        self,
        session: AsyncSession,
        merchant_id: int,
    ) -> BusinessLicenseModel | None:
        """
        Retrieve the merchant's first (oldest) license.

        Args:
            session: Async database session
            merchant_id: Owning merchant id

        Returns:
            BusinessLicenseModel or None when the merchant has no license
        """
        stmt = (
            select(BusinessLicenseModel)
            .where(BusinessLicenseModel.merchant_id == merchant_id)
            .order_by(BusinessLicenseModel.id)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


business_license_crud = BusinessLicenseCRUD()
