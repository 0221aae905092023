"""
Portal user CRUD operations.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: Portal user lookups for authentication
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import PortalUserModel


class PortalUserCRUD(BaseCRUD[PortalUserModel]):
    """CRUD operations for PortalUserModel."""

    def __init__(self) -> None:
        super().__init__(PortalUserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> PortalUserModel | None:
        """
        Retrieve a portal user by login email.

        Args:
            session: Async database session
            email: Login email (exact match)

        Returns:
            PortalUserModel if found, None otherwise
        """
        stmt = select(PortalUserModel).where(PortalUserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


portal_user_crud = PortalUserCRUD()
