"""
Audit CRUD operations.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: Audit trail persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import AuditModel


class AuditCRUD(BaseCRUD[AuditModel]):
    """CRUD operations for AuditModel."""

    def __init__(self) -> None:
        super().__init__(AuditModel)

    async def get_by_module(
        self,
        session: AsyncSession,
        application_module: str,
        limit: int | None = None,
    ) -> Sequence[AuditModel]:
        """
        Retrieve audit rows written by one handler, newest first.

        Args:
            session: Async database session
            application_module: Handler name (e.g. "postUserLogin")
            limit: Maximum number of rows

        Returns:
            Sequence of AuditModel
        """
        stmt = (
            select(AuditModel)
            .where(AuditModel.application_module == application_module)
            .order_by(AuditModel.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


audit_crud = AuditCRUD()
