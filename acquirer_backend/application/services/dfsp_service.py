"""
DFSP service.

Dependencies: acquirer_backend.boundary.db.CRUD
System role: DFSP reference data use cases
"""

from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.boundary.db.CRUD.dfsp_crud import dfsp_crud
from acquirer_backend.boundary.db.models import DFSPModel


class DFSPService:
    """DFSP listing for the merchant form's DFSP picker."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_dfsps(self) -> list[DFSPModel]:
        return list(await dfsp_crud.get_all(self.db))
