"""
DFSP CRUD operations.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.models
System role: DFSP reference data access
"""

from acquirer_backend.boundary.db.CRUD.base_crud import BaseCRUD
from acquirer_backend.boundary.db.models import DFSPModel


class DFSPCRUD(BaseCRUD[DFSPModel]):
    """CRUD operations for DFSPModel."""

    def __init__(self) -> None:
        super().__init__(DFSPModel)


dfsp_crud = DFSPCRUD()
