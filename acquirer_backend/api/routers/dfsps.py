"""
DFSP API endpoints.

Routes: GET /dfsps

Dependencies: acquirer_backend.application.services
System role: DFSP reference data HTTP API
"""

from fastapi import APIRouter, Depends

from acquirer_backend.api.deps.dependencies import get_current_portal_user, get_dfsp_service
from acquirer_backend.api.routers.router_utils.error_handling import handle_acquirer_errors
from acquirer_backend.application.services.dfsp_service import DFSPService
from acquirer_backend.boundary.db.models import PortalUserModel
from acquirer_backend.models.common import DataResponse
from acquirer_backend.models.dfsp import DFSPResponse

router = APIRouter(prefix="/dfsps", tags=["dfsps"])


@router.get("", response_model=DataResponse[list[DFSPResponse]])
@handle_acquirer_errors
async def get_dfsps(
    portal_user: PortalUserModel = Depends(get_current_portal_user),
    dfsp_service: DFSPService = Depends(get_dfsp_service),
) -> DataResponse[list[DFSPResponse]]:
    """List every DFSP a merchant can settle with."""
    dfsps = await dfsp_service.list_dfsps()
    return DataResponse(message="OK", data=[DFSPResponse.model_validate(d) for d in dfsps])
