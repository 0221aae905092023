"""
Runtime configuration API endpoints.

Routes: PUT /config/trace-level

Dependencies: acquirer_backend.observability
System role: Operational log level switching
"""

import logging

from fastapi import APIRouter, HTTPException, status

from acquirer_backend.models.common import MessageResponse
from acquirer_backend.models.config import TraceLevelRequest
from acquirer_backend.observability.logger import InvalidLogLevelError, set_log_level

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/config", tags=["config"])


@router.put("/trace-level", response_model=MessageResponse)
async def put_trace_level(request: TraceLevelRequest) -> MessageResponse:
    """
    Change the application log level at runtime.

    Raises:
        HTTPException(400): Unknown level name
    """
    try:
        set_log_level(request.level)
    except InvalidLogLevelError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.warning(f"New Log Level set: {request.level}")
    return MessageResponse(message="Log level set successfully")
