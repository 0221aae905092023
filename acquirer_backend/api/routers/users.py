"""
Portal user API endpoints.

Routes:
- POST /users/login - Exchange credentials for an access token
- GET /users/profile - Authenticated user's profile

Dependencies: acquirer_backend.application.services, acquirer_backend.models
System role: Authentication HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from acquirer_backend.api.deps.dependencies import get_auth_service, get_current_portal_user
from acquirer_backend.api.routers.router_utils.error_handling import handle_acquirer_errors
from acquirer_backend.application.services.auth_service import AuthService
from acquirer_backend.boundary.db.models import PortalUserModel
from acquirer_backend.core.exceptions import InvalidCredentialsError
from acquirer_backend.models.common import DataResponse
from acquirer_backend.models.portal_user import LoginRequest, LoginResponse, PortalUserProfile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": LoginResponse}},
)
@handle_acquirer_errors
async def post_user_login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange email and password for a JWT.

    Returns:
        LoginResponse: success flag, message and token

    Raises:
        HTTPException(422): Malformed body
    """
    try:
        token = await auth_service.login(request.email, request.password)
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=LoginResponse(success=False, message=e.message).model_dump(exclude_none=True),
        )

    return LoginResponse(success=True, message="Login successful", token=token)


@router.get("/profile", response_model=DataResponse[PortalUserProfile])
async def get_user_profile(
    portal_user: PortalUserModel = Depends(get_current_portal_user),
) -> DataResponse[PortalUserProfile]:
    """Authenticated user's profile without the password hash."""
    return DataResponse(message="OK", data=PortalUserProfile.model_validate(portal_user))
