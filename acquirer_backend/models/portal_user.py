"""
Portal user models and schemas.

Login contract and the sanitised user shapes embedded in merchant responses.

Dependencies: pydantic
System role: Authentication API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from acquirer_backend.boundary.db.models import PortalUserType
from acquirer_backend.models.common import EmailAddress


class LoginRequest(BaseModel):
    """Request schema for portal user login."""

    email: EmailAddress = Field(..., description="Login email")
    password: str = Field(..., min_length=8, max_length=255, description="Clear text password")


class LoginResponse(BaseModel):
    """Login outcome; token is only present on success."""

    success: bool
    message: str
    token: str | None = None


class PortalUserSummary(BaseModel):
    """Creator/checker reference used in merchant list items."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class PortalUserPublic(PortalUserSummary):
    """Creator/checker reference used in merchant detail, never carries the password."""

    email: str
    phone_number: str | None = None


class PortalUserProfile(PortalUserPublic):
    """Authenticated user's own profile."""

    user_type: PortalUserType
    created_at: datetime
    updated_at: datetime
