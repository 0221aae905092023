"""
Runtime configuration schemas.

Dependencies: pydantic
System role: Config API contracts
"""

from pydantic import BaseModel, Field


class TraceLevelRequest(BaseModel):
    """Request schema for changing the application log level."""

    level: str = Field(..., min_length=1, description="critical, error, warning, warn, info or debug")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
