"""
DFSP response schema.

Dependencies: pydantic
System role: DFSP API contracts
"""

from datetime import date

from pydantic import BaseModel, ConfigDict


class DFSPResponse(BaseModel):
    """Digital Financial Service Provider as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    fsp_id: str
    name: str
    dfsp_type: str | None = None
    joined_date: date | None = None
    activated: bool
    logo_uri: str | None = None
