"""
DFSP ORM model.

Digital Financial Service Providers a merchant can settle through.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Reference data for merchant records
"""

from datetime import date

from sqlalchemy import Boolean, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class DFSPModel(Base, IntegerIDMixin, TimestampMixin):
    """
    DFSP ORM model.

    Attributes:
        fsp_id: Scheme-wide FSP identifier (unique)
        name: Institution name
        dfsp_type: Institution category (bank, e-money issuer, ...)
        joined_date: Date the DFSP joined the scheme
        activated: Whether the DFSP is live
        logo_uri: Optional logo location
    """

    __tablename__ = "dfsps"

    fsp_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    dfsp_type: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    joined_date: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)
    activated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    logo_uri: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)
