"""
Portal user ORM model.

Back-office staff who draft (maker) and review (checker) merchant records.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Identity persistence for authentication and ownership checks
"""

import enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin, enum_type


class PortalUserType(str, enum.Enum):
    """Organisation a portal user belongs to."""

    HUB = "Hub"
    DFSP = "DFSP"


class PortalUserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Portal user ORM model.

    Attributes:
        id: Integer primary key
        name: Display name
        email: Login email (unique)
        password: PBKDF2 hash, never serialized
        phone_number: Contact phone
        user_type: Hub or DFSP staff
    """

    __tablename__ = "portal_users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    user_type: Mapped[PortalUserType] = mapped_column(
        enum_type(PortalUserType),
        nullable=False,
        default=PortalUserType.HUB,
    )
