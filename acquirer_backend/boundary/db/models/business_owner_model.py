"""
Business owner ORM model.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Beneficial owner persistence for merchant KYC
"""

import enum

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin, enum_type


class BusinessOwnerIDType(str, enum.Enum):
    """Identity document presented by an owner."""

    NATIONAL_ID = "National ID"
    PASSPORT = "Passport"


class BusinessOwnerModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Business owner ORM model.

    Attributes:
        name, email, phone_number: Owner contact details
        identification_type: National ID or Passport
        identification_number: Document number
        merchant_id: Owning merchant
        business_person_location_id: Optional owner address
    """

    __tablename__ = "business_owners"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    phone_number: Mapped[str] = mapped_column(String(64), nullable=False)
    identification_type: Mapped[BusinessOwnerIDType] = mapped_column(
        enum_type(BusinessOwnerIDType), nullable=False
    )
    identification_number: Mapped[str] = mapped_column(String(255), nullable=False)

    merchant_id: Mapped[int] = mapped_column(
        ForeignKey("merchants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    business_person_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("business_person_locations.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    # Relationships
    merchant = relationship("MerchantModel", back_populates="business_owners")
    business_person_location = relationship("BusinessPersonLocationModel")
