"""
Contact person ORM model.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Merchant point-of-contact persistence
"""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class ContactPersonModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Contact person ORM model.

    Attributes:
        name, email, phone_number: Contact details
        is_same_as_business_owner: Details were copied from the first owner
        merchant_id: Owning merchant
        business_person_location_id: Address shared with the owner, if copied
    """

    __tablename__ = "contact_persons"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    phone_number: Mapped[str] = mapped_column(String(64), nullable=False)
    is_same_as_business_owner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    merchant_id: Mapped[int] = mapped_column(
        ForeignKey("merchants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    business_person_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("business_person_locations.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    # Relationships
    merchant = relationship("MerchantModel", back_populates="contact_persons")
    business_person_location = relationship("BusinessPersonLocationModel")
