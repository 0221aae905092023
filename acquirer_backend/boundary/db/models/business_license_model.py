"""
Business license ORM model.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: License number and document pointer persistence
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class BusinessLicenseModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Business license ORM model.

    Attributes:
        license_number: Issued license number
        license_document_link: Object storage key of the uploaded PDF
        merchant_id: Owning merchant
    """

    __tablename__ = "business_licenses"

    license_number: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    license_document_link: Mapped[str | None] = mapped_column(
        String(1024), nullable=True, default=None
    )

    merchant_id: Mapped[int] = mapped_column(
        ForeignKey("merchants.id", ondelete="CASCADE"), nullable=False, index=True
    )

    merchant = relationship("MerchantModel", back_populates="business_licenses")
