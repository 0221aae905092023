"""
Checkout counter ORM model.

A merchant's payment-collection point, identified by its PayInto alias.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: PayInto alias persistence
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin

DEFAULT_ALIAS_TYPE = "PAYINTO_ID"


class CheckoutCounterModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Checkout counter ORM model.

    Attributes:
        description: Counter label (e.g. "Till 1")
        notification_number: Phone number notified on payment
        alias_type: Alias scheme, PAYINTO_ID by default
        alias_value: PayInto alias (unique across all counters)
        merchant_registry_id: Registry identifier once the alias is generated
        merchant_id: Owning merchant
        checkout_location_id: Location the counter sits in

    Constraints:
        alias_value: UNIQUE
    """

    __tablename__ = "checkout_counters"

    description: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    notification_number: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    alias_type: Mapped[str] = mapped_column(String(255), nullable=False, default=DEFAULT_ALIAS_TYPE)
    alias_value: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    merchant_registry_id: Mapped[int | None] = mapped_column(nullable=True, default=None)

    merchant_id: Mapped[int] = mapped_column(
        ForeignKey("merchants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    checkout_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("merchant_locations.id", ondelete="SET NULL"), nullable=True, default=None
    )

    # Relationships
    merchant = relationship("MerchantModel", back_populates="checkout_counters")
    checkout_location = relationship("MerchantLocationModel", back_populates="checkout_counters")
