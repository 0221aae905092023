"""
Merchant location ORM model.

Physical or virtual places where a merchant trades. The address columns
are shared with business person locations through AddressMixin.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Merchant address persistence
"""

import enum

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin, enum_type


class MerchantLocationType(str, enum.Enum):
    """Whether a location is a shop front or a web presence."""

    PHYSICAL = "Physical"
    VIRTUAL = "Virtual"


ADDRESS_FIELDS = (
    "address_type",
    "department",
    "sub_department",
    "street_name",
    "building_number",
    "building_name",
    "floor_number",
    "room_number",
    "post_box",
    "postal_code",
    "town_name",
    "district_name",
    "country_subdivision",
    "country",
    "address_line",
    "latitude",
    "longitude",
)


class AddressMixin:
    """Postal address columns, all optional."""

    address_type: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    sub_department: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    street_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    building_number: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    building_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    floor_number: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    room_number: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    post_box: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    postal_code: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    town_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    district_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    country_subdivision: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    address_line: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    latitude: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    longitude: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)


class MerchantLocationModel(Base, IntegerIDMixin, TimestampMixin, AddressMixin):
    """
    Merchant location ORM model.

    Attributes:
        location_type: Physical or Virtual
        web_url: Storefront URL for virtual locations
        merchant_id: Owning merchant

    Relationships:
        merchant: Many-to-one MerchantModel
        checkout_counters: Counters placed at this location
    """

    __tablename__ = "merchant_locations"

    location_type: Mapped[MerchantLocationType] = mapped_column(
        enum_type(MerchantLocationType), nullable=False
    )
    web_url: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)

    merchant_id: Mapped[int] = mapped_column(
        ForeignKey("merchants.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    merchant = relationship("MerchantModel", back_populates="locations")
    checkout_counters = relationship("CheckoutCounterModel", back_populates="checkout_location")
