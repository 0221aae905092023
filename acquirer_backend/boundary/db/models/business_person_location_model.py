"""
Business person location ORM model.

Home or office address of a business owner, reused by a contact person
declared as "same as business owner".

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Person address persistence
"""

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from acquirer_backend.boundary.db.models.merchant_location_model import AddressMixin


class BusinessPersonLocationModel(Base, IntegerIDMixin, TimestampMixin, AddressMixin):
    """Address row referenced by BusinessOwnerModel and ContactPersonModel."""

    __tablename__ = "business_person_locations"
