"""
Merchant ORM model.

Represents a merchant application moving through the maker/checker
registration workflow.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Merchant persistence and workflow state
"""

import enum

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin, enum_type


class MerchantRegistrationStatus(str, enum.Enum):
    """
    Merchant application workflow states.

    DRAFT: Being filled in by the maker
    REVIEW: Submitted, awaiting a checker
    WAITING_ALIAS_GENERATION: Checked, awaiting PayInto alias generation
    APPROVED: Registered
    REJECTED: Declined by a checker
    """

    DRAFT = "Draft"
    REVIEW = "Review"
    WAITING_ALIAS_GENERATION = "WaitingAliasGeneration"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class MerchantAllowBlockStatus(str, enum.Enum):
    """Whether the merchant may transact."""

    PENDING = "Pending"
    ALLOWED = "Allowed"
    BLOCKED = "Blocked"


class MerchantType(str, enum.Enum):
    """Business size classification."""

    INDIVIDUAL = "Individual"
    SMALL_SHOP = "Small Shop"
    CHAIN_STORE = "Chain Store"


class NumberOfEmployees(str, enum.Enum):
    """Employee count bands offered by the registration form."""

    ONE_TO_FIVE = "1 - 5"
    SIX_TO_TEN = "6 - 10"
    ELEVEN_TO_FIFTY = "11 - 50"
    FIFTY_ONE_TO_HUNDRED = "51 - 100"
    HUNDRED_PLUS = "100 +"


class MerchantModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Merchant ORM model.

    Attributes:
        dba_trading_name: "Doing business as" name shown to payers
        registered_name: Legal registered name
        employees_num: Employee count band
        monthly_turnover: Declared monthly turnover
        currency_code: ISO 4217 settlement currency
        category_code: Merchant category code (MCC)
        merchant_type: Business size classification
        registration_status: Workflow state
        registration_status_reason: Free-text reason for the latest transition
        allow_block_status: Transaction permission
        dfsp_id: Optional settling DFSP
        created_by_id: Maker portal user
        checked_by_id: Checker portal user (None until reviewed)

    Relationships:
        locations, checkout_counters, business_licenses, contact_persons,
        business_owners: One-to-many, deleted with the merchant
        created_by, checked_by: Many-to-one PortalUserModel
        dfsp: Many-to-one DFSPModel
    """

    __tablename__ = "merchants"

    dba_trading_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    registered_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    employees_num: Mapped[NumberOfEmployees | None] = mapped_column(
        enum_type(NumberOfEmployees), nullable=True, default=None
    )
    monthly_turnover: Mapped[float | None] = mapped_column(
        Numeric(18, 2, asdecimal=False), nullable=True, default=None
    )
    currency_code: Mapped[str | None] = mapped_column(String(3), nullable=True, default=None)
    category_code: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    merchant_type: Mapped[MerchantType | None] = mapped_column(
        enum_type(MerchantType), nullable=True, default=None
    )
    registration_status: Mapped[MerchantRegistrationStatus] = mapped_column(
        enum_type(MerchantRegistrationStatus),
        nullable=False,
        default=MerchantRegistrationStatus.DRAFT,
        index=True,
    )
    registration_status_reason: Mapped[str | None] = mapped_column(
        String(1024), nullable=True, default=None
    )
    allow_block_status: Mapped[MerchantAllowBlockStatus] = mapped_column(
        enum_type(MerchantAllowBlockStatus),
        nullable=False,
        default=MerchantAllowBlockStatus.PENDING,
    )

    dfsp_id: Mapped[int | None] = mapped_column(
        ForeignKey("dfsps.id", ondelete="SET NULL"), nullable=True, default=None
    )
    created_by_id: Mapped[int] = mapped_column(
        ForeignKey("portal_users.id"), nullable=False, index=True
    )
    checked_by_id: Mapped[int | None] = mapped_column(
        ForeignKey("portal_users.id"), nullable=True, default=None, index=True
    )

    # Relationships
    created_by = relationship("PortalUserModel", foreign_keys=[created_by_id])
    checked_by = relationship("PortalUserModel", foreign_keys=[checked_by_id])
    dfsp = relationship("DFSPModel")

    locations = relationship(
        "MerchantLocationModel",
        back_populates="merchant",
        cascade="all, delete-orphan",
        order_by="MerchantLocationModel.id",
    )
    checkout_counters = relationship(
        "CheckoutCounterModel",
        back_populates="merchant",
        cascade="all, delete-orphan",
        order_by="CheckoutCounterModel.id",
    )
    business_licenses = relationship(
        "BusinessLicenseModel",
        back_populates="merchant",
        cascade="all, delete-orphan",
        order_by="BusinessLicenseModel.id",
    )
    contact_persons = relationship(
        "ContactPersonModel",
        back_populates="merchant",
        cascade="all, delete-orphan",
        order_by="ContactPersonModel.id",
    )
    business_owners = relationship(
        "BusinessOwnerModel",
        back_populates="merchant",
        cascade="all, delete-orphan",
        order_by="BusinessOwnerModel.id",
    )
