"""
Audit ORM model.

Append-only trail of who accessed or changed what, and whether it succeeded.

Dependencies: sqlalchemy, acquirer_backend.boundary.db.base
System role: Compliance audit persistence
"""

import enum

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin, enum_type


class AuditActionType(str, enum.Enum):
    """Kind of operation being audited."""

    ACCESS = "Access"
    ADD = "Add"
    UPDATE = "Update"
    DELETE = "Delete"


class AuditTransactionStatus(str, enum.Enum):
    """Outcome of the audited operation."""

    SUCCESS = "Success"
    FAILURE = "Failure"


class AuditModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Audit ORM model.

    Attributes:
        action_type: Access/Add/Update/Delete
        transaction_status: Success/Failure
        application_module: Handler that produced the entry (e.g. "putBulkApprove")
        event_description: Human-readable summary
        entity_name: Table or aggregate affected
        old_value: JSON snapshot before the change
        new_value: JSON snapshot after the change
        portal_user_id: Acting user, None for anonymous attempts
    """

    __tablename__ = "audits"

    action_type: Mapped[AuditActionType] = mapped_column(enum_type(AuditActionType), nullable=False)
    transaction_status: Mapped[AuditTransactionStatus] = mapped_column(
        enum_type(AuditTransactionStatus), nullable=False
    )
    application_module: Mapped[str] = mapped_column(String(255), nullable=False)
    event_description: Mapped[str] = mapped_column(String(2048), nullable=False)
    entity_name: Mapped[str] = mapped_column(String(255), nullable=False)
    old_value: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    new_value: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    portal_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("portal_users.id", ondelete="SET NULL"), nullable=True, default=None
    )

    portal_user = relationship("PortalUserModel")
