"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management

Models live in acquirer_backend.boundary.db.models and CRUD singletons in
acquirer_backend.boundary.db.CRUD.

Dependencies: sqlalchemy, acquirer_backend.configs
System role: Database adapter providing persistent storage for merchants,
portal users, DFSPs and the audit trail.
"""

from acquirer_backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from acquirer_backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)

__all__ = [
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
