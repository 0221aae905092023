"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata and
optionally seeds reference data (DFSPs) plus a first portal user.

Dependencies: sqlalchemy, acquirer_backend.configs
System role: Database schema initialization

Usage:
    python -m acquirer_backend.boundary.db.create_tables
    python -m acquirer_backend.boundary.db.create_tables --seed-dfsps
    python -m acquirer_backend.boundary.db.create_tables --drop --seed-dfsps
    python -m acquirer_backend.boundary.db.create_tables \
        --user-email hub@example.com --user-name "Hub Maker" --user-password secret123
"""

import argparse
import asyncio
import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from acquirer_backend.boundary.db.base import Base
from acquirer_backend.boundary.db.connection import get_async_engine, get_async_session_factory
from acquirer_backend.boundary.db.models import DFSPModel, PortalUserModel, PortalUserType
from acquirer_backend.core.security import hash_password

logger = logging.getLogger(__name__)

DEFAULT_DFSPS = (
    {"fsp_id": "dfsp-a", "name": "DFSP A", "dfsp_type": "Bank"},
    {"fsp_id": "dfsp-b", "name": "DFSP B", "dfsp_type": "Mobile Money Operator"},
)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use (defaults to the cached application engine)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped")


async def seed_dfsps(session: AsyncSession) -> int:
    """
    Insert the default DFSPs that are not present yet.

    Returns:
        int: Number of DFSP rows inserted
    """
    result = await session.execute(select(DFSPModel.fsp_id))
    existing = set(result.scalars().all())

    inserted = 0
    for row in DEFAULT_DFSPS:
        if row["fsp_id"] in existing:
            continue
        session.add(DFSPModel(**row, joined_date=date.today(), activated=True))
        inserted += 1

    await session.commit()
    return inserted


async def create_portal_user(
    session: AsyncSession,
    email: str,
    name: str,
    password: str,
    user_type: PortalUserType = PortalUserType.HUB,
) -> PortalUserModel:
    """Create a portal user with a hashed password, or return the existing one."""
    result = await session.execute(select(PortalUserModel).where(PortalUserModel.email == email))
    user = result.scalar_one_or_none()
    if user is not None:
        return user

    user = PortalUserModel(
        email=email,
        name=name,
        password=hash_password(password),
        user_type=user_type,
    )
    session.add(user)
    await session.commit()
    return user


async def _main(args: argparse.Namespace) -> None:
    if args.drop:
        await drop_all_tables()
    await create_all_tables()

    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        if args.seed_dfsps:
            inserted = await seed_dfsps(session)
            logger.info(f"Seeded {inserted} DFSP rows")
        if args.user_email:
            user = await create_portal_user(
                session, args.user_email, args.user_name or args.user_email, args.user_password
            )
            logger.info(f"Portal user ready: {user.email} (id={user.id})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Create acquirer database tables")
    parser.add_argument("--drop", action="store_true", help="Drop all tables before creating them")
    parser.add_argument("--seed-dfsps", action="store_true", help="Insert default DFSP rows")
    parser.add_argument("--user-email", help="Create a Hub portal user with this email")
    parser.add_argument("--user-name", help="Display name for the created user")
    parser.add_argument("--user-password", default="password123", help="Password for the created user")

    asyncio.run(_main(parser.parse_args()))
