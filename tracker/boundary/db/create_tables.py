"""
Database table creation script.

Creates the parcel table from the ORM metadata.

Dependencies: sqlalchemy, tracker.configs
System role: Database schema initialization

Usage:
    python -m tracker.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from tracker.boundary.db.base import Base
from tracker.boundary.db.connection import get_async_engine
from tracker.observability.logger import configure_logging, get_logger

# Import all models to register them with Base.metadata
from tracker.boundary.db.models.parcel_model import ParcelModel  # noqa: F401

logger = get_logger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use; defaults to the configured engine

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created: %s", ", ".join(Base.metadata.tables))


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use; defaults to the configured engine

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main() -> None:
    engine = get_async_engine()
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    configure_logging(logging.INFO)
    asyncio.run(_main())
