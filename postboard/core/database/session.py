"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.logging_config import get_logger
from postboard.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates missing tables outside production. In production Alembic migrations
    own the schema and this function only logs.
    """
    if settings.is_production:
        logger.info("Production environment: schema is managed by Alembic migrations")
        return
    await create_all(engine)
    logger.info("Database tables ensured")


async def ping() -> bool:
    """
    Check database connectivity.

    Returns:
        True when ``SELECT 1`` succeeds, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        return False


async def dispose_engine() -> None:
    """Release pooled connections on shutdown."""
    await engine.dispose()
