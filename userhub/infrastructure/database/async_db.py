"""
Asynchronous Database Utilities Module

This module provides the asynchronous SQLAlchemy engine and session factory
used by the SQL user repository. Nothing here runs at import time: the engine
is created by the application factory when `STORAGE_BACKEND=database`.

**Security Note**: DATABASE_URL embeds credentials; never log it.

Key Components:
    - create_engine_from_settings: Builds the async engine from settings.
    - create_session_factory: Binds an `async_sessionmaker` to an engine.
    - create_db_and_tables: Creates the users table if it does not exist.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from structlog import get_logger

from userhub.core.config.settings import Settings

# Registers the users table on SQLModel.metadata.
from userhub.domain.entities.user import User  # noqa: F401

logger = get_logger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Creates the async engine described by the database settings."""
    kwargs = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}
    if not settings.DATABASE_URL.startswith("sqlite"):
        kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
    return create_async_engine(settings.DATABASE_URL, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """
    Create tables using the async engine.

    The unique index on `users.email` created here is what makes concurrent
    registrations with the same email safe.
    """
    logger.info("Creating database tables")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created")
