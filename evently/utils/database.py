"""
Database configuration and session management for the Evently application.

This module provides:
- Database URL resolution from the environment
- A lazily created async engine that is reused across calls
- Session factory and a FastAPI dependency yielding sessions
- Table creation for all defined models

SQLite (via aiosqlite) is the default; PostgreSQL is used when DATABASE_URL
points at it.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool, StaticPool

from evently.models.base import Base
from evently.utils.config import get_settings

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None

def get_database_url() -> str:
    """
    Get database URL based on environment.

    Returns:
        str: Database connection URL
    """
    # For testing, always use in-memory SQLite
    if os.getenv("TESTING", "").lower() == "true":
        logger.info("Using in-memory SQLite database for testing")
        return "sqlite+aiosqlite://"

    db_url = get_settings().DATABASE_URL
    # Fix potential newline issues in .env file
    db_url = db_url.split('\n')[0].strip()

    # Convert standard driver URLs to their async counterparts
    if db_url.startswith("sqlite:///"):
        db_url = db_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    elif db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)

    db_type = "PostgreSQL" if db_url.startswith("postgresql") else "SQLite"
    logger.info(f"Using {db_type} database")
    return db_url

def create_engine_for_url(database_url: str) -> AsyncEngine:
    """
    Create an async engine with pooling suited to the database type.

    Args:
        database_url: SQLAlchemy async database URL

    Returns:
        AsyncEngine: Configured engine
    """
    settings = get_settings()
    connect_args = {}
    engine_args = {"echo": settings.DEBUG}

    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:"):
            # In-memory databases only live as long as their single connection
            engine_args["poolclass"] = StaticPool
        else:
            engine_args["poolclass"] = NullPool
    elif database_url.startswith("postgresql"):
        engine_args.update({
            "poolclass": AsyncAdaptedQueuePool,
            "pool_size": settings.POOL_SIZE,
            "max_overflow": settings.MAX_OVERFLOW,
            "pool_timeout": settings.POOL_TIMEOUT,
            "pool_recycle": settings.POOL_RECYCLE,
            "pool_pre_ping": True
        })
        logger.info(f"Using AsyncAdaptedQueuePool for PostgreSQL database (size={settings.POOL_SIZE}, max_overflow={settings.MAX_OVERFLOW})")

    return create_async_engine(
        database_url,
        connect_args=connect_args,
        **engine_args
    )

def get_engine() -> AsyncEngine:
    """
    Return the process-wide engine, creating it on first use.

    Returns:
        AsyncEngine: Shared engine
    """
    global _engine
    if _engine is None:
        _engine = create_engine_for_url(get_database_url())
        logger.info("Database engine created")
    return _engine

def get_session_factory() -> async_sessionmaker:
    """Get the shared session factory bound to the shared engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False
        )
    return _session_factory

@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """Open a session outside of a request, e.g. from scripts."""
    async with get_session_factory()() as session:
        yield session

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    This is a FastAPI dependency that provides a database session
    for route handlers.

    Yields:
        AsyncSession: A database session
    """
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()

async def init_db() -> None:
    """Create all tables. Called during application startup."""
    try:
        # Import models so they are registered on the metadata
        import evently.models  # noqa: F401

        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")
    except Exception as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise

async def close_db() -> None:
    """Dispose the shared engine. Called during application shutdown."""
    global _engine, _session_factory
    try:
        if _engine is not None:
            await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Closed database connection")
    except Exception as e:
        logger.error(f"Error closing database connection: {str(e)}")
        raise
