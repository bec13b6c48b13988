"""
Database connection management
"""

import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..config import get_database_url, settings
from ..logging import get_logger

logger = get_logger(__name__)

# Global shared connection pool
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()  # Protect initialization from race conditions


def to_async_url(database_url: str) -> str:
    """Map a plain PostgreSQL URL onto the asyncpg driver; other URLs pass through."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def _engine_options(async_url: str) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.sql_echo}
    # Pool sizing only applies to server databases
    if async_url.startswith("postgresql"):
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


def reset_database() -> None:
    """Reset database connections (for tests)."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Check the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    engine = get_async_engine()

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "does not exist" in error_str:
            db_name = get_database_url().split("/")[-1].split("?")[0]
            return False, (
                f"Cannot connect to database: {error_str}\n"
                f"This usually means:\n"
                f"  1. The database '{db_name}' doesn't exist\n"
                f"  2. The database user/role doesn't exist\n"
                f"Please check your database connection and run migrations if needed."
            )
        elif "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Initialize the shared async connection pool.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously.
    """
    global _async_engine, _async_session_local, _initialized

    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _initialized and not force_reinit and database_url is None:
            return

        async_url = to_async_url(database_url or get_database_url())

        _async_engine = create_async_engine(async_url, **_engine_options(async_url))
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", dialect=_async_engine.dialect.name)


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()

    if _async_engine is None:
        raise RuntimeError("Database not initialized")
    return _async_engine


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session (async) from shared pool."""
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Database not initialized")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# Dependency for FastAPI
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_async_session() as session:
        yield session


# Test-specific database session context
@asynccontextmanager
async def get_test_db_session(database_url: str) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for testing with explicit database URL."""
    async_url = to_async_url(database_url)

    # Isolated engine for this session
    engine = create_async_engine(async_url, **_engine_options(async_url))
    session_local = async_sessionmaker(engine, class_=AsyncSession, autoflush=False)

    async with session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()
