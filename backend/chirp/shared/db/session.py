"""
Database Session Management

This module configures the async SQLAlchemy engine and session factory.
It provides the core database connectivity for the entire application.

Key Concepts:
=============

1. ENGINE: The database connection manager
   - Maintains a pool of database connections
   - Configured once at import from DATABASE_URL

2. SESSION: A unit of work with the database
   - One session per request
   - Commits or rolls back as a transaction

3. SESSION FACTORY: Creates new sessions
   - AsyncSessionLocal() creates a new session
   - Also used directly by the WebSocket endpoint, which has no request scope

Engines:
========
    postgresql+asyncpg://...   pooled (DATABASE_POOL_SIZE + DATABASE_MAX_OVERFLOW)
    sqlite+aiosqlite://        single shared in-memory connection (StaticPool)
    sqlite+aiosqlite:///x.db   file database, default pool

Request Lifecycle:
==================
    1. get_db() dependency is called
    2. New AsyncSession created from the factory
    3. Session yielded to handler → services → repositories
    4. On success: session.commit()
    5. On exception: session.rollback()
    6. Finally: session.close()
"""

from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from chirp.config.settings import settings
from chirp.shared.core.logging import logger


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE ENGINE
# ═══════════════════════════════════════════════════════════════════════════════


def _engine_options(url: str) -> dict[str, Any]:
    """Pool arguments for the configured backend."""
    if not url.startswith("sqlite"):
        return {
            "pool_size": settings.DATABASE_POOL_SIZE,
            "max_overflow": settings.DATABASE_MAX_OVERFLOW,
            "pool_pre_ping": True,
        }
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    # In-memory databases live inside one connection
    if url.rstrip("/").endswith(":memory:") or url.rstrip("/") in (
        "sqlite+aiosqlite:",
        "sqlite:",
    ):
        options["poolclass"] = StaticPool
    return options


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **_engine_options(settings.DATABASE_URL),
)


if settings.is_sqlite:

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
        # SQLite ignores ON DELETE CASCADE unless this pragma is on
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION FACTORY
# ═══════════════════════════════════════════════════════════════════════════════
#
# - expire_on_commit=False: Objects remain usable after commit
# - autoflush=False: Repositories flush explicitly

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


# ═══════════════════════════════════════════════════════════════════════════════
# FASTAPI DEPENDENCY: get_db()
# ═══════════════════════════════════════════════════════════════════════════════


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Creates a new session for each request and handles cleanup.

    Yields:
        AsyncSession: Database session for the current request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ═══════════════════════════════════════════════════════════════════════════════
# LIFECYCLE FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════


async def init_db() -> None:
    """
    Initialize database connection on application startup.

    Verifies connectivity and, when DATABASE_AUTO_CREATE is set, creates
    any missing tables from the ORM metadata. Production schemas are
    managed by Alembic instead.

    Raises:
        Exception: If database connection fails
    """
    logger.info("Initializing database connection")
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.DATABASE_AUTO_CREATE:
                from chirp.shared.models import Base

                await conn.run_sync(Base.metadata.create_all)
                logger.info("Database tables ensured")

        logger.info("Database connection established successfully")

    except Exception as e:
        logger.error("Failed to connect to database", error=str(e))
        raise


async def close_db() -> None:
    """
    Close database connection on application shutdown.

    Disposes the pool. For the shared in-memory SQLite connection this also
    discards the data, so the next startup begins with an empty database.
    """
    logger.info("Closing database connection")
    await engine.dispose()
    logger.info("Database connection closed successfully")


async def ping_db() -> bool:
    """Readiness probe: True when a trivial query succeeds."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database ping failed", error=str(e))
        return False
