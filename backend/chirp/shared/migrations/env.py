# pylint: skip-file
# ruff: noqa
"""
Alembic environment for Chirp.

The URL comes from settings.DATABASE_URL, so migrations always target the
same database as the API. Run from backend/:

    alembic upgrade head                      apply migrations
    alembic upgrade head --sql > chirp.sql    offline, emit SQL only
    alembic revision --autogenerate -m "..."  diff models against the database

The async driver in DATABASE_URL (asyncpg, aiosqlite) is used directly;
migrations run inside AsyncConnection.run_sync.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from chirp.config.settings import settings

# Importing the package registers every table on Base.metadata
from chirp.shared.models import Base

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

COMPARE_OPTIONS = {
    "compare_type": True,
    "compare_server_default": True,
    # SQLite cannot ALTER most constraints in place
    "render_as_batch": settings.is_sqlite,
}


def run_migrations_offline() -> None:
    """Render migrations as SQL without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata, **COMPARE_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Open a throwaway async engine (no pooling) and migrate through it."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
