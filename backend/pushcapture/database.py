"""
Database connection and session management.

The push configuration lives in a local SQLite file accessed through
SQLAlchemy's asyncio extension (aiosqlite driver).

SQLite Notes:
-------------
1. NullPool:
   - Creates new connection for each operation (required for async SQLite)

2. Busy Timeout (5 seconds):
   - Prevents "database is locked" errors if another process holds the file

3. Lazy schema:
   - The configuration table is not created at startup. It is created on the
     first save (CREATE TABLE IF NOT EXISTS semantics), so an empty database
     simply means "not configured yet".
"""
from sqlalchemy import event, inspect
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from loguru import logger

from pushcapture.config import settings
from pushcapture.constants import SQLITE_BUSY_TIMEOUT_MS

# Base class for models
Base = declarative_base()


def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable SQLite-specific settings on every new connection.
    - PRAGMA journal_mode=WAL: Use Write-Ahead Logging so reads never block the save
    - PRAGMA busy_timeout=5000: Wait up to 5s for locks to release
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS}")
    cursor.close()


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine, registering the SQLite pragmas when applicable."""
    new_engine = create_async_engine(
        database_url,
        echo=echo,
        poolclass=NullPool,
    )
    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine.sync_engine, "connect", set_sqlite_pragma)
    return new_engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Create a session factory bound to the given engine."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Application engine
engine = create_engine(settings.database_url, echo=settings.debug)


async def table_exists(bind: AsyncEngine, table_name: str) -> bool:
    """Check whether a table has been created yet."""
    async with bind.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(table_name))


async def create_table(bind: AsyncEngine, table) -> None:
    """Create a single table if it does not exist yet (idempotent)."""
    async with bind.begin() as conn:
        await conn.run_sync(lambda sync_conn: table.create(sync_conn, checkfirst=True))


async def close_db(bind: AsyncEngine = None):
    """Close database connections."""
    await (bind or engine).dispose()
    logger.debug("Database engine disposed")
