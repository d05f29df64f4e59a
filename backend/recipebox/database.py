"""
RecipeBox Backend: Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, schema bootstrap and the
       per-request session dependency.
How:   One engine per process (aiosqlite driver by default). Each request gets
       its own AsyncSession, committed on success and rolled back on error.
Who:   Used by route dependencies and by the application lifespan.
When:  Engine is created at module import; sessions are created per-request.

Schema management:
    There are no migrations. `init_db()` runs `CREATE TABLE IF NOT EXISTS`
    for every mapped model at startup, so restarting against an existing
    database file is a no-op.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from recipebox.config import settings

logger = logging.getLogger(__name__)


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=settings.db_pool_pre_ping,
    # Echo SQL queries in DEBUG mode for development visibility
    echo=settings.log_level == "DEBUG",
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after the store commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shares one metadata object)."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the request's dependencies (RecipeStore)
        3. On success: commits anything still pending
        4. On error: rolls back and re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)

    Example usage:
        async def get_recipe_store(db: AsyncSession = Depends(get_db_session)):
            return RecipeStore(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_db() -> None:
    """
    Create every mapped table that does not exist yet.

    When:  Application startup (lifespan), and per test in the suite.
    """
    # Model modules must be imported so their tables register on Base.metadata
    from recipebox.models import recipe  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))


async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
