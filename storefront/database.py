"""
Storefront API - Database Engine & Session Management
======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency.
Why:   Keeps all connection lifecycle logic in one place.
How:   A `Database` object owns one async engine (and its connection pool).
       create_app() builds it once at process start and stores it on
       `app.state.database`; the lifespan handler disposes it on shutdown.
       Route handlers never see the engine, only a per-request AsyncSession
       obtained through `get_db_session`.

Connection Pooling (server databases only):
    pool_size=20, max_overflow=10:  at most 30 connections per process
    pool_pre_ping:                   validate connections before use
    pool_recycle=3600:               recycle connections every hour

SQLite URLs (used by the test-suite) skip the pool arguments; the
aiosqlite dialect picks its own pool class.
"""

import logging
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from storefront.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for --autogenerate
    and the test-suite uses to create tables.
    """
    pass


class Database:
    """
    Owner of the async engine and its session factory.

    Lifecycle:
        1. Constructed by create_app() (no connection is opened yet)
        2. Sessions handed out per request via session()
        3. dispose() closes every pooled connection at shutdown
    """

    def __init__(self, url: str, engine_options: Optional[Dict[str, Any]] = None):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **(engine_options or {}))
        # expire_on_commit=False: attributes stay readable after commit,
        # which the response mapping relies on.
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database using the pool configuration from settings."""
        options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
        if not settings.is_sqlite:
            options.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        return cls(settings.database_url, engine_options=options)

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def ping(self) -> bool:
        """Run SELECT 1; False when the database cannot be reached."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False
        return True

    async def create_all(self) -> None:
        """Create every table registered on Base.metadata (tests and local dev)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Gracefully close all connections in the pool."""
        await self.engine.dispose()


# ── Dependencies ──────────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """FastAPI dependency returning the Database created by create_app()."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a new session from the app's Database
        2. Yields it to the handler (repositories commit their own writes)
        3. On error: rolls back so a failed insert leaves nothing behind
        4. Always: closes the session (returns the connection to the pool)
    """
    database = get_database(request)
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
