"""Database handle for async SQLAlchemy with SQLModel.

This module provides the Database class, which owns an async engine and its
session factory. The handle is created explicitly at process start, passed to
whatever needs storage, and disposed at shutdown. It includes:
- Engine configuration per database kind
- Table creation from SQLModel metadata
- Session and transaction context managers
- Health check functionality
"""

from typing import Any, AsyncGenerator, Dict, Optional
import asyncio
import logging
from contextlib import asynccontextmanager

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from urlshortener.core.config import Settings
import urlshortener.models  # noqa: F401  registers tables on SQLModel.metadata

logger = logging.getLogger(__name__)


def is_memory_sqlite(url: str) -> bool:
    """Return True if the URL points at a private in-memory SQLite database."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def get_engine_config(url: str, app_settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Get engine options appropriate for the database behind ``url``.

    In-memory SQLite needs a single shared connection, otherwise every pooled
    connection would see its own empty database. File SQLite uses the driver
    defaults. Server databases get the pool settings.
    """
    backend = make_url(url).get_backend_name()
    if is_memory_sqlite(url):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    if backend == "sqlite":
        return {}
    if app_settings is None:
        return {"pool_pre_ping": True}
    return {
        "pool_size": app_settings.DB_POOL_SIZE,
        "max_overflow": app_settings.DB_POOL_MAX_OVERFLOW,
        "pool_timeout": app_settings.DB_POOL_TIMEOUT,
        "pool_recycle": app_settings.DB_POOL_RECYCLE,
        "pool_pre_ping": True,
    }


class Database:
    """Owned async database resource.

    Use as an async context manager, or call ``connect`` and ``dispose``
    at the process lifetime boundaries.

    Example:
        ```python
        async with Database("sqlite+aiosqlite:///./urls.db") as database:
            async with database.transaction() as session:
                session.add(mapping)
        ```
    """

    def __init__(self, url: str, echo: bool = False, **engine_options: Any):
        self.url = url
        logger.info(f"Creating database engine for {make_url(url).render_as_string(hide_password=True)}")
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_options)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        self._disposed = False

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "Database":
        """Build a handle from application settings."""
        return cls(
            app_settings.DATABASE_URL,
            echo=app_settings.DB_ECHO,
            **get_engine_config(app_settings.DATABASE_URL, app_settings),
        )

    async def connect(self) -> None:
        """Create missing tables. Safe to call more than once."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables are in place")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        if self._disposed:
            return
        await self.engine.dispose()
        self._disposed = True
        logger.info("Database engine disposed")

    async def __aenter__(self) -> "Database":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a session that is closed on exit.

        Yields:
            AsyncSession: SQLAlchemy async session
        """
        session = self.session_factory()
        try:
            yield session
        finally:
            await session.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a session wrapped in a transaction.

        Commits on successful completion, rolls back if the block raises.

        Yields:
            AsyncSession: SQLAlchemy async session
        """
        async with self.session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> Dict[str, Any]:
        """Check database connectivity and return status.

        Returns:
            Dict: Health check result containing status and latency information
        """
        loop = asyncio.get_running_loop()
        start_time = loop.time()
        status = "healthy"
        error_message = None
        latency_ms = 0

        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            latency_ms = int((loop.time() - start_time) * 1000)
        except Exception as e:
            status = "unhealthy"
            error_message = str(e)
            logger.error(f"Database health check failed: {e}")

        return {
            "status": status,
            "latency_ms": latency_ms,
            "error": error_message,
        }
