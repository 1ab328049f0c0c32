"""
Database connection handle.

The engine is owned by a Database object created in the application lifespan
and stored on app.state; nothing here is created at import time. Routes get a
per-request AsyncSession through app.api.deps.get_db.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.engine import ExceptionContext
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db import models  # noqa: F401 - Import models to register them
from app.db.base import Base

logger = logging.getLogger(__name__)


def _log_connection_error(context: ExceptionContext) -> None:
    # Logged only; reconnects are left to pool_pre_ping.
    if context.is_disconnect:
        logger.error("Database connection lost: %s", context.original_exception)
    else:
        logger.debug("Database error: %s", context.original_exception)


class Database:
    """Async engine + session factory with an explicit lifecycle."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            engine_kwargs.update(pool_size=5, max_overflow=10)

        self.engine = create_async_engine(url, **engine_kwargs)
        event.listen(self.engine.sync_engine, "handle_error", _log_connection_error)

        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create missing tables. Production schemas are managed by Alembic."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session, rolling back if the request fails."""
        async with self.sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
