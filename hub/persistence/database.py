"""Async PostgreSQL engine, sessions and transactions."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hub.config import DatabaseSettings
from hub.persistence.commit_hooks import DeferredCommitHooks

APPLICATION_NAME = "insighthub-api"


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg engine.

    Connections are tagged with the application name so they can be told
    apart in ``pg_stat_activity``.

    Args:
        database: Connection URL and pool sizing
        echo: Log every statement

    Returns:
        Async engine
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are read back after commit when building responses
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
    hooks: DeferredCommitHooks | None = None,
) -> AsyncIterator[AsyncSession]:
    """Open a session that commits on success and rolls back on error.

    One transaction spans a whole request, so an invite that fails to save
    its token also leaves no membership row behind. ``hooks`` run after a
    successful commit and are dropped on rollback.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            if hooks is not None:
                hooks.discard()
            logfire.warn("Transaction rolled back", error_type=type(e).__name__)
            raise
        await session.commit()

    if hooks is not None:
        await hooks.run()
