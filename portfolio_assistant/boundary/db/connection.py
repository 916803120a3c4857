"""
Database connection management.

One async engine and session factory per process, created on first use.
Store operations and detached background tasks each open their own
session from the factory; sessions are never shared between tasks.

Dependencies: sqlalchemy, asyncpg, portfolio_assistant.configs
System role: Database connection lifecycle management
"""

import logging
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from portfolio_assistant.configs import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the pooled asyncpg engine.

    pool_pre_ping discards connections the hosted database has closed
    while idle.
    """
    db_config = get_settings().database
    logger.info(
        "Creating database engine",
        extra={"host": db_config.host, "db": db_config.db, "pool_size": db_config.pool_size},
    )
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_recycle=db_config.pool_recycle,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the process engine.

    expire_on_commit=False keeps ORM rows readable after the session that
    loaded them has closed.
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def dispose_engine() -> None:
    """Close pooled connections on application shutdown."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
        get_async_engine.cache_clear()
        get_async_session_factory.cache_clear()
