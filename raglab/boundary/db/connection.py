"""
Database connection management.

Provides the async SQLAlchemy engine and session factory used by the
durable vector store.

Dependencies: sqlalchemy, raglab.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from raglab.configs import get_settings


def get_async_engine(url: str | None = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. SQLite URLs get the driver's default
    pool since pool sizing does not apply to them.

    Args:
        url: Database URL override (defaults to settings.database)

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database
    database_url = url or db_config.async_database_url

    if make_url(database_url).get_backend_name() == "sqlite":
        return create_async_engine(database_url, echo=db_config.echo_sql)

    return create_async_engine(
        database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    autoflush=False and expire_on_commit=False keep transaction control
    explicit; callers open transactions with session.begin().

    Args:
        engine: Engine to bind (defaults to get_async_engine())

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            async with session.begin():
                session.add(obj)
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )
