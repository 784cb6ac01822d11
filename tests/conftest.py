"""
Shared test fixtures and configuration for entire test suite.

Provides: settings cache reset, in-memory SQLite async database, stores,
adapters and a ready-to-use EvaluationEngine
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from raglab.boundary.db.base import Base
from raglab.boundary.db.models import ChunkCollectionModel, ChunkRecordModel  # noqa: F401
from raglab.boundary.vdb.in_memory_store import InMemoryVectorStore
from raglab.boundary.vdb.sql_store import SQLVectorStore
from raglab.configs import get_settings
from raglab.core.embeddings.reference_embedding import ReferenceEmbedding
from raglab.core.engine.eval_engine import EvaluationEngine


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings for every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Create in-memory SQLite async database with all tables.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the test database."""
    return async_sessionmaker(
        sqlite_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def test_async_db(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Session for direct CRUD tests, rolled back afterwards."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def sql_store(session_factory: async_sessionmaker) -> SQLVectorStore:
    return SQLVectorStore(session_factory, collection="test")


@pytest.fixture
def reference_adapter() -> ReferenceEmbedding:
    return ReferenceEmbedding()


@pytest.fixture
def engine(reference_adapter: ReferenceEmbedding, memory_store: InMemoryVectorStore) -> EvaluationEngine:
    """Engine wired to the reference adapter and a fresh in-memory store."""
    return EvaluationEngine(
        adapters={"reference": reference_adapter},
        stores={"memory": memory_store},
    )
