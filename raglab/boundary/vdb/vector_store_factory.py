"""
Vector store factory for selecting between in-memory and SQL storage.

Depends on VECTOR_STORE_STORE_TYPE when no name is given.

Dependencies: raglab.boundary.vdb, raglab.boundary.db, raglab.configs
System role: Vector store instantiation and selection
"""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from raglab.boundary.db.connection import get_async_session_factory
from raglab.boundary.vdb.base import VectorStore
from raglab.boundary.vdb.in_memory_store import InMemoryVectorStore
from raglab.boundary.vdb.sql_store import SQLVectorStore
from raglab.configs import get_settings
from raglab.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VECTOR_STORES = ("memory", "sql")


def build_vector_store(
    name: str | None = None,
    session_factory: async_sessionmaker | None = None,
) -> VectorStore:
    """
    Factory function to get a vector store by name.

    Args:
        name: 'memory' or 'sql'; defaults to settings.vector_store.store_type
        session_factory: Session factory for 'sql' (defaults to settings database)

    Returns:
        InMemoryVectorStore or SQLVectorStore

    Raises:
        ConfigurationError: If the store name is invalid
    """
    settings = get_settings()
    store_type = (name or settings.vector_store.store_type).lower()

    if store_type == "memory":
        logger.info(f"{__name__}:build_vector_store - Creating in-memory vector store")
        return InMemoryVectorStore()

    if store_type == "sql":
        logger.info(
            f"{__name__}:build_vector_store - Creating SQL vector store "
            f"collection={settings.vector_store.collection}"
        )
        return SQLVectorStore(
            session_factory or get_async_session_factory(),
            collection=settings.vector_store.collection,
        )

    raise ConfigurationError(
        f"Invalid vector store: {store_type}. Must be one of {list(VECTOR_STORES)}.",
        option="storage",
    )
