"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the pipeline
"""

from functools import lru_cache

from pydantic import Field

from raglab.configs.base import BaseSettings
from raglab.configs.database import DatabaseSettings
from raglab.configs.embedding import EmbeddingSettings
from raglab.configs.engine import EngineSettings
from raglab.configs.retrieval import RetrievalSettings
from raglab.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Environment variables are read once; call get_settings.cache_clear()
    after changing them (tests do).

    Returns:
        Settings: Settings instance

    Usage:
        from raglab.configs import get_settings
        settings = get_settings()
    """
    return Settings()
