"""
Vector store configuration settings.

Selects the storage backend ('memory' for single-process runs, 'sql' for
the durable ORM-backed store) and the default retrieval depth.

Dependencies: pydantic, pydantic_settings
System role: Vector storage configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev/tests, SQL for durable runs)."""

    store_type: str = Field(
        default="memory",
        description="Default storage backend: 'memory' or 'sql'",
    )
    collection: str = Field(
        default="default",
        description="Collection name used to namespace records in the SQL store",
    )
    top_k: int = Field(
        default=5,
        ge=1,
        description="Default number of matches returned by a query",
    )

    class Config:
        """Pydantic config."""

        env_prefix = "VECTOR_STORE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
