"""
Embedding configuration settings.

Selects the default embedding adapter and configures the provider-backed
adapter (model id, output dimensionality, client-side retry budget).

Dependencies: pydantic_settings
System role: Embedding adapter configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Embedding adapter configuration."""

    adapter: str = Field(
        default="reference",
        description="Default adapter: 'reference' (deterministic) or 'gemini'",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Provider embedding model id",
    )
    dimension: int | None = Field(
        default=None,
        description="Expected provider output dimension (None to accept any)",
    )
    google_api_key: str | None = Field(
        default=None,
        description="API key for the Google Generative AI embeddings",
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts per batch before the provider call fails",
    )
    retry_max_wait_seconds: float = Field(
        default=10.0,
        ge=0,
        description="Upper bound on the exponential backoff between attempts",
    )

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "EMBEDDING_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
