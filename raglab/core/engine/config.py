"""
Per-request engine configuration.

EngineConfig names the chunker, embedding adapter, storage backend,
retriever and optional reranker for one ingest/query call. Options are
accepted in snake_case or camelCase; anything invalid is reported as
ConfigurationError before a stage runs.

Dependencies: pydantic, raglab.configs
System role: Request configuration and its reproducibility hash
"""

import hashlib
import json
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from raglab.configs import get_settings
from raglab.core.chunking import Chunker, build_chunker
from raglab.core.exceptions import ConfigurationError
from raglab.core.reranking.reranker_factory import check_reranker_name
from raglab.core.retrieval import Retriever, build_retriever


class EngineConfig(BaseModel):
    """Chunker, adapter, storage, retriever and reranker selection for one engine call."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    chunker: str = Field(
        default_factory=lambda: get_settings().engine.default_chunker,
        description="Chunking strategy: fixed, sentence, sliding or document",
    )
    chunk_size: int | None = Field(default=None, description="Window size for fixed/sliding")
    chunk_stride: int = Field(default=1, ge=1, description="Window step for sliding")
    embedding_adapter: str = Field(
        default_factory=lambda: get_settings().embedding.adapter,
        description="Embedding adapter name",
    )
    storage: str = Field(
        default_factory=lambda: get_settings().vector_store.store_type,
        description="Vector store name",
    )
    top_k: int = Field(
        default_factory=lambda: get_settings().vector_store.top_k,
        description="Default number of matches per query",
    )
    retriever: str = Field(
        default_factory=lambda: get_settings().retrieval.retriever,
        description="Retrieval strategy: vector, bm25 or hybrid",
    )
    bm25_weight: float = Field(
        default_factory=lambda: get_settings().retrieval.bm25_weight,
        ge=0,
        description="BM25 weight for hybrid retrieval",
    )
    vector_weight: float = Field(
        default_factory=lambda: get_settings().retrieval.vector_weight,
        ge=0,
        description="Cosine weight for hybrid retrieval",
    )
    reranker: str | None = Field(
        default_factory=lambda: get_settings().retrieval.reranker,
        validate_default=True,
        description="Reranker applied after retrieval: simple or llm (None disables)",
    )

    @field_validator("chunker", "embedding_adapter", "storage", "retriever")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("reranker")
    @classmethod
    def _normalize_reranker(cls, value: str | None) -> str | None:
        if value is None or not value.strip() or value.strip().lower() == "none":
            return None
        return check_reranker_name(value)

    @classmethod
    def from_options(cls, options: "EngineConfig | Mapping[str, Any] | None" = None) -> "EngineConfig":
        """
        Build and check a configuration.

        Args:
            options: Existing config, or a mapping of options (snake_case or
                camelCase keys); None for all defaults

        Returns:
            EngineConfig: Validated configuration whose chunker can be built

        Raises:
            ConfigurationError: Unknown option, wrong type, an invalid
                chunker combination, or an unknown retriever or reranker
        """
        if isinstance(options, EngineConfig):
            config = options
        else:
            try:
                config = cls.model_validate(dict(options or {}))
            except ValidationError as e:
                error = e.errors()[0]
                option = ".".join(str(part) for part in error["loc"]) or None
                raise ConfigurationError(
                    f"Invalid engine configuration: {error['msg']}",
                    option=option,
                    details={"error_count": e.error_count()},
                ) from e

        config.build_chunker()
        config.build_retriever()
        return config

    def build_chunker(self) -> Chunker:
        """Chunker described by this configuration."""
        return build_chunker(self.chunker, self.chunk_size, self.chunk_stride)

    def build_retriever(self) -> Retriever:
        """Retriever described by this configuration."""
        return build_retriever(self.retriever, self.bm25_weight, self.vector_weight)

    def config_hash(self) -> str:
        """SHA-256 over the configuration serialised with sorted keys."""
        payload = json.dumps(self.model_dump(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()
