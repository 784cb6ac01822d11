"""
Retrieval and reranking configuration settings.

Selects how stored chunks are scored against a query ('vector' cosine,
lexical 'bm25', or a weighted 'hybrid' of both) and the optional reranker
applied to the retrieved matches.

Dependencies: pydantic, pydantic_settings
System role: Retrieval strategy configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class RetrievalSettings(BaseSettings):
    """Retriever and reranker defaults."""

    retriever: str = Field(
        default="vector",
        description="Default retriever: 'vector', 'bm25' or 'hybrid'",
    )
    bm25_weight: float = Field(
        default=0.5,
        ge=0,
        description="Weight of the BM25 score in hybrid retrieval",
    )
    vector_weight: float = Field(
        default=0.5,
        ge=0,
        description="Weight of the cosine score in hybrid retrieval",
    )
    reranker: str | None = Field(
        default=None,
        description="Default reranker: 'simple', 'llm', or unset for none",
    )
    rerank_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used by the 'llm' reranker",
    )
    google_api_key: str | None = Field(
        default=None,
        description="API key for the Google Generative AI chat model",
    )

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "RETRIEVAL_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
