"""
Embedding adapters.

Exports the EmbeddingAdapter protocol, output validation, the reference
and LangChain-backed adapters and the adapter factory.
"""

from raglab.core.embeddings.base import EmbeddingAdapter, validate_embeddings
from raglab.core.embeddings.embedding_factory import EMBEDDING_ADAPTERS, build_embedding_adapter
from raglab.core.embeddings.langchain_adapter import LangChainEmbeddingAdapter
from raglab.core.embeddings.reference_embedding import ReferenceEmbedding

__all__ = [
    "EmbeddingAdapter",
    "validate_embeddings",
    "EMBEDDING_ADAPTERS",
    "build_embedding_adapter",
    "LangChainEmbeddingAdapter",
    "ReferenceEmbedding",
]
