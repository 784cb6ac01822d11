"""
Vector database boundary layer.

Provides vector stores for storage and similarity retrieval.
- InMemoryVectorStore: process-local store (default)
- SQLVectorStore: durable store over the SQLAlchemy async ORM

Dependencies: numpy, sqlalchemy
System role: Vector store adapter for RAG retrieval
"""

from raglab.boundary.vdb.base import VectorStore
from raglab.boundary.vdb.in_memory_store import InMemoryVectorStore
from raglab.boundary.vdb.similarity import cosine_scores, rank_by_similarity
from raglab.boundary.vdb.sql_store import SQLVectorStore
from raglab.boundary.vdb.vector_schemas import ScoredChunk, SearchResult, StoredRecord
from raglab.boundary.vdb.vector_store_factory import VECTOR_STORES, build_vector_store

__all__ = [
    "VectorStore",
    "InMemoryVectorStore",
    "SQLVectorStore",
    "ScoredChunk",
    "SearchResult",
    "StoredRecord",
    "cosine_scores",
    "rank_by_similarity",
    "VECTOR_STORES",
    "build_vector_store",
]
