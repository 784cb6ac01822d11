"""
Retriever contract.

A retriever turns a query into ranked matches over one vector store.
Retrievers that score with embeddings set uses_vectors, and the engine
embeds the query only for them.

Dependencies: raglab.boundary.vdb
System role: Retrieval capability consumed by the evaluation engine
"""

from typing import Protocol, runtime_checkable

from raglab.boundary.vdb.base import VectorStore
from raglab.boundary.vdb.vector_schemas import SearchResult
from raglab.models.chunk import Vector


@runtime_checkable
class Retriever(Protocol):
    """Ranks stored chunks against a query."""

    name: str
    uses_vectors: bool

    async def retrieve(
        self,
        store: VectorStore,
        query_text: str,
        query_vector: Vector | None,
        top_k: int,
    ) -> SearchResult:
        ...
