"""Cosine-similarity retrieval delegated to the vector store."""

from raglab.boundary.vdb.base import VectorStore
from raglab.boundary.vdb.vector_schemas import SearchResult
from raglab.models.chunk import Vector


class VectorRetriever:
    """Nearest neighbours of the query embedding, as ranked by the store."""

    name = "vector"
    uses_vectors = True

    async def retrieve(
        self,
        store: VectorStore,
        query_text: str,
        query_vector: Vector | None,
        top_k: int,
    ) -> SearchResult:
        if query_vector is None:
            raise ValueError("VectorRetriever requires a query vector")
        return await store.search(query_vector, top_k)

    def __repr__(self) -> str:
        return "VectorRetriever()"
