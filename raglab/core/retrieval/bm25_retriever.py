"""
Lexical retrieval with BM25.

Ranks the store's records by BM25 score of their text. Records sharing no
token with the query are not returned.
"""

from raglab.boundary.vdb.base import VectorStore
from raglab.boundary.vdb.similarity import top_k_indices
from raglab.boundary.vdb.vector_schemas import ScoredChunk, SearchResult
from raglab.core.retrieval.bm25 import bm25_scores
from raglab.models.chunk import Vector


class BM25Retriever:
    """Keyword retriever; needs no query embedding."""

    name = "bm25"
    uses_vectors = False

    async def retrieve(
        self,
        store: VectorStore,
        query_text: str,
        query_vector: Vector | None,
        top_k: int,
    ) -> SearchResult:
        records = await store.scan()
        if top_k <= 0 or not records:
            return SearchResult([], len(records))

        scores = bm25_scores(query_text, [record.chunk.text for record in records])
        ranked = top_k_indices(scores, top_k)
        matches = [ScoredChunk(records[index].chunk, score) for index, score in ranked if score > 0]
        return SearchResult(matches, len(records))

    def __repr__(self) -> str:
        return "BM25Retriever()"
