"""
Hybrid retrieval: weighted fusion of BM25 and cosine scores.

Every stored record is scored both ways over one snapshot of the store,
and the fused score is

    bm25_weight * bm25 + vector_weight * cosine

Raw scores are fused without normalisation, so the weights also set the
scale at which BM25 (unbounded) and cosine (-1..1) contribute. Equal
fused scores keep insertion order.

Dependencies: numpy, rank_bm25 (via bm25), raglab.boundary.vdb
System role: Hybrid lexical/semantic retriever
"""

import logging

from raglab.boundary.vdb.base import VectorStore, check_dimension, check_uniform_dimension
from raglab.boundary.vdb.similarity import cosine_scores, top_k_indices
from raglab.boundary.vdb.vector_schemas import ScoredChunk, SearchResult
from raglab.core.retrieval.bm25 import bm25_scores
from raglab.models.chunk import Vector

logger = logging.getLogger(__name__)


class HybridRetriever:
    """
    Retriever combining lexical and embedding relevance.

    Attributes:
        bm25_weight: Multiplier of the BM25 score
        vector_weight: Multiplier of the cosine score
    """

    name = "hybrid"
    uses_vectors = True

    def __init__(self, bm25_weight: float = 0.5, vector_weight: float = 0.5) -> None:
        self.bm25_weight = bm25_weight
        self.vector_weight = vector_weight

    async def retrieve(
        self,
        store: VectorStore,
        query_text: str,
        query_vector: Vector | None,
        top_k: int,
    ) -> SearchResult:
        """
        Rank the store's records by fused score.

        Raises:
            ValueError: No query vector given
            ConfigurationError: Query dimension differs from the stored vectors'
        """
        if query_vector is None:
            raise ValueError("HybridRetriever requires a query vector")

        records = await store.scan()
        if top_k <= 0 or not records:
            return SearchResult([], len(records))

        dimension = check_uniform_dimension((len(record.vector) for record in records), "query")
        check_dimension(dimension, len(query_vector), "query")

        lexical = bm25_scores(query_text, [record.chunk.text for record in records])
        semantic = cosine_scores(query_vector, [record.vector for record in records])
        fused = self.bm25_weight * lexical + self.vector_weight * semantic

        logger.debug(
            f"{__name__}:retrieve - Fused {len(records)} records "
            f"(bm25_weight={self.bm25_weight}, vector_weight={self.vector_weight})"
        )
        ranked = top_k_indices(fused, top_k)
        return SearchResult([ScoredChunk(records[index].chunk, score) for index, score in ranked], len(records))

    def __repr__(self) -> str:
        return f"HybridRetriever(bm25_weight={self.bm25_weight}, vector_weight={self.vector_weight})"
