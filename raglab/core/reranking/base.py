"""
Reranker contract.

A reranker reorders the matches a retriever returned for one query. It
may replace their scores; the engine assigns ranks from the new order.

Dependencies: raglab.boundary.vdb
System role: Optional post-retrieval stage of the evaluation engine
"""

from typing import Protocol, Sequence, runtime_checkable

from raglab.boundary.vdb.vector_schemas import ScoredChunk


@runtime_checkable
class Reranker(Protocol):
    """Reorders retrieved matches."""

    name: str

    async def rerank(self, query: str, matches: Sequence[ScoredChunk]) -> list[ScoredChunk]:
        ...
