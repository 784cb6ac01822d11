"""Heuristic reranker preferring longer chunks."""

from typing import Sequence

from raglab.boundary.vdb.vector_schemas import ScoredChunk


class SimpleReranker:
    """
    Orders matches by text length, longest first, then by score.

    Scores are kept. Matches equal on both keys keep their retrieved order.
    """

    name = "simple"

    async def rerank(self, query: str, matches: Sequence[ScoredChunk]) -> list[ScoredChunk]:
        return sorted(matches, key=lambda match: (-len(match.chunk.text), -match.score))

    def __repr__(self) -> str:
        return "SimpleReranker()"
