"""
Vector storage schemas.

Record and result types shared by the vector store variants.

Dependencies: raglab.models
System role: Type definitions for vector operations
"""

from dataclasses import dataclass
from typing import NamedTuple

from raglab.models.chunk import Chunk, Vector


class ScoredChunk(NamedTuple):
    """Stored chunk with its similarity to a query vector."""

    chunk: Chunk
    score: float


class SearchResult(NamedTuple):
    """Ranked chunks plus the number of stored records they were ranked from."""

    matches: list[ScoredChunk]
    searched: int


@dataclass(frozen=True)
class StoredRecord:
    """One (provenance, chunk) entry of a collection."""

    provenance: str
    chunk: Chunk
    vector: Vector

    @property
    def key(self) -> tuple[str, str]:
        return self.provenance, self.chunk.chunk_id
