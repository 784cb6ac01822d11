"""
Process-local vector store.

Records live in an ordered list. Each put builds the complete new list
first and swaps it in with a single assignment, so a query never sees a
partially applied batch and a failed put changes nothing.

Dependencies: numpy (via similarity), asyncio
System role: Default vector store for single-process runs and tests
"""

import asyncio
import logging
from typing import Sequence

from raglab.boundary.vdb.base import check_dimension, check_put_batch, dedupe_latest
from raglab.boundary.vdb.similarity import rank_by_similarity
from raglab.boundary.vdb.vector_schemas import ScoredChunk, SearchResult, StoredRecord
from raglab.models.chunk import Chunk, Vector

logger = logging.getLogger(__name__)


class InMemoryVectorStore:
    """Ordered in-memory collection of embedded chunks."""

    name = "memory"

    def __init__(self) -> None:
        self._records: list[StoredRecord] = []
        self._dimension: int | None = None
        self._lock = asyncio.Lock()

    @property
    def dimension(self) -> int | None:
        """Dimension adopted from the first put, None while empty."""
        return self._dimension

    async def put(self, chunks: Sequence[Chunk], vectors: Sequence[Vector], provenance: str) -> None:
        """
        Insert a batch; records with an existing (provenance, chunk_id) are replaced.

        Raises:
            ValueError: chunks and vectors differ in length
            ConfigurationError: Vector dimension differs from the collection's
        """
        dimension = check_put_batch(chunks, vectors)
        if dimension is None:
            return

        batch = [
            StoredRecord(provenance=provenance, chunk=chunk, vector=[float(v) for v in vector])
            for chunk, vector in dedupe_latest(chunks, vectors)
        ]
        keys = {record.key for record in batch}

        async with self._lock:
            check_dimension(self._dimension, dimension, "put")
            kept = [record for record in self._records if record.key not in keys]
            self._records = kept + batch
            self._dimension = dimension

        logger.debug(f"{__name__}:put - Stored {len(batch)} records, total={len(self._records)}")

    async def search(self, query_vector: Vector, top_k: int) -> SearchResult:
        """
        Rank stored chunks by cosine similarity to `query_vector`.

        Returns:
            SearchResult: At most min(top_k, stored) matches, best first,
                and the size of the snapshot that was ranked

        Raises:
            ConfigurationError: Query dimension differs from the collection's
        """
        async with self._lock:
            records = self._records
            dimension = self._dimension

        if top_k <= 0 or not records:
            return SearchResult([], len(records))
        check_dimension(dimension, len(query_vector), "query")

        ranked = rank_by_similarity(query_vector, [record.vector for record in records], top_k)
        return SearchResult([ScoredChunk(records[index].chunk, score) for index, score in ranked], len(records))

    async def query(self, query_vector: Vector, top_k: int) -> list[ScoredChunk]:
        return (await self.search(query_vector, top_k)).matches

    async def scan(self) -> list[StoredRecord]:
        """Snapshot of every record in insertion order."""
        async with self._lock:
            return list(self._records)

    async def clear(self) -> None:
        async with self._lock:
            self._records = []
            self._dimension = None

    async def count(self) -> int:
        return len(self._records)
