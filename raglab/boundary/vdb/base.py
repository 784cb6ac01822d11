"""
Vector store contract.

put is all-or-nothing per call, query ranks by cosine similarity with
insertion order breaking ties, and clear empties the collection. search
is query plus the size of the snapshot it ranked; scan returns that
snapshot for retrievers that score records themselves.

Dependencies: raglab.models, raglab.core.exceptions
System role: Storage capability consumed by the evaluation engine
"""

from typing import Iterable, Protocol, Sequence, runtime_checkable

from raglab.boundary.vdb.vector_schemas import ScoredChunk, SearchResult, StoredRecord
from raglab.core.exceptions import ConfigurationError
from raglab.models.chunk import Chunk, Vector


@runtime_checkable
class VectorStore(Protocol):
    """Storage for embedded chunks with similarity search."""

    name: str

    async def put(self, chunks: Sequence[Chunk], vectors: Sequence[Vector], provenance: str) -> None:
        ...

    async def query(self, query_vector: Vector, top_k: int) -> list[ScoredChunk]:
        ...

    async def search(self, query_vector: Vector, top_k: int) -> SearchResult:
        ...

    async def scan(self) -> list[StoredRecord]:
        ...

    async def clear(self) -> None:
        ...

    async def count(self) -> int:
        ...


def check_put_batch(chunks: Sequence[Chunk], vectors: Sequence[Vector]) -> int | None:
    """
    Validate a put batch before any mutation.

    Returns:
        int | None: Dimension shared by the batch, None for an empty batch

    Raises:
        ValueError: chunks and vectors differ in length
        ConfigurationError: Vectors of the batch differ in dimension
    """
    if len(chunks) != len(vectors):
        raise ValueError(f"put received {len(chunks)} chunks but {len(vectors)} vectors")
    dimensions = {len(vector) for vector in vectors}
    if len(dimensions) > 1:
        raise ConfigurationError(
            f"put batch mixes vector dimensions {sorted(dimensions)}",
            option="dimension",
        )
    return dimensions.pop() if dimensions else None


def check_dimension(expected: int | None, actual: int, operation: str) -> None:
    """
    Raise ConfigurationError when `actual` differs from the collection's dimension.

    An empty collection (expected None) accepts any dimension.
    """
    if expected is not None and actual != expected:
        raise ConfigurationError(
            f"{operation} vector has dimension {actual}, collection holds dimension {expected}",
            option="dimension",
            details={"operation": operation},
        )


def check_uniform_dimension(dimensions: Iterable[int], operation: str) -> int | None:
    """
    Dimension shared by a collection's stored vectors.

    Returns:
        int | None: The single stored dimension, None when nothing is stored

    Raises:
        ConfigurationError: Stored vectors differ in dimension
    """
    found = set(dimensions)
    if len(found) > 1:
        raise ConfigurationError(
            f"collection holds vectors of mixed dimensions {sorted(found)}",
            option="dimension",
            details={"operation": operation},
        )
    return found.pop() if found else None


def dedupe_latest(chunks: Sequence[Chunk], vectors: Sequence[Vector]) -> list[tuple[Chunk, Vector]]:
    """Keep the last occurrence of each chunk_id within one batch, in batch order."""
    latest: dict[str, tuple[Chunk, Vector]] = {}
    for chunk, vector in zip(chunks, vectors):
        latest.pop(chunk.chunk_id, None)
        latest[chunk.chunk_id] = (chunk, vector)
    return list(latest.values())
