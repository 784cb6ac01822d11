"""
Embedding adapter contract and output validation.

An adapter embeds a whole batch of texts in one call and returns one
vector per text in input order. Either the whole batch succeeds or the
call raises EmbeddingError.

Dependencies: raglab.models, raglab.core.exceptions
System role: Boundary to embedding providers
"""

from typing import Protocol, Sequence, runtime_checkable

from raglab.core.exceptions import EmbeddingError
from raglab.models.chunk import Vector


@runtime_checkable
class EmbeddingAdapter(Protocol):
    """Batch text-to-vector capability."""

    name: str
    dimension: int | None

    async def embed(self, texts: Sequence[str]) -> list[Vector]:
        """Embed every text of the batch, preserving order."""
        ...


def validate_embeddings(
    texts: Sequence[str],
    vectors: Sequence[Sequence[float]],
    dimension: int | None = None,
    adapter: str | None = None,
) -> None:
    """
    Reject malformed adapter output.

    Args:
        texts: Batch that was embedded
        vectors: Adapter output
        dimension: Declared adapter dimension (None skips that check)
        adapter: Adapter name for error context

    Raises:
        EmbeddingError: Wrong vector count, ragged or wrong dimensions
    """
    if len(vectors) != len(texts):
        raise EmbeddingError(
            f"Adapter returned {len(vectors)} vectors for {len(texts)} texts",
            adapter=adapter,
        )

    lengths = {len(vector) for vector in vectors}
    if len(lengths) > 1:
        raise EmbeddingError(
            f"Adapter returned vectors of mixed dimensions {sorted(lengths)}",
            adapter=adapter,
        )
    if 0 in lengths:
        raise EmbeddingError("Adapter returned empty vectors", adapter=adapter)
    if dimension is not None and lengths and lengths != {dimension}:
        raise EmbeddingError(
            f"Adapter declared dimension {dimension} but returned {lengths.pop()}",
            adapter=adapter,
            details={"expected_dimension": dimension},
        )
