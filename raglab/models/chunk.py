"""
Chunk domain model.

Represents one retrievable unit of text with a deterministic,
order-derived identifier. Chunks are immutable once created.

Dependencies: pydantic
System role: Document chunk data structure
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Vector = list[float]


class Chunk(BaseModel):
    """Chunk of source text produced by a chunker."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    chunk_id: str = Field(description="Order-derived chunk identifier (c1, c2, ...)")
    text: str = Field(description="Exact chunk text")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque metadata passed through the pipeline unchanged",
    )


def make_chunk(text: str, index: int) -> Chunk:
    """
    Build the chunk at zero-based position `index` of a chunking run.

    Args:
        text: Chunk text, kept as-is
        index: Zero-based position; the id is c{index + 1}

    Returns:
        Chunk: Chunk without metadata
    """
    return Chunk(chunk_id=f"c{index + 1}", text=text)
