"""
Chunker contract.

A chunker turns raw text into an ordered list of non-empty chunks with
ids c1..cN. Strategy parameters are bound at construction so the engine
only ever calls chunk(text).

Dependencies: raglab.models
System role: Capability shared by all chunking strategies
"""

from typing import Protocol, runtime_checkable

from raglab.models.chunk import Chunk


@runtime_checkable
class Chunker(Protocol):
    """Pure, total text-to-chunks strategy."""

    def chunk(self, text: str) -> list[Chunk]:
        """Split text into ordered chunks; never returns an empty chunk."""
        ...
