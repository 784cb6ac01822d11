"""
Fixed-size character chunker.

Contract
- fixed_chunk(text, size) -> consecutive non-overlapping windows of `size`
  characters in original order; the last window may be shorter.
- size <= 0 returns an empty list rather than raising.
"""

from raglab.models.chunk import Chunk, make_chunk


def fixed_chunk(text: str, size: int) -> list[Chunk]:
    """Split `text` into windows of at most `size` characters.

    Windows are not trimmed, so joining the chunk texts gives back `text`.
    """
    if size <= 0:
        return []
    return [
        make_chunk(text[start:start + size], index)
        for index, start in enumerate(range(0, len(text), size))
    ]


class FixedSizeChunker:
    """Chunker bound to a window size."""

    def __init__(self, size: int) -> None:
        self.size = size

    def chunk(self, text: str) -> list[Chunk]:
        return fixed_chunk(text, self.size)

    def __repr__(self) -> str:
        return f"FixedSizeChunker(size={self.size})"
