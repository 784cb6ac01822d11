"""
Sliding-window chunker.

Purpose
- Emit overlapping full-length windows of `size` characters, one starting
  every `stride` characters.

Contract
- export: sliding_chunk(text, size, stride) -> list[Chunk]
"""

from raglab.models.chunk import Chunk, make_chunk


def sliding_chunk(text: str, size: int, stride: int = 1) -> list[Chunk]:
    """Split `text` into overlapping windows.

    Rules
    - size <= 0 or empty text -> [].
    - Text no longer than `size` -> one chunk with the whole text.
    - Only full windows are emitted, so a tail shorter than `stride`
      past the last window start is not repeated.
    - stride < 1 is treated as 1.
    """
    if size <= 0 or not text:
        return []
    if len(text) <= size:
        return [make_chunk(text, 0)]

    step = max(1, stride)
    starts = range(0, len(text) - size + 1, step)
    return [make_chunk(text[start:start + size], index) for index, start in enumerate(starts)]


class SlidingWindowChunker:
    """Chunker bound to a window size and stride."""

    def __init__(self, size: int, stride: int = 1) -> None:
        self.size = size
        self.stride = stride

    def chunk(self, text: str) -> list[Chunk]:
        return sliding_chunk(text, self.size, self.stride)

    def __repr__(self) -> str:
        return f"SlidingWindowChunker(size={self.size}, stride={self.stride})"
