"""
Whole-document chunker.

Treats the stripped document as one chunk; useful as a retrieval baseline.
"""

from raglab.models.chunk import Chunk, make_chunk


def document_chunk(text: str) -> list[Chunk]:
    """Return the stripped text as a single chunk, or [] for blank text."""
    stripped = text.strip()
    return [make_chunk(stripped, 0)] if stripped else []


class DocumentChunker:
    """Chunker returning the whole document."""

    def chunk(self, text: str) -> list[Chunk]:
        return document_chunk(text)

    def __repr__(self) -> str:
        return "DocumentChunker()"
