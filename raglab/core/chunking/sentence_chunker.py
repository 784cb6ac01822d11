"""
Sentence-boundary chunker.

Heuristic segmenter: a boundary is whitespace preceded by '.', '!' or '?'.
The punctuation stays with the sentence before it. No abbreviation or
decimal-number handling is attempted.
"""

import re

from raglab.models.chunk import Chunk, make_chunk

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def sentence_chunk(text: str) -> list[Chunk]:
    """Split `text` into trimmed, non-empty sentences.

    Text without any boundary comes back as a single chunk; whitespace-only
    text gives an empty list.
    """
    parts = (part.strip() for part in _SENTENCE_BOUNDARY.split(text))
    return [make_chunk(part, index) for index, part in enumerate(p for p in parts if p)]


class SentenceChunker:
    """Chunker splitting on sentence-terminal punctuation."""

    def chunk(self, text: str) -> list[Chunk]:
        return sentence_chunk(text)

    def __repr__(self) -> str:
        return "SentenceChunker()"
