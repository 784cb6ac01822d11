"""
Chunking strategies.

Exports the Chunker protocol, the strategy implementations, their
function forms and the name-based factory.
"""

from raglab.core.chunking.base import Chunker
from raglab.core.chunking.chunker_factory import CHUNKER_BUILDERS, build_chunker
from raglab.core.chunking.document_chunker import DocumentChunker, document_chunk
from raglab.core.chunking.fixed_chunker import FixedSizeChunker, fixed_chunk
from raglab.core.chunking.sentence_chunker import SentenceChunker, sentence_chunk
from raglab.core.chunking.sliding_chunker import SlidingWindowChunker, sliding_chunk

__all__ = [
    "Chunker",
    "CHUNKER_BUILDERS",
    "build_chunker",
    "DocumentChunker",
    "FixedSizeChunker",
    "SentenceChunker",
    "SlidingWindowChunker",
    "document_chunk",
    "fixed_chunk",
    "sentence_chunk",
    "sliding_chunk",
]
