"""
Chunker factory for selecting a chunking strategy by name.

New strategies register a builder in CHUNKER_BUILDERS; nothing else in the
pipeline changes.

Dependencies: raglab.core.chunking, raglab.core.exceptions
System role: Chunker instantiation and selection
"""

import logging
from typing import Callable

from raglab.core.chunking.base import Chunker
from raglab.core.chunking.document_chunker import DocumentChunker
from raglab.core.chunking.fixed_chunker import FixedSizeChunker
from raglab.core.chunking.sentence_chunker import SentenceChunker
from raglab.core.chunking.sliding_chunker import SlidingWindowChunker
from raglab.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _require_size(name: str, chunk_size: int | None) -> int:
    if chunk_size is None:
        raise ConfigurationError(f"Chunker '{name}' requires chunk_size", option="chunk_size")
    if chunk_size <= 0:
        raise ConfigurationError(
            f"Chunker '{name}' requires a positive chunk_size, got {chunk_size}",
            option="chunk_size",
        )
    return chunk_size


CHUNKER_BUILDERS: dict[str, Callable[[int | None, int], Chunker]] = {
    "fixed": lambda size, stride: FixedSizeChunker(_require_size("fixed", size)),
    "sentence": lambda size, stride: SentenceChunker(),
    "sliding": lambda size, stride: SlidingWindowChunker(_require_size("sliding", size), stride),
    "document": lambda size, stride: DocumentChunker(),
}


def build_chunker(name: str, chunk_size: int | None = None, chunk_stride: int = 1) -> Chunker:
    """
    Build the chunker registered under `name`.

    Args:
        name: Strategy name ('fixed', 'sentence', 'sliding', 'document')
        chunk_size: Window size, required by 'fixed' and 'sliding'
        chunk_stride: Window step for 'sliding'

    Returns:
        Chunker: Configured strategy

    Raises:
        ConfigurationError: Unknown name or missing/invalid chunk_size
    """
    builder = CHUNKER_BUILDERS.get(name.lower())
    if builder is None:
        raise ConfigurationError(
            f"Unknown chunker: {name}. Must be one of {sorted(CHUNKER_BUILDERS)}",
            option="chunker",
        )

    chunker = builder(chunk_size, chunk_stride)
    logger.debug(f"{__name__}:build_chunker - Built {chunker!r}")
    return chunker
