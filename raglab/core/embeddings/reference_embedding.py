"""
Deterministic reference embedding adapter.

Reduces each text to the sum of its character code points and emits that
sum modulo 7, 11 and 13. No I/O, same text always gives the same vector.
Not semantically meaningful; it exists so the pipeline can be exercised
without an embedding provider.

Dependencies: raglab.models
System role: Offline/test embedding adapter
"""

from typing import Sequence

from raglab.models.chunk import Vector

REFERENCE_MODULI = (7, 11, 13)


class ReferenceEmbedding:
    """Deterministic 3-dimensional embedding adapter."""

    name = "reference"
    dimension = len(REFERENCE_MODULI)

    async def embed(self, texts: Sequence[str]) -> list[Vector]:
        return [self.embed_text(text) for text in texts]

    @staticmethod
    def embed_text(text: str) -> Vector:
        """Vector for a single text (synchronous helper)."""
        # Sums whole code points; an astral character counts once at its full
        # value rather than as a UTF-16 surrogate pair or its high surrogate.
        total = sum(ord(ch) for ch in text)
        return [float(total % modulus) for modulus in REFERENCE_MODULI]
