"""
Embedding adapter over LangChain Embeddings providers.

Wraps any langchain_core Embeddings implementation (Google Gemini,
Bedrock, fakes in tests) behind the batch EmbeddingAdapter contract.
Transient provider failures are retried here with exponential backoff;
once attempts are exhausted the batch fails as a whole.

Dependencies: langchain_core, tenacity
System role: Provider-backed embedding adapter
"""

import logging
from typing import Sequence

from langchain_core.embeddings import Embeddings
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from raglab.core.embeddings.base import validate_embeddings
from raglab.core.exceptions import EmbeddingError
from raglab.models.chunk import Vector

logger = logging.getLogger(__name__)


class LangChainEmbeddingAdapter:
    """
    Batch adapter for a LangChain Embeddings object.

    One aembed_documents call per batch; output is validated for count
    and dimension before it is returned.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        name: str = "langchain",
        dimension: int | None = None,
        max_attempts: int = 3,
        retry_max_wait_seconds: float = 10.0,
    ) -> None:
        """
        Initialize adapter.

        Args:
            embeddings: LangChain embeddings client
            name: Adapter name used in logs and errors
            dimension: Expected output dimension (None to accept any)
            max_attempts: Provider attempts per batch before failing
            retry_max_wait_seconds: Cap on backoff between attempts
        """
        self._embeddings = embeddings
        self.name = name
        self.dimension = dimension
        self._max_attempts = max_attempts
        self._retry_max_wait = retry_max_wait_seconds

    async def embed(self, texts: Sequence[str]) -> list[Vector]:
        """
        Embed a batch of texts through the provider.

        Args:
            texts: Batch of texts

        Returns:
            list[Vector]: One vector per text, in input order

        Raises:
            EmbeddingError: Provider unreachable, rejected the batch, or
                returned malformed output
        """
        if not texts:
            return []

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(Exception),
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential_jitter(initial=0.5, max=self._retry_max_wait),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:embed - Retry {retry_state.attempt_number}/"
                    f"{self._max_attempts} for adapter {self.name}"
                ),
                reraise=True,
            ):
                with attempt:
                    raw = await self._embeddings.aembed_documents(list(texts))
        except Exception as e:
            logger.error(f"{__name__}:embed - {self.name} failed: {type(e).__name__}")
            raise EmbeddingError(
                f"Embedding provider failed: {e}",
                adapter=self.name,
                details={"batch_size": len(texts)},
            ) from e

        try:
            vectors = [[float(value) for value in vector] for vector in raw]
        except (TypeError, ValueError) as e:
            raise EmbeddingError(f"Provider returned non-numeric output: {e}", adapter=self.name) from e

        validate_embeddings(texts, vectors, self.dimension, adapter=self.name)
        return vectors
