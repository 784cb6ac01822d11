"""
Embedding adapter factory.

Builds the adapter named by configuration: the deterministic 'reference'
adapter, or 'gemini' (Google Generative AI embeddings through LangChain,
optional dependency).

Dependencies: raglab.configs, raglab.core.embeddings
System role: Embedding adapter instantiation and selection
"""

import logging

from raglab.configs import get_settings
from raglab.core.embeddings.base import EmbeddingAdapter
from raglab.core.embeddings.langchain_adapter import LangChainEmbeddingAdapter
from raglab.core.embeddings.reference_embedding import ReferenceEmbedding
from raglab.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

EMBEDDING_ADAPTERS = ("reference", "gemini")


def _build_gemini_adapter() -> LangChainEmbeddingAdapter:
    settings = get_settings().embedding
    try:
        from langchain_google_genai import GoogleGenerativeAIEmbeddings
    except ImportError as e:
        raise ConfigurationError(
            "The 'gemini' embedding adapter requires the langchain-google-genai package "
            "(pip install raglab[gemini])",
            option="embedding_adapter",
        ) from e

    kwargs = {"model": settings.model}
    if settings.google_api_key:
        kwargs["google_api_key"] = settings.google_api_key

    logger.info(f"{__name__}:_build_gemini_adapter - Creating Gemini embeddings model={settings.model}")
    return LangChainEmbeddingAdapter(
        GoogleGenerativeAIEmbeddings(**kwargs),
        name="gemini",
        dimension=settings.dimension,
        max_attempts=settings.max_attempts,
        retry_max_wait_seconds=settings.retry_max_wait_seconds,
    )


def build_embedding_adapter(name: str | None = None) -> EmbeddingAdapter:
    """
    Factory function for embedding adapters.

    Args:
        name: Adapter name; defaults to settings.embedding.adapter

    Returns:
        EmbeddingAdapter: Configured adapter instance

    Raises:
        ConfigurationError: If the adapter name is unknown or its
            dependency is missing
    """
    adapter_name = (name or get_settings().embedding.adapter).lower()

    if adapter_name == "reference":
        return ReferenceEmbedding()
    if adapter_name == "gemini":
        return _build_gemini_adapter()

    raise ConfigurationError(
        f"Invalid embedding adapter: {adapter_name}. Must be one of {list(EMBEDDING_ADAPTERS)}.",
        option="embedding_adapter",
    )
