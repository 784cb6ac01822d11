"""
Reranker factory.

Builds the reranker named by configuration: the 'simple' length/score
heuristic, or 'llm' (a Google Generative AI chat model through
LangChain, optional dependency).

Dependencies: raglab.configs, raglab.core.reranking
System role: Reranker instantiation and selection
"""

import logging

from raglab.configs import get_settings
from raglab.core.exceptions import ConfigurationError
from raglab.core.reranking.base import Reranker
from raglab.core.reranking.llm_reranker import LLMReranker
from raglab.core.reranking.simple_reranker import SimpleReranker

logger = logging.getLogger(__name__)

RERANKERS = ("simple", "llm")


def check_reranker_name(name: str) -> str:
    """
    Normalised reranker name.

    Raises:
        ConfigurationError: Unknown name
    """
    reranker_name = name.strip().lower()
    if reranker_name not in RERANKERS:
        raise ConfigurationError(
            f"Unknown reranker: {name}. Must be one of {list(RERANKERS)}",
            option="reranker",
        )
    return reranker_name


def _build_llm_reranker() -> LLMReranker:
    settings = get_settings().retrieval
    try:
        from langchain_google_genai import ChatGoogleGenerativeAI
    except ImportError as e:
        raise ConfigurationError(
            "The 'llm' reranker requires the langchain-google-genai package "
            "(pip install raglab[gemini])",
            option="reranker",
        ) from e

    kwargs = {"model": settings.rerank_model, "temperature": 0}
    if settings.google_api_key:
        kwargs["google_api_key"] = settings.google_api_key

    logger.info(f"{__name__}:_build_llm_reranker - Creating Gemini reranker model={settings.rerank_model}")
    return LLMReranker(ChatGoogleGenerativeAI(**kwargs))


def build_reranker(name: str) -> Reranker:
    """
    Factory function for rerankers.

    Args:
        name: 'simple' or 'llm'

    Returns:
        Reranker: Configured reranker

    Raises:
        ConfigurationError: Unknown name or missing optional dependency
    """
    reranker_name = check_reranker_name(name)
    if reranker_name == "simple":
        return SimpleReranker()
    return _build_llm_reranker()
