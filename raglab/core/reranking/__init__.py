"""
Rerankers.

Exports the Reranker protocol, the simple and LLM rerankers and the
reranker factory.
"""

from raglab.core.reranking.base import Reranker
from raglab.core.reranking.llm_reranker import LLMReranker
from raglab.core.reranking.reranker_factory import RERANKERS, build_reranker, check_reranker_name
from raglab.core.reranking.simple_reranker import SimpleReranker

__all__ = [
    "Reranker",
    "LLMReranker",
    "SimpleReranker",
    "RERANKERS",
    "build_reranker",
    "check_reranker_name",
]
