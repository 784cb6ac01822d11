"""
Retrieval strategies.

Exports the Retriever protocol, the vector, BM25 and hybrid retrievers,
BM25 scoring and the retriever factory.
"""

from raglab.core.retrieval.base import Retriever
from raglab.core.retrieval.bm25 import bm25_scores, tokenize
from raglab.core.retrieval.bm25_retriever import BM25Retriever
from raglab.core.retrieval.hybrid_retriever import HybridRetriever
from raglab.core.retrieval.retriever_factory import RETRIEVERS, build_retriever
from raglab.core.retrieval.vector_retriever import VectorRetriever

__all__ = [
    "Retriever",
    "bm25_scores",
    "tokenize",
    "BM25Retriever",
    "HybridRetriever",
    "VectorRetriever",
    "RETRIEVERS",
    "build_retriever",
]
