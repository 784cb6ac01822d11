"""
Retriever factory for selecting a retrieval strategy by name.

Dependencies: raglab.core.retrieval, raglab.core.exceptions
System role: Retriever instantiation and selection
"""

from raglab.core.exceptions import ConfigurationError
from raglab.core.retrieval.base import Retriever
from raglab.core.retrieval.bm25_retriever import BM25Retriever
from raglab.core.retrieval.hybrid_retriever import HybridRetriever
from raglab.core.retrieval.vector_retriever import VectorRetriever

RETRIEVERS = ("vector", "bm25", "hybrid")


def build_retriever(name: str, bm25_weight: float = 0.5, vector_weight: float = 0.5) -> Retriever:
    """
    Build the retriever registered under `name`.

    Args:
        name: 'vector', 'bm25' or 'hybrid'
        bm25_weight: BM25 weight for 'hybrid'
        vector_weight: Cosine weight for 'hybrid'

    Raises:
        ConfigurationError: Unknown name
    """
    retriever_name = name.lower()
    if retriever_name == "vector":
        return VectorRetriever()
    if retriever_name == "bm25":
        return BM25Retriever()
    if retriever_name == "hybrid":
        return HybridRetriever(bm25_weight=bm25_weight, vector_weight=vector_weight)

    raise ConfigurationError(
        f"Unknown retriever: {name}. Must be one of {list(RETRIEVERS)}",
        option="retriever",
    )
