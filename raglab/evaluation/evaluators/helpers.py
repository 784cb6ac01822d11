"""
Helper utilities for the scoring stage.

Bundles the individual MetricsCalculator functions into one
RetrievalMetrics container for a single query.
"""

from typing import Optional

from raglab.evaluation.evaluators.metrics_calculator import MetricsCalculator
from raglab.evaluation.models import RetrievalMetrics


def compute_retrieval_metrics(
    retrieved_chunks: list[str],
    expected_chunks: Optional[list[str]],
    k: int = 5,
) -> RetrievalMetrics:
    """Compute retrieval quality metrics.

    Args:
        retrieved_chunks: IDs of chunks returned by retrieval, best first
        expected_chunks: Expected chunk IDs from ground truth
        k: Ranking cutoff

    Returns:
        RetrievalMetrics with precision, recall, NDCG, MRR and hit rate
    """
    if not expected_chunks:
        return RetrievalMetrics(k=k)

    return RetrievalMetrics(
        k=k,
        precision_at_k=MetricsCalculator.precision_at_k(retrieved_chunks, expected_chunks, k=k),
        recall_at_k=MetricsCalculator.recall_at_k(retrieved_chunks, expected_chunks, k=k),
        ndcg_at_k=MetricsCalculator.ndcg_at_k(retrieved_chunks, expected_chunks, k=k),
        mean_reciprocal_rank=MetricsCalculator.mean_reciprocal_rank(
            retrieved_chunks, expected_chunks
        ),
        hit_rate=MetricsCalculator.hit_rate_at_k(retrieved_chunks, expected_chunks, k=k),
    )
