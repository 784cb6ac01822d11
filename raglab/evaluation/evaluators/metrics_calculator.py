"""
Retrieval metrics calculator.

Contains algorithms for calculating information retrieval metrics over
ranked chunk ids:
- NDCG (Normalized Discounted Cumulative Gain)
- Precision@K
- Recall@K
- Mean Reciprocal Rank (MRR)
- Hit rate@K
"""

import logging
import math

logger = logging.getLogger(__name__)


class MetricsCalculator:
    """Calculate retrieval evaluation metrics.

    All methods are static and can be called without instantiation.
    Duplicate ids in the expected list count once.
    """

    @staticmethod
    def ndcg_at_k(
        retrieved_chunks: list[str],
        expected_chunks: list[str],
        k: int = 5,
    ) -> float:
        """Normalized Discounted Cumulative Gain @ K.

        Binary relevance with the standard log2 rank discount.
        Higher = better (1.0 is perfect).

        Args:
            retrieved_chunks: Ranked list of retrieved chunk IDs
            expected_chunks: List of relevant chunk IDs
            k: Cutoff rank

        Returns:
            NDCG score (0-1)
        """
        expected = set(expected_chunks)
        if not expected or k <= 0:
            return 0.0

        dcg = sum(
            1.0 / math.log2(rank + 1)
            for rank, chunk_id in enumerate(retrieved_chunks[:k], 1)
            if chunk_id in expected
        )
        # Ideal DCG: all expected chunks ranked first
        idcg = sum(1.0 / math.log2(rank + 1) for rank in range(1, min(len(expected), k) + 1))

        return dcg / idcg

    @staticmethod
    def precision_at_k(
        retrieved_chunks: list[str],
        expected_chunks: list[str],
        k: int = 5,
    ) -> float:
        """Precision @ K.

        Share of the top-k retrieved chunks that are relevant. Divides by
        the number actually retrieved when fewer than k came back.

        Args:
            retrieved_chunks: Ranked list of retrieved chunk IDs
            expected_chunks: List of relevant chunk IDs
            k: Cutoff rank

        Returns:
            Precision score (0-1)
        """
        top = retrieved_chunks[:k]
        if not top:
            return 0.0

        relevant_retrieved = len(set(top) & set(expected_chunks))
        return relevant_retrieved / len(top)

    @staticmethod
    def recall_at_k(
        retrieved_chunks: list[str],
        expected_chunks: list[str],
        k: int = 5,
    ) -> float:
        """Recall @ K.

        Share of expected chunks that appear in the top-k retrieved.

        Args:
            retrieved_chunks: Ranked list of retrieved chunk IDs
            expected_chunks: List of relevant chunk IDs
            k: Cutoff rank

        Returns:
            Recall score (0-1)
        """
        expected = set(expected_chunks)
        if not expected:
            return 0.0

        return len(set(retrieved_chunks[:k]) & expected) / len(expected)

    @staticmethod
    def mean_reciprocal_rank(
        retrieved_chunks: list[str],
        expected_chunks: list[str],
    ) -> float:
        """Reciprocal rank of the first relevant chunk.

        Args:
            retrieved_chunks: Ranked list of retrieved chunk IDs
            expected_chunks: List of relevant chunk IDs

        Returns:
            MRR score (0-1)
        """
        if not expected_chunks:
            return 0.0

        for i, chunk_id in enumerate(retrieved_chunks, 1):
            if chunk_id in expected_chunks:
                return 1.0 / i

        return 0.0  # No relevant chunks found

    @staticmethod
    def hit_rate_at_k(
        retrieved_chunks: list[str],
        expected_chunks: list[str],
        k: int = 5,
    ) -> float:
        """1.0 when any expected chunk is in the top-k, else 0.0."""
        expected = set(expected_chunks)
        return 1.0 if any(chunk_id in expected for chunk_id in retrieved_chunks[:k]) else 0.0
