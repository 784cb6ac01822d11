"""
Retrieval metrics data classes.

Contains pure data containers for:
- RetrievalMetrics: precision, recall, NDCG at a cutoff, MRR and hit rate
"""

from dataclasses import dataclass, fields
from typing import Iterable


@dataclass
class RetrievalMetrics:
    """Retrieval quality metrics.

    Measures how well the retrieval system ranks the expected chunks.
    All scores are normalized to 0-1 range; k is the ranking cutoff.
    """

    k: int = 5
    precision_at_k: float = 0.0
    recall_at_k: float = 0.0
    ndcg_at_k: float = 0.0
    mean_reciprocal_rank: float = 0.0
    hit_rate: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "k": self.k,
            "precision_at_k": round(self.precision_at_k, 3),
            "recall_at_k": round(self.recall_at_k, 3),
            "ndcg_at_k": round(self.ndcg_at_k, 3),
            "mean_reciprocal_rank": round(self.mean_reciprocal_rank, 3),
            "hit_rate": round(self.hit_rate, 3),
        }

    @classmethod
    def mean(cls, metrics: Iterable["RetrievalMetrics"]) -> "RetrievalMetrics":
        """Average a collection of per-query metrics (empty -> zeros)."""
        metrics = list(metrics)
        if not metrics:
            return cls()

        averaged = {
            f.name: sum(getattr(m, f.name) for m in metrics) / len(metrics)
            for f in fields(cls)
            if f.name != "k"
        }
        return cls(k=metrics[0].k, **averaged)
