"""
Evaluation models - Data classes for evaluation metrics.

All models are pure data containers with no business logic.
"""

from raglab.evaluation.models.metrics_models import RetrievalMetrics

__all__ = ["RetrievalMetrics"]
