"""
Evaluation logic - calculators for retrieval quality assessment.

All data classes are imported from the models module.
"""

from raglab.evaluation.evaluators.metrics_calculator import MetricsCalculator
from raglab.evaluation.evaluators.helpers import compute_retrieval_metrics

__all__ = [
    "MetricsCalculator",
    "compute_retrieval_metrics",
]
