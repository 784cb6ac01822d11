"""
Evaluation module for retrieval quality measurement.

Contains:
- models/: Data classes for evaluation metrics
- evaluators/: Metric calculators
- data/: Ground truth datasets and data loading

Usage:
    from raglab.evaluation import EvalDataset

    dataset = EvalDataset.from_json("ground_truth.json")
    report = await engine.evaluate(dataset, {"chunker": "sentence"})
"""

from raglab.evaluation.models import RetrievalMetrics
from raglab.evaluation.evaluators import MetricsCalculator, compute_retrieval_metrics
from raglab.evaluation.data import EvalDataset, EvalSample

__all__ = [
    "RetrievalMetrics",
    "MetricsCalculator",
    "compute_retrieval_metrics",
    "EvalDataset",
    "EvalSample",
]
