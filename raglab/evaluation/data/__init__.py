"""
Data management - ground truth datasets for retrieval evaluation.
"""

from raglab.evaluation.data.datasets import EvalDataset, EvalSample

__all__ = ["EvalDataset", "EvalSample"]
