"""
Domain models shared across the pipeline layers.
"""

from raglab.models.chunk import Chunk, Vector, make_chunk
from raglab.models.result import EngineStage, EvalResult, EvaluationReport, Match

__all__ = [
    "Chunk",
    "Vector",
    "make_chunk",
    "EngineStage",
    "EvalResult",
    "EvaluationReport",
    "Match",
]
