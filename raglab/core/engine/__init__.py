"""
Evaluation engine.

Exports EvaluationEngine, its per-request EngineConfig and the stage
cancellation helper.
"""

from raglab.core.engine.cancellation import run_stage
from raglab.core.engine.config import EngineConfig
from raglab.core.engine.eval_engine import EvaluationEngine, default_provenance

__all__ = [
    "EvaluationEngine",
    "EngineConfig",
    "default_provenance",
    "run_stage",
]
