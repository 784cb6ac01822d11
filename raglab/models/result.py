"""
Evaluation engine result models.

EvalResult is created fresh for every engine call and is never persisted
by the pipeline. Serialise with model_dump(by_alias=True) for the
camelCase wire shape.

Dependencies: pydantic, raglab.evaluation.models
System role: Return type for EvaluationEngine.ingest() and query()
"""

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from raglab.evaluation.models import RetrievalMetrics


class EngineStage(str, enum.Enum):
    """
    Lifecycle of a single engine request.

    IDLE -> CHUNKING -> EMBEDDING -> STORING -> DONE for ingest,
    IDLE -> EMBEDDING -> QUERYING -> RERANKING -> SCORING -> DONE for query
    (EMBEDDING is skipped by lexical retrievers, RERANKING without a
    reranker). FAILED is reachable from any stage: a failed call raises, and
    the error details carry status="failed" plus the stage that failed.
    """

    IDLE = "idle"
    CHUNKING = "chunking"
    EMBEDDING = "embedding"
    STORING = "storing"
    QUERYING = "querying"
    RERANKING = "reranking"
    SCORING = "scoring"
    DONE = "done"
    FAILED = "failed"


class Match(BaseModel):
    """Single ranked retrieval match."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chunk_id: str = Field(description="Matched chunk identifier")
    text: str = Field(description="Matched chunk text")
    score: float = Field(description="Similarity score (cosine, -1.0 to 1.0)")
    rank: int = Field(ge=1, description="1-based position in the ranking")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")


class EvalResult(BaseModel):
    """Outcome of one ingest or query call."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matches: list[Match] = Field(default_factory=list, description="Ranked matches (query only)")
    count_ingested: int | None = Field(default=None, description="Chunks stored by ingest")
    count_searched: int | None = Field(default=None, description="Stored records searched by query")
    elapsed_ms: float = Field(description="Wall-clock time of the whole call in milliseconds")
    stage: EngineStage = Field(default=EngineStage.DONE, description="Final lifecycle stage")
    provenance: str | None = Field(default=None, description="Provenance of ingested chunks")
    config_hash: str = Field(description="SHA-256 of the normalised engine configuration")
    stage_timings_ms: dict[str, float] = Field(
        default_factory=dict,
        description="Elapsed milliseconds per executed stage",
    )
    retrieval_metrics: RetrievalMetrics | None = Field(
        default=None,
        description="Retrieval quality against expected chunk ids (query only)",
    )

    @property
    def matched_chunk_ids(self) -> list[str]:
        """Chunk ids of the matches in rank order."""
        return [match.chunk_id for match in self.matches]


class EvaluationReport(BaseModel):
    """Aggregate of one query per ground truth sample."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    results: list[EvalResult] = Field(default_factory=list, description="Per-sample query results")
    mean_metrics: RetrievalMetrics = Field(description="Metrics averaged over all samples")
    sample_count: int = Field(ge=0, description="Number of evaluated samples")
    elapsed_ms: float = Field(description="Wall-clock time of the whole evaluation")
    config_hash: str = Field(description="SHA-256 of the normalised engine configuration")
