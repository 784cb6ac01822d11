"""
RAG evaluation engine.

Orchestrates the ingest pipeline (chunk -> embed -> store) and the query
pipeline (embed -> retrieve -> rerank -> score) over swappable chunkers,
embedding adapters, vector stores, retrievers and rerankers. Stages run
strictly in sequence; every embedding, storage and reranking await
honours a per-stage timeout and an optional cancel event.

Dependencies: raglab.core.chunking, raglab.core.embeddings,
    raglab.core.retrieval, raglab.core.reranking, raglab.boundary.vdb,
    raglab.evaluation
System role: Entry point for ingest/query/evaluate requests
"""

import asyncio
import hashlib
import logging
import time
from typing import Any, Iterable, Mapping, Sequence

from raglab.boundary.vdb.base import VectorStore
from raglab.boundary.vdb.in_memory_store import InMemoryVectorStore
from raglab.boundary.vdb.vector_store_factory import build_vector_store
from raglab.configs import get_settings
from raglab.core.embeddings.base import EmbeddingAdapter, validate_embeddings
from raglab.core.embeddings.embedding_factory import build_embedding_adapter
from raglab.core.embeddings.reference_embedding import ReferenceEmbedding
from raglab.core.engine.cancellation import run_stage
from raglab.core.engine.config import EngineConfig
from raglab.core.exceptions import RagLabError
from raglab.core.reranking.base import Reranker
from raglab.core.reranking.reranker_factory import build_reranker
from raglab.evaluation.data.datasets import EvalSample
from raglab.evaluation.evaluators.helpers import compute_retrieval_metrics
from raglab.evaluation.models import RetrievalMetrics
from raglab.models.result import EngineStage, EvalResult, EvaluationReport, Match
from raglab.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

ConfigLike = EngineConfig | Mapping[str, Any] | None


def default_provenance(text: str) -> str:
    """First 16 hex characters of the SHA-256 of the source text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:16]


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)


class EvaluationEngine:
    """
    Ingest and query text through configurable RAG components.

    Holds only the name -> instance maps of its collaborators. Names not
    present in the maps are built on first use through the adapter, store
    and reranker factories and kept for later calls, so an in-memory store
    survives between ingest and query.

    Attributes:
        adapters: Embedding adapters by name
        stores: Vector stores by name
        rerankers: Rerankers by name
    """

    def __init__(
        self,
        adapters: Mapping[str, EmbeddingAdapter] | None = None,
        stores: Mapping[str, VectorStore] | None = None,
        rerankers: Mapping[str, Reranker] | None = None,
    ) -> None:
        """
        Initialize engine.

        Args:
            adapters: Pre-built embedding adapters keyed by name
            stores: Pre-built vector stores keyed by name
            rerankers: Pre-built rerankers keyed by name
        """
        self.adapters: dict[str, EmbeddingAdapter] = dict(adapters or {})
        self.stores: dict[str, VectorStore] = dict(stores or {})
        self.rerankers: dict[str, Reranker] = dict(rerankers or {})

    @classmethod
    def from_settings(cls) -> "EvaluationEngine":
        """Engine with the reference adapter and an in-memory store; 'sql' is built lazily."""
        return cls(
            adapters={ReferenceEmbedding.name: ReferenceEmbedding()},
            stores={InMemoryVectorStore.name: InMemoryVectorStore()},
        )

    def _adapter(self, name: str) -> EmbeddingAdapter:
        if name not in self.adapters:
            self.adapters[name] = build_embedding_adapter(name)
        return self.adapters[name]

    def _store(self, name: str) -> VectorStore:
        if name not in self.stores:
            self.stores[name] = build_vector_store(name)
        return self.stores[name]

    def _reranker(self, name: str) -> Reranker:
        if name not in self.rerankers:
            self.rerankers[name] = build_reranker(name)
        return self.rerankers[name]

    @staticmethod
    def _stage_timeout(timeout: float | None) -> float | None:
        return timeout if timeout is not None else get_settings().engine.stage_timeout_seconds

    async def _embed(
        self,
        adapter: EmbeddingAdapter,
        texts: Sequence[str],
        timeout: float | None,
        cancel_event: asyncio.Event | None,
    ) -> list[list[float]]:
        vectors = await run_stage(adapter.embed(texts), EngineStage.EMBEDDING.value, timeout, cancel_event)
        validate_embeddings(texts, vectors, getattr(adapter, "dimension", None), adapter=adapter.name)
        return vectors

    async def ingest(
        self,
        text: str,
        config: ConfigLike = None,
        *,
        provenance: str | None = None,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> EvalResult:
        """
        Chunk, embed and store `text`.

        The whole chunk list is embedded in one batch and stored with one
        put, only after every embedding succeeded.

        Args:
            text: Source text
            config: EngineConfig or mapping of options
            provenance: Source identifier (default: SHA-256 prefix of text)
            timeout: Per-stage timeout in seconds (default from settings)
            cancel_event: Event that cancels the in-flight stage when set

        Returns:
            EvalResult: count_ingested, provenance, timings and config hash

        Raises:
            ConfigurationError: Invalid configuration or dimension mismatch
            EmbeddingError: Embedding batch failed (nothing stored)
            StorageError: Storage write failed (nothing stored)
            CancelledError: Timeout or cancel event interrupted a stage
        """
        started = time.perf_counter()
        cfg = EngineConfig.from_options(config)
        chunker = cfg.build_chunker()
        adapter = self._adapter(cfg.embedding_adapter)
        store = self._store(cfg.storage)
        provenance = provenance or default_provenance(text)
        timeout = self._stage_timeout(timeout)
        timings: dict[str, float] = {}

        stage = EngineStage.CHUNKING
        try:
            stage_started = time.perf_counter()
            chunks = chunker.chunk(text)
            timings[stage.value] = _elapsed_ms(stage_started)

            if chunks:
                stage = EngineStage.EMBEDDING
                stage_started = time.perf_counter()
                vectors = await self._embed(adapter, [chunk.text for chunk in chunks], timeout, cancel_event)
                timings[stage.value] = _elapsed_ms(stage_started)

                stage = EngineStage.STORING
                stage_started = time.perf_counter()
                await run_stage(store.put(chunks, vectors, provenance), stage.value, timeout, cancel_event)
                timings[stage.value] = _elapsed_ms(stage_started)
        except RagLabError as e:
            e.details.setdefault("stage", stage.value)
            e.details.setdefault("status", EngineStage.FAILED.value)
            log_exception_with_context(
                logger,
                f"{__name__}:ingest - Failed in stage {stage.value}",
                e,
                adapter=adapter.name,
                storage=store.name,
                stage=stage.value,
                status=EngineStage.FAILED.value,
            )
            raise

        result = EvalResult(
            count_ingested=len(chunks),
            elapsed_ms=_elapsed_ms(started),
            provenance=provenance,
            config_hash=cfg.config_hash(),
            stage_timings_ms=timings,
        )
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest - Ingested {result.count_ingested} chunks",
            chunker=cfg.chunker,
            adapter=adapter.name,
            storage=store.name,
            elapsed_ms=result.elapsed_ms,
        )
        return result

    async def query(
        self,
        text: str,
        config: ConfigLike = None,
        top_k: int | None = None,
        *,
        expected_chunk_ids: Sequence[str] | None = None,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> EvalResult:
        """
        Retrieve the stored chunks that best match `text`.

        Vector and hybrid retrievers embed the query first; the BM25
        retriever scores the stored texts directly. A configured reranker
        reorders the retrieved matches before scoring.

        Args:
            text: Query text
            config: EngineConfig or mapping of options
            top_k: Number of matches (default: config.top_k); <= 0 gives none
            expected_chunk_ids: Ground truth; when given, retrieval metrics
                are computed in the scoring stage
            timeout: Per-stage timeout in seconds (default from settings)
            cancel_event: Event that cancels the in-flight stage when set

        Returns:
            EvalResult: Ranked matches, count_searched and optional metrics

        Raises:
            ConfigurationError: Invalid configuration or dimension mismatch
            EmbeddingError: Query embedding failed
            StorageError: Storage read failed
            RerankError: Reranker call or answer failed
            CancelledError: Timeout or cancel event interrupted a stage
        """
        started = time.perf_counter()
        cfg = EngineConfig.from_options(config)
        retriever = cfg.build_retriever()
        adapter = self._adapter(cfg.embedding_adapter)
        store = self._store(cfg.storage)
        k = cfg.top_k if top_k is None else top_k
        timeout = self._stage_timeout(timeout)
        timings: dict[str, float] = {}

        stage = EngineStage.EMBEDDING
        try:
            query_vector = None
            if retriever.uses_vectors:
                stage_started = time.perf_counter()
                vectors = await self._embed(adapter, [text], timeout, cancel_event)
                query_vector = vectors[0]
                timings[stage.value] = _elapsed_ms(stage_started)

            stage = EngineStage.QUERYING
            stage_started = time.perf_counter()
            retrieved = await run_stage(
                retriever.retrieve(store, text, query_vector, k), stage.value, timeout, cancel_event
            )
            scored = retrieved.matches
            searched = retrieved.searched
            timings[stage.value] = _elapsed_ms(stage_started)

            if cfg.reranker is not None and scored:
                stage = EngineStage.RERANKING
                stage_started = time.perf_counter()
                reranker = self._reranker(cfg.reranker)
                scored = await run_stage(reranker.rerank(text, scored), stage.value, timeout, cancel_event)
                timings[stage.value] = _elapsed_ms(stage_started)
        except RagLabError as e:
            e.details.setdefault("stage", stage.value)
            e.details.setdefault("status", EngineStage.FAILED.value)
            log_exception_with_context(
                logger,
                f"{__name__}:query - Failed in stage {stage.value}",
                e,
                adapter=adapter.name,
                storage=store.name,
                retriever=retriever.name,
                stage=stage.value,
                status=EngineStage.FAILED.value,
            )
            raise

        stage = EngineStage.SCORING
        stage_started = time.perf_counter()
        matches = [
            Match(
                chunk_id=item.chunk.chunk_id,
                text=item.chunk.text,
                score=item.score,
                rank=rank,
                metadata=dict(item.chunk.metadata),
            )
            for rank, item in enumerate(scored, 1)
        ]
        metrics = None
        if expected_chunk_ids is not None:
            metrics = compute_retrieval_metrics(
                [match.chunk_id for match in matches],
                list(expected_chunk_ids),
                k=max(k, 0),
            )
        timings[stage.value] = _elapsed_ms(stage_started)

        result = EvalResult(
            matches=matches,
            count_searched=searched,
            elapsed_ms=_elapsed_ms(started),
            config_hash=cfg.config_hash(),
            stage_timings_ms=timings,
            retrieval_metrics=metrics,
        )
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:query - Returned {len(matches)} of {searched} records",
            adapter=adapter.name,
            storage=store.name,
            retriever=retriever.name,
            reranker=cfg.reranker,
            top_k=k,
            elapsed_ms=result.elapsed_ms,
        )
        return result

    async def evaluate(
        self,
        dataset: Iterable[EvalSample],
        config: ConfigLike = None,
        top_k: int | None = None,
    ) -> EvaluationReport:
        """
        Query every ground truth sample and average the retrieval metrics.

        Args:
            dataset: EvalDataset or any iterable of EvalSample
            config: EngineConfig or mapping of options
            top_k: Number of matches per query (default: config.top_k)

        Returns:
            EvaluationReport: Per-sample results and mean metrics
        """
        started = time.perf_counter()
        cfg = EngineConfig.from_options(config)

        results: list[EvalResult] = []
        for sample in dataset:
            results.append(
                await self.query(sample.query, cfg, top_k, expected_chunk_ids=sample.expected_chunks)
            )

        mean_metrics = RetrievalMetrics.mean(
            result.retrieval_metrics for result in results if result.retrieval_metrics is not None
        )
        report = EvaluationReport(
            results=results,
            mean_metrics=mean_metrics,
            sample_count=len(results),
            elapsed_ms=_elapsed_ms(started),
            config_hash=cfg.config_hash(),
        )
        logger.info(
            f"{__name__}:evaluate - {report.sample_count} samples, "
            f"mean recall@{mean_metrics.k}={mean_metrics.recall_at_k:.3f}"
        )
        return report
