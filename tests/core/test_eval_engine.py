"""
Test suite for EvaluationEngine ingest/query/evaluate pipelines.

Uses the deterministic reference adapter and the in-memory store unless a
test injects failing collaborators.

System role: Verification of pipeline orchestration and error propagation
"""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest
from langchain_core.language_models import FakeListChatModel
from sqlalchemy.ext.asyncio import async_sessionmaker

from raglab.boundary.vdb import InMemoryVectorStore, SQLVectorStore
from raglab.core.embeddings import ReferenceEmbedding
from raglab.core.engine import EngineConfig, EvaluationEngine, default_provenance
from raglab.core.exceptions import CancelledError, ConfigurationError, EmbeddingError, RerankError, StorageError
from raglab.core.reranking import LLMReranker, SimpleReranker
from raglab.evaluation import EvalDataset, EvalSample
from raglab.models import EngineStage

DOCUMENT = "Cats purr loudly. Dogs bark at night. Birds sing at dawn."
SENTENCE_CONFIG = {"chunker": "sentence"}


class SlowAdapter(ReferenceEmbedding):
    """Reference adapter that blocks until cancelled."""

    name = "slow"

    async def embed(self, texts):
        await asyncio.sleep(10)
        return await super().embed(texts)


class TestIngest:
    """Test suite for EvaluationEngine.ingest()."""

    @pytest.mark.asyncio
    async def test_ingest_should_store_every_chunk(
        self, engine: EvaluationEngine, memory_store: InMemoryVectorStore
    ) -> None:
        # Act
        result = await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        # Assert
        assert result.count_ingested == 3
        assert result.stage == EngineStage.DONE
        assert result.elapsed_ms >= 0
        assert set(result.stage_timings_ms) == {"chunking", "embedding", "storing"}
        assert await memory_store.count() == 3

    @pytest.mark.asyncio
    async def test_ingest_should_default_provenance_to_text_hash(self, engine: EvaluationEngine) -> None:
        result = await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        assert result.provenance == default_provenance(DOCUMENT)
        assert len(result.provenance) == 16

    @pytest.mark.asyncio
    async def test_ingest_should_use_given_provenance(self, engine: EvaluationEngine) -> None:
        result = await engine.ingest(DOCUMENT, SENTENCE_CONFIG, provenance="animals.txt")

        assert result.provenance == "animals.txt"

    @pytest.mark.asyncio
    async def test_ingest_should_skip_embedding_for_empty_chunk_list(self) -> None:
        """Test blank text stores nothing and never calls the adapter."""
        # Arrange
        adapter = ReferenceEmbedding()
        adapter.embed = AsyncMock()
        store = InMemoryVectorStore()
        engine = EvaluationEngine(adapters={"reference": adapter}, stores={"memory": store})

        # Act
        result = await engine.ingest("   ", SENTENCE_CONFIG)

        # Assert
        assert result.count_ingested == 0
        adapter.embed.assert_not_awaited()
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_ingest_should_store_nothing_when_embedding_fails(self) -> None:
        """Test a failed embedding batch leaves storage untouched."""
        # Arrange
        adapter = ReferenceEmbedding()
        adapter.embed = AsyncMock(side_effect=EmbeddingError("provider down", adapter="reference"))
        store = InMemoryVectorStore()
        engine = EvaluationEngine(adapters={"reference": adapter}, stores={"memory": store})

        # Act
        with pytest.raises(EmbeddingError) as exc_info:
            await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        # Assert
        assert exc_info.value.stage == "embedding"
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_ingest_should_reject_malformed_adapter_output(self) -> None:
        adapter = ReferenceEmbedding()
        adapter.embed = AsyncMock(return_value=[[1.0, 2.0, 3.0]])
        engine = EvaluationEngine(adapters={"reference": adapter}, stores={"memory": InMemoryVectorStore()})

        with pytest.raises(EmbeddingError):
            await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

    @pytest.mark.asyncio
    async def test_ingest_should_propagate_storage_error_with_stage(self) -> None:
        store = InMemoryVectorStore()
        store.put = AsyncMock(side_effect=StorageError("disk full", operation="put"))
        engine = EvaluationEngine(adapters={"reference": ReferenceEmbedding()}, stores={"memory": store})

        with pytest.raises(StorageError) as exc_info:
            await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        assert exc_info.value.stage == "storing"
        assert exc_info.value.details["operation"] == "put"

    @pytest.mark.asyncio
    async def test_ingest_should_reject_fixed_chunker_without_size(self, engine: EvaluationEngine) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            await engine.ingest(DOCUMENT, {"chunker": "fixed"})

        assert exc_info.value.details["option"] == "chunk_size"

    @pytest.mark.asyncio
    async def test_ingest_should_reject_unknown_storage(self, engine: EvaluationEngine) -> None:
        with pytest.raises(ConfigurationError):
            await engine.ingest(DOCUMENT, {"chunker": "sentence", "storage": "redis"})

    @pytest.mark.asyncio
    async def test_ingest_should_reject_unknown_adapter(self, engine: EvaluationEngine) -> None:
        with pytest.raises(ConfigurationError):
            await engine.ingest(DOCUMENT, {"chunker": "sentence", "embeddingAdapter": "bogus"})


class TestQuery:
    """Test suite for EvaluationEngine.query()."""

    @pytest.mark.asyncio
    async def test_query_should_return_ingested_chunk_first(self, engine: EvaluationEngine) -> None:
        """Test querying with a chunk's exact text ranks that chunk first."""
        # Arrange
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        # Act
        result = await engine.query("Dogs bark at night.", SENTENCE_CONFIG)

        # Assert
        top = result.matches[0]
        assert top.chunk_id == "c2"
        assert top.text == "Dogs bark at night."
        assert top.rank == 1
        assert top.score == pytest.approx(1.0)
        assert result.count_searched == 3

    @pytest.mark.asyncio
    async def test_query_should_return_at_most_stored(self, engine: EvaluationEngine) -> None:
        """Test top_k=5 against 2 stored chunks returns 2 matches."""
        await engine.ingest("Hello world. How are you?", SENTENCE_CONFIG)

        result = await engine.query("Hello world.", SENTENCE_CONFIG, top_k=5)

        assert len(result.matches) == 2
        assert [m.rank for m in result.matches] == [1, 2]
        assert result.matches[0].score >= result.matches[1].score

    @pytest.mark.asyncio
    async def test_query_should_return_empty_for_empty_store(self, engine: EvaluationEngine) -> None:
        result = await engine.query("anything", SENTENCE_CONFIG)

        assert result.matches == []
        assert result.count_searched == 0

    @pytest.mark.asyncio
    async def test_query_should_default_top_k_from_config(self, engine: EvaluationEngine) -> None:
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        result = await engine.query("Cats purr loudly.", {"chunker": "sentence", "topK": 1})

        assert len(result.matches) == 1

    @pytest.mark.asyncio
    async def test_query_should_compute_metrics_for_expected_ids(self, engine: EvaluationEngine) -> None:
        """Test scoring stage fills retrieval metrics against ground truth."""
        # Arrange
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        # Act
        result = await engine.query(
            "Birds sing at dawn.", SENTENCE_CONFIG, top_k=3, expected_chunk_ids=["c3"]
        )

        # Assert
        metrics = result.retrieval_metrics
        assert metrics is not None
        assert metrics.k == 3
        assert metrics.mean_reciprocal_rank == 1.0
        assert metrics.hit_rate == 1.0
        assert metrics.recall_at_k == 1.0
        assert "scoring" in result.stage_timings_ms

    @pytest.mark.asyncio
    async def test_query_should_omit_metrics_without_expected_ids(self, engine: EvaluationEngine) -> None:
        result = await engine.query("Birds sing at dawn.", SENTENCE_CONFIG)

        assert result.retrieval_metrics is None

    @pytest.mark.asyncio
    async def test_query_should_report_same_config_hash_as_ingest(self, engine: EvaluationEngine) -> None:
        ingested = await engine.ingest(DOCUMENT, SENTENCE_CONFIG)
        queried = await engine.query("Cats purr loudly.", {"chunker": "sentence"})

        assert ingested.config_hash == queried.config_hash

    @pytest.mark.asyncio
    async def test_query_should_work_against_sql_store(self, session_factory: async_sessionmaker) -> None:
        """Test the round trip through the durable store."""
        engine = EvaluationEngine(
            adapters={"reference": ReferenceEmbedding()},
            stores={"sql": SQLVectorStore(session_factory)},
        )
        config = {"chunker": "sentence", "storage": "sql"}

        await engine.ingest(DOCUMENT, config)
        result = await engine.query("Cats purr loudly.", config)

        assert result.matches[0].chunk_id == "c1"
        assert result.count_searched == 3


class TestQueryRetrievalAndReranking:
    """Test suite for retriever and reranker options of EvaluationEngine.query()."""

    @pytest.mark.asyncio
    async def test_query_should_take_count_searched_from_search(self, engine: EvaluationEngine) -> None:
        """Test count_searched is the size of the ranked snapshot, not a second count() call."""
        # Arrange
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)
        store = engine.stores["memory"]
        store.count = AsyncMock(return_value=99)

        # Act
        result = await engine.query("Cats purr loudly.", SENTENCE_CONFIG)

        # Assert
        assert result.count_searched == 3
        store.count.assert_not_called()

    @pytest.mark.asyncio
    async def test_bm25_query_should_skip_embedding(self, engine: EvaluationEngine) -> None:
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)
        adapter = engine.adapters["reference"]
        adapter.embed = AsyncMock(side_effect=AssertionError("query should not be embedded"))

        result = await engine.query("Do dogs bark?", {"chunker": "sentence", "retriever": "bm25"})

        assert [match.chunk_id for match in result.matches] == ["c2"]
        assert result.count_searched == 3
        assert "embedding" not in result.stage_timings_ms
        adapter.embed.assert_not_called()

    @pytest.mark.asyncio
    async def test_hybrid_query_should_rank_exact_text_first(self, engine: EvaluationEngine) -> None:
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        result = await engine.query(
            "Dogs bark at night.",
            {"chunker": "sentence", "retriever": "hybrid", "bm25Weight": 0.3, "vectorWeight": 0.7},
        )

        assert result.matches[0].chunk_id == "c2"
        assert result.count_searched == 3

    @pytest.mark.asyncio
    async def test_simple_reranker_should_reorder_matches(self, engine: EvaluationEngine) -> None:
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        result = await engine.query("Cats purr loudly.", {"chunker": "sentence", "reranker": "simple"}, top_k=3)

        assert result.matches[-1].text == "Cats purr loudly."
        assert [match.rank for match in result.matches] == [1, 2, 3]
        assert "reranking" in result.stage_timings_ms

    @pytest.mark.asyncio
    async def test_injected_reranker_should_decide_final_order(self, memory_store: InMemoryVectorStore) -> None:
        # Arrange
        reranker = LLMReranker(FakeListChatModel(responses=['{"scores": [0.0, 0.0, 1.0]}']))
        engine = EvaluationEngine(
            adapters={"reference": ReferenceEmbedding()},
            stores={"memory": memory_store},
            rerankers={"llm": reranker},
        )
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)
        retrieved = await engine.query("Cats purr loudly.", SENTENCE_CONFIG, top_k=3)

        # Act
        result = await engine.query("Cats purr loudly.", {"chunker": "sentence", "reranker": "llm"}, top_k=3)

        # Assert
        assert result.matches[0].chunk_id == retrieved.matches[2].chunk_id
        assert result.matches[0].score == 1.0

    @pytest.mark.asyncio
    async def test_reranker_should_not_run_without_matches(self, memory_store: InMemoryVectorStore) -> None:
        reranker = SimpleReranker()
        reranker.rerank = AsyncMock(return_value=[])
        engine = EvaluationEngine(
            adapters={"reference": ReferenceEmbedding()},
            stores={"memory": memory_store},
            rerankers={"simple": reranker},
        )

        result = await engine.query("anything", {"chunker": "sentence", "reranker": "simple"})

        assert result.matches == []
        reranker.rerank.assert_not_called()

    @pytest.mark.asyncio
    async def test_rerank_failure_should_report_failed_status(
        self, memory_store: InMemoryVectorStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a failing reranker surfaces as RerankError tagged with stage and failed status."""
        # Arrange
        engine = EvaluationEngine(
            adapters={"reference": ReferenceEmbedding()},
            stores={"memory": memory_store},
            rerankers={"llm": LLMReranker(FakeListChatModel(responses=["not json"]))},
        )
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        # Act
        with caplog.at_level(logging.ERROR, logger="raglab.core.engine.eval_engine"):
            with pytest.raises(RerankError) as exc_info:
                await engine.query("Cats purr loudly.", {"chunker": "sentence", "reranker": "llm"})

        # Assert
        assert exc_info.value.stage == EngineStage.RERANKING.value
        assert exc_info.value.details["status"] == EngineStage.FAILED.value
        record = caplog.records[-1]
        assert record.status == "failed"
        assert record.stage == "reranking"

    @pytest.mark.asyncio
    async def test_ingest_failure_should_log_failed_status(self, caplog: pytest.LogCaptureFixture) -> None:
        store = InMemoryVectorStore()
        store.put = AsyncMock(side_effect=StorageError("disk full", operation="put"))
        engine = EvaluationEngine(adapters={"reference": ReferenceEmbedding()}, stores={"memory": store})

        with caplog.at_level(logging.ERROR, logger="raglab.core.engine.eval_engine"):
            with pytest.raises(StorageError):
                await engine.ingest(DOCUMENT, SENTENCE_CONFIG)

        assert caplog.records[-1].status == "failed"
        assert caplog.records[-1].error_type == "StorageError"

    @pytest.mark.asyncio
    async def test_query_should_reject_unknown_retriever(self, engine: EvaluationEngine) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            await engine.query("anything", {"chunker": "sentence", "retriever": "dense"})

        assert exc_info.value.details["option"] == "retriever"

    @pytest.mark.asyncio
    async def test_query_should_reject_unknown_reranker(self, engine: EvaluationEngine) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            await engine.query("anything", {"chunker": "sentence", "reranker": "cross-encoder"})

        assert exc_info.value.details["option"] == "reranker"


class TestCancellation:
    """Test suite for timeouts and cancel events."""

    @pytest.mark.asyncio
    async def test_ingest_should_raise_cancelled_error_on_timeout(self, memory_store: InMemoryVectorStore) -> None:
        """Test a stage exceeding the timeout is cancelled and nothing is stored."""
        engine = EvaluationEngine(adapters={"slow": SlowAdapter()}, stores={"memory": memory_store})

        with pytest.raises(CancelledError) as exc_info:
            await engine.ingest(DOCUMENT, {"chunker": "sentence", "embeddingAdapter": "slow"}, timeout=0.05)

        assert exc_info.value.stage == "embedding"
        assert await memory_store.count() == 0

    @pytest.mark.asyncio
    async def test_ingest_should_raise_cancelled_error_when_event_set(self, memory_store: InMemoryVectorStore) -> None:
        # Arrange
        engine = EvaluationEngine(adapters={"slow": SlowAdapter()}, stores={"memory": memory_store})
        cancel_event = asyncio.Event()
        asyncio.get_running_loop().call_later(0.05, cancel_event.set)

        # Act
        with pytest.raises(CancelledError) as exc_info:
            await engine.ingest(
                DOCUMENT,
                {"chunker": "sentence", "embeddingAdapter": "slow"},
                cancel_event=cancel_event,
            )

        # Assert
        assert exc_info.value.stage == "embedding"
        assert await memory_store.count() == 0

    @pytest.mark.asyncio
    async def test_query_should_not_start_when_already_cancelled(self, engine: EvaluationEngine) -> None:
        cancel_event = asyncio.Event()
        cancel_event.set()

        with pytest.raises(CancelledError):
            await engine.query("Cats purr loudly.", SENTENCE_CONFIG, cancel_event=cancel_event)

    @pytest.mark.asyncio
    async def test_task_cancellation_should_propagate_asyncio_cancelled_error(self) -> None:
        """Test cancelling the calling task is not converted into a raglab error."""
        engine = EvaluationEngine(adapters={"slow": SlowAdapter()}, stores={"memory": InMemoryVectorStore()})
        task = asyncio.create_task(
            engine.ingest(DOCUMENT, {"chunker": "sentence", "embeddingAdapter": "slow"}, timeout=5)
        )
        await asyncio.sleep(0.01)

        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_ingest_should_finish_within_generous_timeout(self, engine: EvaluationEngine) -> None:
        result = await engine.ingest(DOCUMENT, SENTENCE_CONFIG, timeout=5, cancel_event=asyncio.Event())

        assert result.count_ingested == 3


class TestEvaluate:
    """Test suite for EvaluationEngine.evaluate()."""

    @pytest.mark.asyncio
    async def test_evaluate_should_average_metrics_over_samples(self, engine: EvaluationEngine) -> None:
        # Arrange
        await engine.ingest(DOCUMENT, SENTENCE_CONFIG)
        dataset = EvalDataset()
        dataset.add_sample(EvalSample(query="Cats purr loudly.", expected_chunks=["c1"]))
        dataset.add_sample(EvalSample(query="Birds sing at dawn.", expected_chunks=["c3"]))

        # Act
        report = await engine.evaluate(dataset, SENTENCE_CONFIG, top_k=1)

        # Assert
        assert report.sample_count == 2
        assert len(report.results) == 2
        assert report.mean_metrics.hit_rate == 1.0
        assert report.mean_metrics.precision_at_k == 1.0

    @pytest.mark.asyncio
    async def test_evaluate_should_return_zero_metrics_for_empty_dataset(self, engine: EvaluationEngine) -> None:
        report = await engine.evaluate(EvalDataset(), SENTENCE_CONFIG)

        assert report.sample_count == 0
        assert report.mean_metrics.hit_rate == 0.0


class TestEngineConfig:
    """Test suite for EngineConfig."""

    def test_from_options_should_accept_camel_and_snake_case(self) -> None:
        camel = EngineConfig.from_options({"chunker": "sliding", "chunkSize": 4, "chunkStride": 2})
        snake = EngineConfig.from_options({"chunker": "sliding", "chunk_size": 4, "chunk_stride": 2})

        assert camel == snake
        assert camel.config_hash() == snake.config_hash()

    def test_from_options_should_apply_settings_defaults(self) -> None:
        config = EngineConfig.from_options(None)

        assert config.chunker == "sentence"
        assert config.embedding_adapter == "reference"
        assert config.storage == "memory"
        assert config.top_k == 5

    def test_from_options_should_reject_unknown_option(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig.from_options({"chunker": "sentence", "overlap": 3})

    def test_from_options_should_reject_bad_type(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig.from_options({"chunker": "fixed", "chunkSize": "large"})

    def test_config_hash_should_change_with_options(self) -> None:
        small = EngineConfig.from_options({"chunker": "fixed", "chunkSize": 3})
        large = EngineConfig.from_options({"chunker": "fixed", "chunkSize": 30})

        assert small.config_hash() != large.config_hash()
        assert len(small.config_hash()) == 64

    def test_from_options_should_default_to_vector_retrieval_without_reranker(self) -> None:
        config = EngineConfig.from_options(None)

        assert config.retriever == "vector"
        assert config.reranker is None
        assert (config.bm25_weight, config.vector_weight) == (0.5, 0.5)

    @pytest.mark.parametrize("value", [None, "", "none", "NONE"])
    def test_from_options_should_read_none_as_no_reranker(self, value) -> None:
        assert EngineConfig.from_options({"reranker": value}).reranker is None

    def test_from_options_should_reject_negative_weight(self) -> None:
        with pytest.raises(ConfigurationError):
            EngineConfig.from_options({"retriever": "hybrid", "bm25Weight": -1})

    def test_config_hash_should_change_with_retriever(self) -> None:
        vector = EngineConfig.from_options({"retriever": "vector"})
        bm25 = EngineConfig.from_options({"retriever": "bm25"})

        assert vector.config_hash() != bm25.config_hash()
