"""Tests for the Chunk model and EvalResult serialisation."""

import pytest
from pydantic import ValidationError

from raglab.evaluation.models import RetrievalMetrics
from raglab.models import Chunk, EngineStage, EvalResult, Match, make_chunk


class TestChunkModel:
    """Test Chunk Pydantic model validation and serialization."""

    def test_make_chunk_should_derive_id_from_position(self) -> None:
        chunk = make_chunk("text", 4)

        assert chunk.chunk_id == "c5"
        assert chunk.text == "text"
        assert chunk.metadata == {}

    def test_chunk_should_be_immutable(self) -> None:
        chunk = make_chunk("text", 0)

        with pytest.raises(ValidationError):
            chunk.text = "changed"

    def test_chunk_should_accept_camel_case_keys(self) -> None:
        chunk = Chunk.model_validate({"chunkId": "c1", "text": "hi", "metadata": {"page": 2}})

        assert chunk.chunk_id == "c1"
        assert chunk.model_dump(by_alias=True) == {"chunkId": "c1", "text": "hi", "metadata": {"page": 2}}


class TestEvalResultModel:
    """Test EvalResult wire shape."""

    def test_eval_result_should_dump_camel_case(self) -> None:
        """Test the serialised result uses camelCase keys."""
        # Arrange
        result = EvalResult(
            matches=[Match(chunk_id="c1", text="Hello.", score=0.9, rank=1)],
            count_searched=3,
            elapsed_ms=1.5,
            config_hash="abc",
        )

        # Act
        payload = result.model_dump(by_alias=True)

        # Assert
        assert payload["matches"][0]["chunkId"] == "c1"
        assert payload["matches"][0]["rank"] == 1
        assert payload["countSearched"] == 3
        assert payload["countIngested"] is None
        assert payload["elapsedMs"] == 1.5
        assert payload["stage"] == EngineStage.DONE

    def test_eval_result_should_carry_retrieval_metrics(self) -> None:
        result = EvalResult(
            elapsed_ms=0.0,
            config_hash="abc",
            retrieval_metrics=RetrievalMetrics(k=3, hit_rate=1.0),
        )

        assert result.retrieval_metrics.hit_rate == 1.0
        assert result.matched_chunk_ids == []

    def test_match_should_reject_rank_below_one(self) -> None:
        with pytest.raises(ValidationError):
            Match(chunk_id="c1", text="x", score=0.1, rank=0)
