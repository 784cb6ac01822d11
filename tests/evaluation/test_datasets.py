"""Tests for ground truth dataset handling."""

from pathlib import Path

import pytest

from raglab.evaluation import EvalDataset, EvalSample


@pytest.fixture
def dataset() -> EvalDataset:
    ds = EvalDataset()
    ds.add_sample(EvalSample(query="What purrs?", expected_chunks=["c1"], category="animals"))
    ds.add_sample(EvalSample(query="When do birds sing?", expected_chunks=["c3"], provenance="doc"))
    return ds


class TestEvalDataset:
    """Test EvalDataset container behavior."""

    def test_dataset_should_iterate_samples_in_order(self, dataset: EvalDataset) -> None:
        assert len(dataset) == 2
        assert [s.query for s in dataset] == ["What purrs?", "When do birds sing?"]

    def test_get_by_category_should_filter(self, dataset: EvalDataset) -> None:
        assert [s.query for s in dataset.get_by_category("animals")] == ["What purrs?"]
        assert len(dataset.get_by_category("general")) == 1

    def test_save_and_load_should_preserve_samples(self, dataset: EvalDataset, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "ground_truth.json"

        dataset.save_json(path)
        loaded = EvalDataset.from_json(path)

        assert loaded.samples == dataset.samples

    def test_from_json_should_raise_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            EvalDataset.from_json(tmp_path / "missing.json")
