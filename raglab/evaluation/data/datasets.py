"""
Ground truth dataset management for retrieval evaluation.

Schema:
- query: Text to retrieve for
- expected_chunks: Chunk IDs that should be retrieved (c1, c2, ...)
- provenance: Optional document/batch the expected chunks belong to
- category: Free-form topic classification

Usage:
    ds = EvalDataset.from_json("ground_truth.json")
    for sample in ds:
        print(sample.query, sample.expected_chunks)
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class EvalSample:
    """Single ground truth evaluation sample."""

    query: str
    expected_chunks: list[str]
    provenance: str | None = None
    category: str = "general"
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "EvalSample":
        """Create sample from dictionary."""
        return EvalSample(**data)


@dataclass
class EvalDataset:
    """Container for ground truth evaluation samples."""

    samples: list[EvalSample] = field(default_factory=list)

    def add_sample(self, sample: EvalSample) -> None:
        """Add a sample to dataset."""
        self.samples.append(sample)

    def get_by_category(self, category: str) -> list[EvalSample]:
        """Filter by category."""
        return [s for s in self.samples if s.category == category]

    def save_json(self, path: Path | str) -> None:
        """Save dataset to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "metadata": {"total_samples": len(self.samples)},
            "samples": [s.to_dict() for s in self.samples],
        }

        with open(path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info(f"{__name__}:save_json - Saved {len(self.samples)} samples")

    @staticmethod
    def from_json(path: Path | str) -> "EvalDataset":
        """Load dataset from JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Ground truth file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        dataset = EvalDataset()
        for sample_data in data.get("samples", []):
            dataset.add_sample(EvalSample.from_dict(sample_data))

        logger.info(f"{__name__}:from_json - Loaded {len(dataset.samples)} samples")
        return dataset

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)
