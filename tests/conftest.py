# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from baseline_eval.data.dataset import LabeledDataset, LabeledRecord
from baseline_eval.modeling.tree import MajorityTreeBuilder


@pytest.fixture(autouse=True)
def disable_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


def write_csv(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def scenario_csv(tmp_path: Path) -> Path:
    """Three rows, majority label X."""
    return write_csv(
        tmp_path / "scenario.csv",
        ["a,b,label", "1,2,X", "3,4,X", "5,6,Y"],
    )


@pytest.fixture
def ten_row_csv(tmp_path: Path) -> Path:
    """
    Six A rows followed by four B rows.

    5-fold CV (2 rows per fold): folds 0-2 hold A rows and train on 4 A / 4 B,
    where A wins the tie by appearing first; folds 3-4 hold B rows and train on
    6 A / 2 B. CV accuracy is therefore 6 / 10.
    """
    lines = ["x,y,LabelColumn"]
    for i in range(10):
        label = "A" if i < 6 else "B"
        lines.append(f"{i},{i * 0.5},{label}")
    return write_csv(tmp_path / "data.csv", lines)


def make_dataset(labels: list[str], features: list[dict[str, float]] | None = None) -> LabeledDataset:
    if features is None:
        features = [{"a": float(i)} for i in range(len(labels))]
    records = tuple(LabeledRecord(f, label) for f, label in zip(features, labels))
    columns = tuple(features[0].keys()) + ("label",) if features else ("label",)
    return LabeledDataset(records=records, columns=columns, label_column="label")


class RecordingBuilder:
    """Majority builder that remembers every training set it was given."""

    def __init__(self):
        self._inner = MajorityTreeBuilder()
        self.training_sets: list[list[LabeledRecord]] = []

    def build_tree(self, examples):
        examples = list(examples)
        self.training_sets.append(examples)
        return self._inner.build_tree(examples)


@pytest.fixture
def recording_builder() -> RecordingBuilder:
    return RecordingBuilder()
