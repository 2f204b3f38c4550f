"""
Prediction helpers and K-fold cross-validation for tree builders.

Usage:
    from baseline_eval.modeling.cross_validation import cross_validate
    from baseline_eval.modeling.tree import MajorityTreeBuilder

    result = cross_validate(MajorityTreeBuilder(), dataset, k=5)
    held_out = dataset.subset(result.held_out_indices)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Literal, Mapping, Sequence

import numpy as np
from loguru import logger
from sklearn.model_selection import KFold

from baseline_eval.config import DEFAULT_FOLDS
from baseline_eval.data.dataset import LabeledRecord
from baseline_eval.errors import EmptyInputError
from baseline_eval.modeling.tree import Labeler, TreeBuilder, TreeLabeler


@dataclass
class Fold:
    index: int
    test_indices: np.ndarray
    train_indices: np.ndarray

    @property
    def test_size(self) -> int:
        return int(len(self.test_indices))


@dataclass
class CrossValidationResult:
    predictions: list[str]
    held_out_indices: np.ndarray
    folds: list[Fold] = field(default_factory=list)

    @property
    def fold_sizes(self) -> list[int]:
        return [fold.test_size for fold in self.folds]


def make_predictions(labeler: Labeler, unlabeled_examples: Iterable) -> Iterator[str]:
    """Yield one label per record, in input order."""
    for example in unlabeled_examples:
        features: Mapping[str, float] = getattr(example, "features", example)
        yield labeler.label(features)


def build_folds(
    n_records: int,
    k: int = DEFAULT_FOLDS,
    remainder: Literal["distribute", "drop"] = "distribute",
) -> list[Fold]:
    """
    Partition record indices into k contiguous test blocks.

    "drop" slices blocks of n_records // k and never tests the trailing
    n_records % k records. "distribute" follows sklearn's unshuffled KFold:
    the first n_records % k folds hold one extra record, so every index is
    tested exactly once.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")
    if n_records < k:
        raise EmptyInputError(f"Need at least {k} records for {k}-fold cross-validation, got {n_records}")

    all_indices = np.arange(n_records)
    if remainder == "drop":
        fold_size = n_records // k
        folds = []
        for i in range(k):
            test_idx = all_indices[i * fold_size:(i + 1) * fold_size]
            folds.append(Fold(index=i, test_indices=test_idx, train_indices=np.setdiff1d(all_indices, test_idx)))
        return folds
    if remainder == "distribute":
        splitter = KFold(n_splits=k, shuffle=False)
        return [
            Fold(index=i, test_indices=test_idx, train_indices=train_idx)
            for i, (train_idx, test_idx) in enumerate(splitter.split(all_indices))
        ]
    raise ValueError("remainder must be 'distribute' or 'drop'")


def _training_set(
    records: Sequence[LabeledRecord],
    fold: Fold,
    exclusion: Literal["index", "value"],
) -> list[LabeledRecord]:
    if exclusion == "index":
        return [records[i] for i in fold.train_indices]
    if exclusion == "value":
        # Drops every record equal to any held-out record, duplicates outside the fold included.
        test_set = [records[i] for i in fold.test_indices]
        return [record for record in records if record not in test_set]
    raise ValueError("exclusion must be 'index' or 'value'")


def _iter_fold_predictions(
    builder: TreeBuilder,
    records: Sequence[LabeledRecord],
    folds: Sequence[Fold],
    exclusion: Literal["index", "value"],
) -> Iterator[tuple[int, str]]:
    for fold in folds:
        training_set = _training_set(records, fold, exclusion)
        logger.debug(f"Fold {fold.index}: test={fold.test_size} train={len(training_set)}")
        labeler = TreeLabeler(builder.build_tree(training_set))
        for i in fold.test_indices:
            yield int(i), labeler.label(records[i].features)


def make_cross_predictions(
    builder: TreeBuilder,
    labeled_examples: Iterable[LabeledRecord],
    k: int = DEFAULT_FOLDS,
    remainder: Literal["distribute", "drop"] = "distribute",
    exclusion: Literal["index", "value"] = "index",
) -> Iterator[str]:
    """Yield held-out predictions, fold 0 first, test-set order within each fold."""
    records = list(labeled_examples)
    folds = build_folds(len(records), k=k, remainder=remainder)
    for _, prediction in _iter_fold_predictions(builder, records, folds, exclusion):
        yield prediction


def cross_validate(
    builder: TreeBuilder,
    labeled_examples: Iterable[LabeledRecord],
    k: int = DEFAULT_FOLDS,
    remainder: Literal["distribute", "drop"] = "distribute",
    exclusion: Literal["index", "value"] = "index",
) -> CrossValidationResult:
    """
    Run K-fold cross-validation and keep track of which records were held out.

    Args:
        builder: Builds a fresh tree per fold
        labeled_examples: Labeled records in dataset order
        k: Number of folds
        remainder: "distribute" or "drop" (see build_folds)
        exclusion: "index" trains on the fold complement; "value" also drops
            records equal by value to any held-out record

    Returns:
        CrossValidationResult whose predictions line up with held_out_indices
    """
    records = list(labeled_examples)
    folds = build_folds(len(records), k=k, remainder=remainder)
    pairs = list(_iter_fold_predictions(builder, records, folds, exclusion))
    held_out = np.asarray([index for index, _ in pairs], dtype=np.int64)
    predictions = [prediction for _, prediction in pairs]
    skipped = len(records) - len(predictions)
    if skipped:
        logger.info(f"{skipped} trailing record(s) were not assigned to any test fold")
    return CrossValidationResult(predictions=predictions, held_out_indices=held_out, folds=folds)
