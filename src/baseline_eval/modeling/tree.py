"""
Majority-label baseline "tree".

The tree never splits: it predicts the most frequent training label for every
query and ignores feature values.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Protocol

from loguru import logger

from baseline_eval.data.dataset import LabeledRecord
from baseline_eval.errors import EmptyInputError


class Labeler(Protocol):
    def label(self, features: Mapping[str, float]) -> str: ...


class TreeBuilder(Protocol):
    def build_tree(self, examples: Iterable[LabeledRecord]) -> "DecisionTree": ...


@dataclass(frozen=True)
class DecisionTree:
    most_frequent_label: str

    def label(self, features: Mapping[str, float]) -> str:
        return self.most_frequent_label


class TreeLabeler:
    def __init__(self, tree: DecisionTree):
        self._tree = tree

    @property
    def tree(self) -> DecisionTree:
        return self._tree

    def label(self, features: Mapping[str, float]) -> str:
        return self._tree.label(features)


def majority_label(labels: Iterable[str]) -> tuple[str, int]:
    """
    Most frequent label and its count.

    Ties go to the label seen first: Counter keeps insertion order and
    most_common(1) returns the first of equal counts.
    """
    counts = Counter(labels)
    if not counts:
        raise EmptyInputError("Cannot build a tree from an empty training set.")
    label, count = counts.most_common(1)[0]
    return label, count


class MajorityTreeBuilder:
    def build_tree(self, examples: Iterable[LabeledRecord]) -> DecisionTree:
        label, count = majority_label(example.label for example in examples)
        logger.debug(f"Majority label '{label}' ({count} occurrences)")
        return DecisionTree(label)
