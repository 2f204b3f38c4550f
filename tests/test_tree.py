from __future__ import annotations

import pytest

from baseline_eval.errors import EmptyInputError
from baseline_eval.modeling.tree import DecisionTree, MajorityTreeBuilder, TreeLabeler, majority_label
from conftest import make_dataset


def test_majority_label_is_most_frequent():
    dataset = make_dataset(["B", "A", "B", "C", "B", "A"])
    tree = MajorityTreeBuilder().build_tree(dataset)

    assert tree == DecisionTree("B")


def test_tie_goes_to_first_seen_label():
    assert majority_label(["Y", "X", "X", "Y"]) == ("Y", 2)
    assert majority_label(["X", "Y", "Y", "X"]) == ("X", 2)


def test_tie_break_is_reproducible():
    labels = ["c", "b", "a", "a", "b", "c"]
    results = {MajorityTreeBuilder().build_tree(make_dataset(labels)).label({}) for _ in range(20)}

    assert results == {"c"}


def test_labels_are_case_sensitive():
    assert majority_label(["x", "X", "X"]) == ("X", 2)


def test_empty_training_set_raises():
    with pytest.raises(EmptyInputError):
        MajorityTreeBuilder().build_tree([])


def test_builder_accepts_generators():
    dataset = make_dataset(["A", "B", "B"])
    tree = MajorityTreeBuilder().build_tree(record for record in dataset)

    assert tree.label({}) == "B"


def test_labeler_ignores_features():
    labeler = TreeLabeler(DecisionTree("X"))

    assert labeler.label({}) == "X"
    assert labeler.label({"a": 1.0, "b": -5.0}) == "X"
    assert labeler.label({"unrelated": float("nan")}) == "X"
    assert labeler.tree.most_frequent_label == "X"
