from __future__ import annotations

import pytest

from baseline_eval.errors import CardinalityError, EmptyInputError
from baseline_eval.evaluate import AccuracyEvaluator, evaluate_accuracy
from conftest import make_dataset


@pytest.fixture
def evaluator() -> AccuracyEvaluator:
    return AccuracyEvaluator()


def test_perfect_predictions_score_one(evaluator):
    dataset = make_dataset(["A", "B", "C"])

    assert evaluator.evaluate_predictions(dataset, ["A", "B", "C"]) == 1.0


def test_no_matches_score_zero(evaluator):
    dataset = make_dataset(["A", "B", "C"])

    assert evaluator.evaluate_predictions(dataset, ["B", "C", "A"]) == 0.0


def test_partial_matches(evaluator):
    dataset = make_dataset(["X", "X", "Y"])
    accuracy = evaluator.evaluate_predictions(dataset, iter(["X", "X", "X"]))

    assert accuracy == pytest.approx(2 / 3)
    assert 0.0 <= accuracy <= 1.0


def test_comparison_is_exact_string_equality(evaluator):
    dataset = make_dataset(["yes", "Yes", "yes "])

    assert evaluator.evaluate_predictions(dataset, ["yes", "yes", "yes"]) == pytest.approx(1 / 3)


def test_length_mismatch_raises_before_scoring(evaluator):
    dataset = make_dataset(["A"] * 10)

    with pytest.raises(CardinalityError) as excinfo:
        evaluator.evaluate_predictions(dataset, ["A"] * 9)

    assert excinfo.value.expected == 10
    assert excinfo.value.actual == 9


def test_zero_records_cannot_be_scored(evaluator):
    with pytest.raises(EmptyInputError):
        evaluator.evaluate_predictions(make_dataset([]), [])


def test_evaluate_accuracy_reports_counts():
    result = evaluate_accuracy(make_dataset(["A", "B", "B", "B"]), ["B", "B", "B", "B"])

    assert result.accuracy == pytest.approx(0.75)
    assert result.metrics["correct"] == 3
    assert result.metrics["total"] == 4
