from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from sklearn.metrics import accuracy_score

from baseline_eval.data.dataset import LabeledRecord
from baseline_eval.errors import CardinalityError, EmptyInputError


@dataclass
class EvalResult:
    metrics: dict[str, float]

    @property
    def accuracy(self) -> float:
        return self.metrics["accuracy"]


class Evaluator(Protocol):
    def evaluate_predictions(self, labeled_examples: Iterable[LabeledRecord], predictions: Iterable[str]) -> float: ...


def evaluate_accuracy(labeled_examples: Iterable[LabeledRecord], predictions: Iterable[str]) -> EvalResult:
    y_true = [example.label for example in labeled_examples]
    y_pred = list(predictions)
    if len(y_true) != len(y_pred):
        raise CardinalityError(expected=len(y_true), actual=len(y_pred))
    if not y_true:
        raise EmptyInputError("Cannot compute accuracy over zero records.")

    correct = int(accuracy_score(y_true, y_pred, normalize=False))
    metrics = {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "correct": float(correct),
        "total": float(len(y_true)),
    }
    return EvalResult(metrics=metrics)


class AccuracyEvaluator:
    """Fraction of predictions that exactly equal the ground-truth label."""

    def evaluate_predictions(self, labeled_examples: Iterable[LabeledRecord], predictions: Iterable[str]) -> float:
        return evaluate_accuracy(labeled_examples, predictions).accuracy
