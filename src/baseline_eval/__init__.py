"""Majority-label baseline evaluation (accuracy + K-fold cross-validation)."""

from baseline_eval.config import EvalConfig
from baseline_eval.errors import (
    BaselineEvalError,
    SchemaError,
    ParseError,
    CardinalityError,
    EmptyInputError,
)

# Dataset
from baseline_eval.data.dataset import (
    LabeledRecord,
    UnlabeledRecord,
    LabeledDataset,
    UnlabeledDataset,
    load_labeled,
    load_unlabeled,
)

# Modeling
from baseline_eval.modeling.tree import (
    DecisionTree,
    TreeLabeler,
    MajorityTreeBuilder,
    majority_label,
)
from baseline_eval.modeling.cross_validation import (
    Fold,
    CrossValidationResult,
    build_folds,
    make_predictions,
    make_cross_predictions,
    cross_validate,
)

# Evaluation
from baseline_eval.evaluate import EvalResult, AccuracyEvaluator, evaluate_accuracy
from baseline_eval.pipeline import BaselineReport, evaluate_dataset, run_baseline, format_report

__all__ = [
    # Config
    "EvalConfig",
    # Errors
    "BaselineEvalError",
    "SchemaError",
    "ParseError",
    "CardinalityError",
    "EmptyInputError",
    # Dataset
    "LabeledRecord",
    "UnlabeledRecord",
    "LabeledDataset",
    "UnlabeledDataset",
    "load_labeled",
    "load_unlabeled",
    # Modeling
    "DecisionTree",
    "TreeLabeler",
    "MajorityTreeBuilder",
    "majority_label",
    "Fold",
    "CrossValidationResult",
    "build_folds",
    "make_predictions",
    "make_cross_predictions",
    "cross_validate",
    # Evaluation
    "EvalResult",
    "AccuracyEvaluator",
    "evaluate_accuracy",
    "BaselineReport",
    "evaluate_dataset",
    "run_baseline",
    "format_report",
]
