"""
End-to-end baseline run: load, fit, predict, score, cross-validate.

Usage:
    from baseline_eval.config import EvalConfig
    from baseline_eval.pipeline import run_baseline, format_report

    report = run_baseline(EvalConfig.from_env())
    print(format_report(report))
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from loguru import logger

from baseline_eval.config import DEFAULT_FOLDS, EvalConfig
from baseline_eval.data.dataset import LabeledDataset, load_labeled
from baseline_eval.evaluate import AccuracyEvaluator, Evaluator
from baseline_eval.modeling.cross_validation import cross_validate, make_predictions
from baseline_eval.modeling.tree import MajorityTreeBuilder, TreeBuilder, TreeLabeler


@dataclass
class BaselineReport:
    """Result of one baseline evaluation run."""

    training_accuracy: float
    cross_validation_accuracy: float
    majority_label: str
    n_records: int
    n_cross_predictions: int
    fold_sizes: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def evaluate_dataset(
    dataset: LabeledDataset,
    folds: int = DEFAULT_FOLDS,
    remainder: str = "distribute",
    exclusion: str = "index",
    builder: TreeBuilder | None = None,
    evaluator: Evaluator | None = None,
) -> BaselineReport:
    builder = builder or MajorityTreeBuilder()
    evaluator = evaluator or AccuracyEvaluator()

    # Training accuracy: one tree on the full dataset, scored on the same rows.
    tree = builder.build_tree(dataset)
    labeler = TreeLabeler(tree)
    predictions = make_predictions(labeler, dataset.unlabeled())
    training_accuracy = evaluator.evaluate_predictions(dataset, predictions)
    logger.info(f"Training accuracy: {training_accuracy:.4f} (label '{tree.label({})}')")

    # Cross-validation accuracy: scored only against the records that were held out.
    cv = cross_validate(builder, dataset, k=folds, remainder=remainder, exclusion=exclusion)
    held_out = dataset.subset(cv.held_out_indices)
    cross_validation_accuracy = evaluator.evaluate_predictions(held_out, cv.predictions)
    logger.info(f"Cross-validation accuracy: {cross_validation_accuracy:.4f} over {len(held_out)} records")

    return BaselineReport(
        training_accuracy=training_accuracy,
        cross_validation_accuracy=cross_validation_accuracy,
        majority_label=tree.label({}),
        n_records=len(dataset),
        n_cross_predictions=len(cv.predictions),
        fold_sizes=cv.fold_sizes,
    )


def run_baseline(config: EvalConfig) -> BaselineReport:
    logger.info(f"Loading {config.data_path} (label column '{config.label_column}')")
    dataset = load_labeled(config.data_path, config.label_column, delimiter=config.delimiter)
    return evaluate_dataset(
        dataset,
        folds=config.folds,
        remainder=config.remainder,
        exclusion=config.exclusion,
    )


def format_report(report: BaselineReport) -> str:
    return (
        f"Training Accuracy: {report.training_accuracy:.2f}\n"
        f"Cross-Validation Accuracy: {report.cross_validation_accuracy:.2f}"
    )
