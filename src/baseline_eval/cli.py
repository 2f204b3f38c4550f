from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from baseline_eval.config import EXCLUSION_POLICIES, REMAINDER_POLICIES, EvalConfig
from baseline_eval.errors import BaselineEvalError
from baseline_eval.logger import configure_logging
from baseline_eval.pipeline import format_report, run_baseline


def cmd_evaluate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        config = _config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config.log_level)

    try:
        report = run_baseline(config)
    except BaselineEvalError as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        return 1

    print(format_report(report))
    if config.output_json:
        output_path = Path(config.output_json)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(report.to_dict(), indent=2))
    return 0


def _config_from_args(args: argparse.Namespace) -> EvalConfig:
    return EvalConfig.from_args(
        data_path=args.data,
        label_column=args.label_column,
        output_json=args.output_json,
        delimiter=args.delimiter,
        folds=args.folds,
        remainder=args.remainder,
        exclusion=args.exclusion,
        log_level=args.log_level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Majority-label baseline: training and cross-validation accuracy")
    parser.add_argument("--data", default="", help="Labeled CSV (default: $BASELINE_EVAL_DATA or data.csv)")
    parser.add_argument(
        "--label-column",
        default="",
        help="Label column name (default: $BASELINE_EVAL_LABEL_COLUMN or LabelColumn)",
    )
    parser.add_argument("--delimiter", default=None, help="Field separator (default: ',')")
    parser.add_argument("--folds", type=int, default=None, help="Number of cross-validation folds (default: 5)")
    parser.add_argument(
        "--remainder",
        choices=list(REMAINDER_POLICIES),
        default=None,
        help="distribute: leftover records join the first folds; drop: leftovers are never tested",
    )
    parser.add_argument(
        "--exclusion",
        choices=list(EXCLUSION_POLICIES),
        default=None,
        help="index: train on the fold complement; value: also drop duplicates of held-out rows",
    )
    parser.add_argument("--output-json", default="", help="Optional path for a JSON report")
    parser.add_argument("--log-level", default=None, help="loguru level (default: $BASELINE_EVAL_LOG_LEVEL or WARNING)")
    parser.set_defaults(func=cmd_evaluate)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args, parser)


if __name__ == "__main__":
    sys.exit(main())
