from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_DATA_PATH = "data.csv"
DEFAULT_LABEL_COLUMN = "LabelColumn"
DEFAULT_FOLDS = 5
REMAINDER_POLICIES = ("distribute", "drop")
EXCLUSION_POLICIES = ("index", "value")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _resolve_data_path() -> Path:
    return Path(os.getenv("BASELINE_EVAL_DATA") or DEFAULT_DATA_PATH)


def _resolve_label_column() -> str:
    return os.getenv("BASELINE_EVAL_LABEL_COLUMN") or DEFAULT_LABEL_COLUMN


def _resolve_log_level() -> str:
    return (os.getenv("BASELINE_EVAL_LOG_LEVEL") or "WARNING").upper()


@dataclass(frozen=True)
class EvalConfig:
    """Settings for one baseline evaluation run."""

    data_path: Path
    label_column: str
    delimiter: str = ","
    folds: int = DEFAULT_FOLDS
    remainder: str = "distribute"
    exclusion: str = "index"
    output_json: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.folds < 2:
            raise ValueError(f"folds must be at least 2, got {self.folds}")
        if self.remainder not in REMAINDER_POLICIES:
            raise ValueError(f"remainder must be one of: {', '.join(REMAINDER_POLICIES)}")
        if self.exclusion not in EXCLUSION_POLICIES:
            raise ValueError(f"exclusion must be one of: {', '.join(EXCLUSION_POLICIES)}")
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_env(cls) -> "EvalConfig":
        return cls(
            data_path=_resolve_data_path(),
            label_column=_resolve_label_column(),
            log_level=_resolve_log_level(),
        )

    @classmethod
    def from_args(
        cls,
        data_path: str | Path | None = None,
        label_column: str | None = None,
        output_json: str | Path | None = None,
        **overrides,
    ) -> "EvalConfig":
        base = cls.from_env()
        if data_path:
            overrides["data_path"] = Path(data_path)
        if label_column:
            overrides["label_column"] = label_column
        if output_json:
            overrides["output_json"] = Path(output_json)
        return base.with_overrides(**overrides)

    def with_overrides(self, **overrides) -> "EvalConfig":
        values = {key: value for key, value in overrides.items() if value is not None}
        if "log_level" in values:
            values["log_level"] = str(values["log_level"]).upper()
        return replace(self, **values)
