"""
Tabular datasets for baseline evaluation.

Loads a delimited text file whose first line is the header into immutable,
ordered record sequences. Labeled datasets keep one designated column as a
free-form string label; every other column must parse as a float.

Usage:
    from baseline_eval.data.dataset import load_labeled

    dataset = load_labeled("data.csv", label_column="LabelColumn")
    unlabeled = dataset.unlabeled()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence, overload

import polars as pl
from loguru import logger

from baseline_eval.errors import ParseError, SchemaError


# =============================================================================
# Records
# =============================================================================

def _freeze(features: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({str(name): float(value) for name, value in features.items()})


@dataclass(frozen=True, eq=False)
class UnlabeledRecord:
    """Feature mapping for one row."""

    features: Mapping[str, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", _freeze(self.features))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnlabeledRecord):
            return NotImplemented
        return dict(self.features) == dict(other.features)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.features.items())))


@dataclass(frozen=True, eq=False)
class LabeledRecord:
    """Feature mapping for one row plus its ground-truth label."""

    features: Mapping[str, float]
    label: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", _freeze(self.features))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabeledRecord):
            return NotImplemented
        return self.label == other.label and dict(self.features) == dict(other.features)

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.features.items())), self.label))


# =============================================================================
# Datasets
# =============================================================================

@dataclass(frozen=True)
class UnlabeledDataset(Sequence[UnlabeledRecord]):
    records: tuple[UnlabeledRecord, ...]
    columns: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.records)

    @overload
    def __getitem__(self, index: int) -> UnlabeledRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[UnlabeledRecord, ...]: ...

    def __getitem__(self, index):
        return self.records[index]

    def __iter__(self) -> Iterator[UnlabeledRecord]:
        return iter(self.records)

    def to_frame(self) -> pl.DataFrame:
        data = {name: [record.features[name] for record in self.records] for name in self.columns}
        return pl.DataFrame(data, schema={name: pl.Float64 for name in self.columns})

    def write_csv(self, path: str | Path, delimiter: str = ",") -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.to_frame().write_csv(output_path, separator=delimiter)
        return output_path


@dataclass(frozen=True)
class LabeledDataset(Sequence[LabeledRecord]):
    """
    Ordered labeled records plus the header they were read from.

    Attributes:
        records: Records in input row order
        columns: Header column names in file order (label column included)
        label_column: Name of the label column
    """

    records: tuple[LabeledRecord, ...]
    columns: tuple[str, ...]
    label_column: str
    feature_columns: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if self.label_column not in self.columns:
            raise SchemaError(f"Label column '{self.label_column}' not found in columns {list(self.columns)}")
        object.__setattr__(
            self,
            "feature_columns",
            tuple(name for name in self.columns if name != self.label_column),
        )

    def __len__(self) -> int:
        return len(self.records)

    @overload
    def __getitem__(self, index: int) -> LabeledRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[LabeledRecord, ...]: ...

    def __getitem__(self, index):
        return self.records[index]

    def __iter__(self) -> Iterator[LabeledRecord]:
        return iter(self.records)

    @property
    def labels(self) -> list[str]:
        return [record.label for record in self.records]

    def unlabeled(self) -> UnlabeledDataset:
        """Same rows in the same order, label column stripped."""
        return UnlabeledDataset(
            records=tuple(UnlabeledRecord(record.features) for record in self.records),
            columns=self.feature_columns,
        )

    def subset(self, indices: Iterable[int]) -> "LabeledDataset":
        return LabeledDataset(
            records=tuple(self.records[int(i)] for i in indices),
            columns=self.columns,
            label_column=self.label_column,
        )

    def to_frame(self) -> pl.DataFrame:
        data: dict[str, list] = {}
        schema: dict[str, pl.DataType] = {}
        for name in self.columns:
            if name == self.label_column:
                data[name] = self.labels
                schema[name] = pl.Utf8
            else:
                data[name] = [record.features[name] for record in self.records]
                schema[name] = pl.Float64
        return pl.DataFrame(data, schema=schema)

    def write_csv(self, path: str | Path, delimiter: str = ",") -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.to_frame().write_csv(output_path, separator=delimiter)
        return output_path


# =============================================================================
# Loading
# =============================================================================

def _read_header(path: Path, delimiter: str) -> list[str]:
    # Raw first line; polars would rename repeated names on a header read.
    try:
        first = pl.read_csv(path, separator=delimiter, has_header=False, n_rows=1, infer_schema_length=0)
    except pl.exceptions.NoDataError as exc:
        raise SchemaError(f"No header row in {path}") from exc
    except pl.exceptions.ComputeError as exc:
        raise ParseError(f"Malformed header in {path}: {exc}") from exc
    if first.height == 0:
        raise SchemaError(f"No header row in {path}")
    header = ["" if name is None else name for name in first.row(0)]
    duplicates = sorted({name for name in header if header.count(name) > 1})
    if duplicates:
        raise SchemaError(f"Duplicate column name(s) in header of {path}: {duplicates}")
    return header


def _read_rows(path: Path, delimiter: str) -> pl.DataFrame:
    # Every column arrives as text; numeric parsing happens in _parse_features.
    try:
        return pl.read_csv(path, separator=delimiter, infer_schema_length=0)
    except pl.exceptions.NoDataError as exc:
        raise SchemaError(f"No header row in {path}") from exc
    except pl.exceptions.ComputeError as exc:
        raise ParseError(f"Malformed row in {path}: {exc}") from exc


def _parse_features(raw: pl.DataFrame, columns: Sequence[str]) -> pl.DataFrame:
    parsed = raw.select([pl.col(name).cast(pl.Float64, strict=False) for name in columns])
    for name in columns:
        bad_rows = parsed.get_column(name).is_null().arg_true()
        if len(bad_rows):
            row = int(bad_rows[0])
            token = raw.get_column(name)[row]
            shown = "<empty>" if token is None else repr(token)
            raise ParseError(
                f"Cannot parse {shown} as a number in column '{name}' (data row {row + 1})",
                column=name,
                row=row + 1,
                token=token,
            )
    return parsed


def load_labeled(path: str | Path, label_column: str, delimiter: str = ",") -> LabeledDataset:
    """
    Load a labeled dataset.

    Args:
        path: Delimited text file, header on the first line
        label_column: Header name of the label column
        delimiter: Field separator

    Raises:
        SchemaError: label_column is not in the header (checked before any row is read)
        ParseError: a feature token is not numeric, a label token is empty, or a row is malformed
    """
    path = Path(path)
    header = _read_header(path, delimiter)
    if label_column not in header:
        raise SchemaError(f"Label column '{label_column}' not found in CSV headers.")

    raw = _read_rows(path, delimiter)
    feature_columns = [name for name in header if name != label_column]
    features = _parse_features(raw, feature_columns)

    labels = raw.get_column(label_column).to_list()
    for row, label in enumerate(labels):
        if label is None:
            raise ParseError(
                f"Empty label in column '{label_column}' (data row {row + 1})",
                column=label_column,
                row=row + 1,
                token=None,
            )

    rows = features.iter_rows() if feature_columns else [()] * raw.height
    records = tuple(
        LabeledRecord(dict(zip(feature_columns, values)), label)
        for values, label in zip(rows, labels)
    )
    logger.debug(f"Loaded {len(records)} labeled records ({len(feature_columns)} features) from {path}")
    return LabeledDataset(records=records, columns=tuple(header), label_column=label_column)


def load_unlabeled(path: str | Path, delimiter: str = ",") -> UnlabeledDataset:
    """Load every column of a delimited file as a numeric feature."""
    path = Path(path)
    header = _read_header(path, delimiter)
    raw = _read_rows(path, delimiter)
    features = _parse_features(raw, header)

    records = tuple(UnlabeledRecord(dict(zip(header, values))) for values in features.iter_rows())
    logger.debug(f"Loaded {len(records)} unlabeled records ({len(header)} features) from {path}")
    return UnlabeledDataset(records=records, columns=tuple(header))
