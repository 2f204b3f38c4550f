from __future__ import annotations


class BaselineEvalError(RuntimeError):
    """Base class for every failure that aborts an evaluation run."""


class SchemaError(BaselineEvalError):
    """Raised when the header does not carry the expected columns."""


class ParseError(BaselineEvalError):
    def __init__(self, message: str, *, column: str | None = None, row: int | None = None, token: str | None = None):
        super().__init__(message)
        self.column = column
        self.row = row
        self.token = token


class CardinalityError(BaselineEvalError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Mismatch between labeled examples and predictions count: {expected} labeled vs {actual} predicted"
        )
        self.expected = expected
        self.actual = actual


class EmptyInputError(BaselineEvalError):
    """Raised when an operation needs at least one record (or one per fold) and got none."""
