"""Errors raised by the paired t-test pipeline.

Every error carries a message that can be shown to the end user as-is.
The pipeline never recovers from these: the first one aborts the run.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PairedTTestError(Exception):
    """Base class for all analysis failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": type(self).__name__, "detail": self.message}


class ValidationError(PairedTTestError):
    """Dataset or parameters rejected before any arithmetic."""


class EmptyInputError(PairedTTestError):
    """A statistic was requested over an empty series."""


class DataTypeError(PairedTTestError):
    """A selected column holds a missing or non-numeric value."""

    def __init__(self, message: str, row_index: Optional[int] = None, column: Optional[str] = None):
        super().__init__(message)
        self.row_index = row_index
        self.column = column

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out["row_index"] = self.row_index
        out["column"] = self.column
        return out


class InsufficientSampleError(PairedTTestError):
    """Fewer than two observations; sample variance is undefined."""


class ZeroVarianceError(PairedTTestError):
    """A standard deviation of zero would divide the t or d statistic by zero."""


class InvalidDegreesOfFreedomError(PairedTTestError):
    """Critical value requested with df < 1."""


class ParseError(PairedTTestError):
    """Uploaded content could not be turned into records."""
