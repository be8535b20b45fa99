"""Column selection and the difference series for paired data."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

from .errors import DataTypeError, ValidationError

Record = Mapping[str, Any]


@dataclass(frozen=True)
class PairedSample:
    col1: str
    col2: str
    first: Tuple[float, ...]
    second: Tuple[float, ...]
    differences: Tuple[float, ...]

    @property
    def n(self) -> int:
        return len(self.differences)


def is_numeric(value: Any) -> bool:
    """Real numbers only; bools are excluded even though they subclass int."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def select_columns(records: Sequence[Record]) -> Tuple[str, str]:
    """
    First two columns of the first record holding a numeric value,
    in the record's own key order.
    """
    if not records:
        raise ValidationError("The dataset is empty.")

    numeric = [key for key, value in records[0].items() if is_numeric(value)]
    if len(numeric) < 2:
        raise ValidationError("The dataset must have at least two numerical columns.")
    return numeric[0], numeric[1]


def _cell(row: Record, index: int, column: str) -> float:
    value = row.get(column)
    if not is_numeric(value) or not math.isfinite(value):
        raise DataTypeError(
            f"Row {index} has a missing, non-numeric or non-finite value in column '{column}': {value!r}.",
            row_index=index,
            column=column,
        )
    return float(value)


def column_values(records: Sequence[Record], column: str) -> List[float]:
    return [_cell(row, i, column) for i, row in enumerate(records)]


def compute_differences(records: Sequence[Record], col1: str, col2: str) -> List[float]:
    """Element i is records[i][col1] - records[i][col2]."""
    return list(build_paired_sample(records, col1, col2).differences)


def build_paired_sample(records: Sequence[Record], col1: str, col2: str) -> PairedSample:
    first: List[float] = []
    second: List[float] = []
    for i, row in enumerate(records):
        first.append(_cell(row, i, col1))
        second.append(_cell(row, i, col2))

    return PairedSample(
        col1=col1,
        col2=col2,
        first=tuple(first),
        second=tuple(second),
        differences=tuple(a - b for a, b in zip(first, second)),
    )
