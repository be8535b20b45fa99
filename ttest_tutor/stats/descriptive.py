"""Descriptive Statistics - the building blocks of the paired t-test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .errors import EmptyInputError, InsufficientSampleError


@dataclass(frozen=True)
class SpreadDetails:
    sum_sq_dev: float
    variance: float
    std_dev: float


class DescriptiveStats:
    """
    Concepts covered:
    1. Mean
    2. Sum of squared deviations
    3. Sample variance (Bessel's correction, n - 1)
    4. Standard deviation
    """

    @staticmethod
    def mean(series: Sequence[float]) -> float:
        """Arithmetic mean of a non-empty series."""
        data = np.asarray(series, dtype=float)
        if data.size == 0:
            raise EmptyInputError("Cannot compute a mean of an empty series.")
        return float(data.sum() / data.size)

    @staticmethod
    def standard_deviation(series: Sequence[float], mean: Optional[float] = None) -> SpreadDetails:
        """
        Sample standard deviation along with the intermediate values
        the walkthrough displays.

        `mean` may be supplied when it has already been computed; otherwise
        it is derived from `series`.
        """
        data = np.asarray(series, dtype=float)
        n = data.size
        if n < 2:
            raise InsufficientSampleError(
                f"At least two observations are required to compute a standard deviation (got {n})."
            )

        m = DescriptiveStats.mean(data) if mean is None else float(mean)
        sum_sq_dev = float(np.sum((data - m) ** 2))
        variance = sum_sq_dev / (n - 1)

        return SpreadDetails(
            sum_sq_dev=sum_sq_dev,
            variance=variance,
            std_dev=float(np.sqrt(variance)),
        )
