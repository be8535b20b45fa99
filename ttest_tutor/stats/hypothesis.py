"""Hypothesis Testing - inferential steps of the paired t-test."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from scipy import stats

from .descriptive import DescriptiveStats
from .errors import InvalidDegreesOfFreedomError, ValidationError, ZeroVarianceError

# (cumulative probability, degrees of freedom) -> t such that P(T <= t) = p
InverseT = Callable[[float, int], float]

DEFAULT_ALPHA = 0.05


def student_t_inverse(probability: float, df: int) -> float:
    """Inverse CDF of Student's t distribution."""
    return float(stats.t.ppf(probability, df=df))


class HypothesisTesting:
    """
    Concepts covered:
    1. Degrees of freedom
    2. Standard error of the mean difference
    3. t statistic
    4. Two-tailed critical t value
    5. Statistical decision
    6. Effect size (Cohen's d, first-condition SD)
    """

    @staticmethod
    def degrees_of_freedom(n: int) -> int:
        return n - 1

    @staticmethod
    def standard_error(std_dev: float, n: int) -> float:
        return std_dev / math.sqrt(n)

    @staticmethod
    def t_value(mean: float, standard_error: float) -> float:
        if standard_error == 0:
            raise ZeroVarianceError(
                "All differences are identical, so the standard error is zero "
                "and the t-value is undefined."
            )
        return mean / standard_error

    @staticmethod
    def check_alpha(alpha: float) -> float:
        if not 0 < alpha < 1:
            raise ValidationError(f"Significance level alpha must be between 0 and 1 (got {alpha}).")
        return alpha

    @staticmethod
    def critical_t(alpha: float, df: int, inverse_t: InverseT = student_t_inverse) -> float:
        """Two-tailed critical value at 1 - alpha/2."""
        HypothesisTesting.check_alpha(alpha)
        if df < 1:
            raise InvalidDegreesOfFreedomError(
                f"Degrees of freedom must be at least 1 to look up a critical value (got {df})."
            )
        return float(inverse_t(1 - alpha / 2, df))

    @staticmethod
    def is_significant(t_value: float, critical_t: float) -> bool:
        return abs(t_value) > critical_t

    @staticmethod
    def cohens_d(first: Sequence[float], second: Sequence[float]) -> float:
        """
        (mean(first) - mean(second)) / sd(first).

        Standardized by the first condition's SD rather than a pooled SD.
        """
        sd_first = DescriptiveStats.standard_deviation(first).std_dev
        if sd_first == 0:
            raise ZeroVarianceError(
                "The first condition has no variation, so Cohen's d is undefined."
            )
        return (DescriptiveStats.mean(first) - DescriptiveStats.mean(second)) / sd_first
