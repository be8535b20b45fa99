"""Statistical building blocks for the step-by-step paired t-test."""

from .descriptive import DescriptiveStats, SpreadDetails
from .hypothesis import HypothesisTesting, student_t_inverse
from .paired import PairedSample, build_paired_sample, compute_differences, select_columns
from .pipeline import run_paired_t

__all__ = [
    "DescriptiveStats",
    "SpreadDetails",
    "HypothesisTesting",
    "student_t_inverse",
    "PairedSample",
    "build_paired_sample",
    "compute_differences",
    "select_columns",
    "run_paired_t",
]
