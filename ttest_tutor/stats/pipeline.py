"""
Paired t-test pipeline.

Stages run once, in a fixed order, each consuming the previous stage's
output:

    columns -> differences -> mean / SD -> df -> SE -> t -> critical t
    -> decision -> Cohen's d

Any failure aborts the run; no partial result is returned.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ttest_tutor.models.analysis import AnalysisResult

from .descriptive import DescriptiveStats
from .hypothesis import DEFAULT_ALPHA, HypothesisTesting, InverseT, student_t_inverse
from .paired import PairedSample, Record, build_paired_sample, select_columns

DEFAULT_IV_NAME = "Independent Variable"
DEFAULT_DV_NAME = "Dependent Variable"


def _display_name(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def run_paired_t(
    records: Sequence[Record],
    iv_name: Optional[str] = None,
    dv_name: Optional[str] = None,
    alpha: Optional[float] = None,
    inverse_t: InverseT = student_t_inverse,
    default_iv_name: str = DEFAULT_IV_NAME,
    default_dv_name: str = DEFAULT_DV_NAME,
) -> Tuple[PairedSample, AnalysisResult]:
    a = HypothesisTesting.check_alpha(DEFAULT_ALPHA if alpha is None else alpha)
    col1, col2 = select_columns(records)
    sample = build_paired_sample(records, col1, col2)

    mean = DescriptiveStats.mean(sample.differences)
    spread = DescriptiveStats.standard_deviation(sample.differences, mean)

    n = sample.n
    df = HypothesisTesting.degrees_of_freedom(n)
    se = HypothesisTesting.standard_error(spread.std_dev, n)
    t = HypothesisTesting.t_value(mean, se)

    t_crit = HypothesisTesting.critical_t(a, df, inverse_t=inverse_t)

    d = HypothesisTesting.cohens_d(sample.first, sample.second)

    result = AnalysisResult(
        col1=col1,
        col2=col2,
        iv_name=_display_name(iv_name, default_iv_name),
        dv_name=_display_name(dv_name, default_dv_name),
        n=n,
        mean=mean,
        sum_sq_dev=spread.sum_sq_dev,
        variance=spread.variance,
        std_dev=spread.std_dev,
        df=df,
        standard_error=se,
        t_value=t,
        alpha=a,
        critical_t=t_crit,
        is_significant=HypothesisTesting.is_significant(t, t_crit),
        mean_first=DescriptiveStats.mean(sample.first),
        mean_second=DescriptiveStats.mean(sample.second),
        std_dev_first=DescriptiveStats.standard_deviation(sample.first).std_dev,
        effect_size=d,
    )
    return sample, result
