"""
Narrative formatter for the paired t-test walkthrough.

Turns a PairedSample + AnalysisResult into ten ordered report steps, a
hypothesis pair and an APA-style write-up. No arithmetic beyond what is
needed to display intermediate values happens here.
"""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence

from ttest_tutor.models.analysis import (
    TRUNCATION_MARKER,
    AnalysisReport,
    AnalysisResult,
    Hypotheses,
    ReportStep,
    StepTable,
)
from ttest_tutor.stats.paired import PairedSample

# Picks one phrasing out of several; random.choice unless a caller pins it.
Chooser = Callable[[Sequence[str]], str]

PREVIEW_ROWS = 5

NULL_TEMPLATES = (
    "There is no significant effect of {iv} on {dv}.",
    "{iv} does not have a statistically significant impact on {dv}.",
    "There is no meaningful relationship between {iv} and {dv}.",
)

ALTERNATIVE_TEMPLATES = (
    "There is a significant effect of {iv} on {dv}.",
    "{iv} has a statistically significant impact on {dv}.",
    "There is a meaningful relationship between {iv} and {dv}.",
)


def _f(x: float) -> str:
    return f"{x:.2f}"


def _alpha_plain(alpha: float) -> str:
    """Fixed-point, trailing zeros dropped: 0.0001 -> '0.0001', never 1e-04."""
    return f"{alpha:.10f}".rstrip("0").rstrip(".")


def _alpha_text(alpha: float) -> str:
    """0.05 -> '.05' (APA drops the leading zero for p thresholds)."""
    text = _alpha_plain(alpha)
    return text[1:] if text.startswith("0.") else text


def generate_hypotheses(iv: str, dv: str, choose: Optional[Chooser] = None) -> Hypotheses:
    pick = choose or random.choice
    return Hypotheses(
        null=pick(NULL_TEMPLATES).format(iv=iv, dv=dv),
        alternative=pick(ALTERNATIVE_TEMPLATES).format(iv=iv, dv=dv),
    )


def apa_writeup(result: AnalysisResult) -> str:
    significance = "a significant" if result.is_significant else "no significant"
    outcome = "statistically significant" if result.is_significant else "not statistically significant"
    p_text = f"{'<' if result.is_significant else '>'} {_alpha_text(result.alpha)}"
    return (
        f"A paired-samples t-test was conducted to evaluate if there was {significance} "
        f"difference in {result.dv_name} between the {result.col1} and {result.col2} conditions. "
        f"The results indicated that the mean difference was {outcome}, "
        f"t({result.df}) = {_f(result.t_value)}, p {p_text}. "
        f"The effect size, as measured by Cohen's d, was {_f(result.effect_size)}."
    )


def _difference_table(sample: PairedSample, limit: int) -> StepTable:
    rows = [
        [_f(a), _f(b), _f(d)]
        for a, b, d in zip(sample.first[:limit], sample.second[:limit], sample.differences[:limit])
    ]
    truncated = sample.n > limit
    return StepTable(
        columns=[sample.col1, sample.col2, "Difference"],
        rows=rows,
        truncated=truncated,
        truncation_marker=TRUNCATION_MARKER if truncated else None,
    )


def _spread_formulas(sample: PairedSample, result: AnalysisResult, limit: int) -> List[str]:
    head = sample.differences[:limit]
    m = result.mean
    more = [TRUNCATION_MARKER] if sample.n > limit else []

    deviations = [f"({_f(d)} - {_f(m)}) = {_f(d - m)}" for d in head] + more
    squared = [f"({_f(d - m)})² = {_f((d - m) ** 2)}" for d in head] + more

    return (
        ["Step 4.1: Deviations (X - M)"]
        + deviations
        + ["Step 4.2: Squared deviations (X - M)²"]
        + squared
        + [
            f"Step 4.3: Σ(X - M)² = {_f(result.sum_sq_dev)}",
            f"Step 4.4: s² = Σ(X - M)² / (N - 1) = {_f(result.sum_sq_dev)} / {result.n - 1} = {_f(result.variance)}",
            f"Step 4.5: s = √{_f(result.variance)}",
            f"Final Standard Deviation (SD) = {_f(result.std_dev)}",
        ]
    )


def build_steps(
    sample: PairedSample,
    result: AnalysisResult,
    hypotheses: Hypotheses,
    apa: str,
    preview_rows: int = PREVIEW_ROWS,
) -> List[ReportStep]:
    r = result
    head = " + ".join(_f(d) for d in sample.differences[:preview_rows])
    if sample.n > preview_rows:
        head += " + ..."

    return [
        ReportStep(
            number=1,
            title="Define Your Hypotheses",
            formulas=[
                f"Null Hypothesis (H₀): {hypotheses.null}",
                f"Alternative Hypothesis (H₁): {hypotheses.alternative}",
            ],
        ),
        ReportStep(
            number=2,
            title="Compute the Differences Between Conditions",
            formulas=[f"Difference = {r.col1} - {r.col2}"],
            table=_difference_table(sample, preview_rows),
        ),
        ReportStep(
            number=3,
            title="Calculate the Mean of the Differences",
            formulas=[
                "Mean (M) = (Σ Differences) / N",
                f"M = ({head}) / {r.n}",
                f"Final Mean (M) = {_f(r.mean)}",
            ],
        ),
        ReportStep(
            number=4,
            title="Compute the Standard Deviation (SD)",
            formulas=_spread_formulas(sample, r, preview_rows),
        ),
        ReportStep(
            number=5,
            title="Compute Degrees of Freedom (df)",
            formulas=["df = N - 1", f"df = {r.n} - 1 = {r.df}"],
        ),
        ReportStep(
            number=6,
            title="Compute the t-value",
            formulas=[
                f"SE = SD / √N = {_f(r.std_dev)} / √{r.n} = {_f(r.standard_error)}",
                "t = M / SE",
                f"t = {_f(r.mean)} / {_f(r.standard_error)} = {_f(r.t_value)}",
            ],
        ),
        ReportStep(
            number=7,
            title="Find the Critical t-value",
            formulas=[
                f"For a two-tailed test with α = {_alpha_plain(r.alpha)} and df = {r.df}, "
                f"the critical t-value is ±{_f(r.critical_t)}",
            ],
        ),
        ReportStep(
            number=8,
            title="Make a Statistical Decision",
            formulas=[
                f"|t_obtained| {r.comparison_symbol} t_critical",
                f"|{_f(r.t_value)}| {r.comparison_symbol} {_f(r.critical_t)}",
                f"Decision: We {r.decision} the null hypothesis.",
            ],
        ),
        ReportStep(
            number=9,
            title="Calculate Effect Size (Cohen's d)",
            formulas=[
                "d = (Mean₁ - Mean₂) / SD₁",
                f"d = ({_f(r.mean_first)} - {_f(r.mean_second)}) / {_f(r.std_dev_first)}",
                f"Cohen's d = {_f(r.effect_size)}",
            ],
        ),
        ReportStep(
            number=10,
            title="APA-Formatted Write-Up",
            formulas=[apa],
        ),
    ]


def build_report(
    sample: PairedSample,
    result: AnalysisResult,
    choose: Optional[Chooser] = None,
    preview_rows: int = PREVIEW_ROWS,
) -> AnalysisReport:
    hypotheses = generate_hypotheses(result.iv_name, result.dv_name, choose)
    apa = apa_writeup(result)
    return AnalysisReport(
        hypotheses=hypotheses,
        steps=build_steps(sample, result, hypotheses, apa, preview_rows),
        apa_writeup=apa,
        result=result,
    )
