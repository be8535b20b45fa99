"""
Paired t-test analysis service.

Glues record loading, the statistics pipeline and the narrative formatter
together. Each call is independent and stateless.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ttest_tutor.config import Settings, settings as default_settings
from ttest_tutor.engine.ingest import load_records
from ttest_tutor.models.analysis import AnalysisReport
from ttest_tutor.services.narrative import Chooser, build_report
from ttest_tutor.stats.errors import PairedTTestError
from ttest_tutor.stats.hypothesis import InverseT, student_t_inverse
from ttest_tutor.stats.pipeline import run_paired_t

logger = logging.getLogger(__name__)


def analyze_records(
    records: Sequence[Mapping[str, Any]],
    iv_name: Optional[str] = None,
    dv_name: Optional[str] = None,
    alpha: Optional[float] = None,
    choose: Optional[Chooser] = None,
    inverse_t: InverseT = student_t_inverse,
    config: Optional[Settings] = None,
) -> AnalysisReport:
    """
    Run the full walkthrough over already-loaded records.

    Blank display names and a missing alpha fall back to configuration.
    """
    cfg = config or default_settings

    try:
        sample, result = run_paired_t(
            records,
            iv_name=iv_name,
            dv_name=dv_name,
            alpha=cfg.alpha if alpha is None else alpha,
            inverse_t=inverse_t,
            default_iv_name=cfg.default_iv_name,
            default_dv_name=cfg.default_dv_name,
        )
    except PairedTTestError as e:
        logger.warning("paired t-test rejected input: %s: %s", type(e).__name__, e.message)
        raise

    logger.info(
        "paired t-test on %s - %s: n=%d t=%.4f critical=%.4f decision=%s",
        result.col1,
        result.col2,
        result.n,
        result.t_value,
        result.critical_t,
        result.decision,
    )
    return build_report(sample, result, choose=choose, preview_rows=cfg.preview_rows)


def analyze_upload(
    content: bytes,
    filename: str,
    iv_name: Optional[str] = None,
    dv_name: Optional[str] = None,
    alpha: Optional[float] = None,
    choose: Optional[Chooser] = None,
    config: Optional[Settings] = None,
) -> AnalysisReport:
    try:
        records = load_records(content, filename)
    except PairedTTestError as e:
        logger.warning("could not parse upload %r: %s", filename, e.message)
        raise

    logger.debug("loaded %d records from %r", len(records), filename)
    return analyze_records(records, iv_name=iv_name, dv_name=dv_name, alpha=alpha, choose=choose, config=config)

