from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

TRUNCATION_MARKER = "... and so on"


class AnalysisResult(BaseModel):
    """Every scalar the paired t-test produces, computed once per run."""

    model_config = ConfigDict(frozen=True)

    col1: str
    col2: str
    iv_name: str
    dv_name: str

    # Difference series
    n: int
    mean: float
    sum_sq_dev: float
    variance: float
    std_dev: float

    # Inference
    df: int
    standard_error: float
    t_value: float
    alpha: float
    critical_t: float
    is_significant: bool

    # Effect size inputs (raw, non-differenced columns)
    mean_first: float
    mean_second: float
    std_dev_first: float
    effect_size: float

    @model_validator(mode="after")
    def _decision_matches_t(self) -> "AnalysisResult":
        if self.is_significant != (abs(self.t_value) > self.critical_t):
            raise ValueError("is_significant must equal abs(t_value) > critical_t")
        return self

    @computed_field
    @property
    def decision(self) -> str:
        return "reject" if self.is_significant else "fail to reject"

    @computed_field
    @property
    def comparison_symbol(self) -> str:
        return ">" if self.is_significant else "<"


class Hypotheses(BaseModel):
    null: str
    alternative: str


class StepTable(BaseModel):
    columns: List[str]
    rows: List[List[str]] = Field(default_factory=list)
    truncated: bool = False
    truncation_marker: Optional[str] = None


class ReportStep(BaseModel):
    number: int
    title: str
    formulas: List[str] = Field(default_factory=list)
    table: Optional[StepTable] = None


class AnalysisReport(BaseModel):
    hypotheses: Hypotheses
    steps: List[ReportStep]
    apa_writeup: str
    result: AnalysisResult


class RecordsAnalysisRequest(BaseModel):
    records: List[Dict[str, Any]]
    iv_name: Optional[str] = None
    dv_name: Optional[str] = None
    alpha: Optional[float] = None
