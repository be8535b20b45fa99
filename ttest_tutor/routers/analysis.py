from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from ttest_tutor.models.analysis import AnalysisReport, RecordsAnalysisRequest
from ttest_tutor.models.common import ErrorResponse
from ttest_tutor.services.analysis_service import analyze_records, analyze_upload

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}}


@router.post("/paired-t", response_model=AnalysisReport, responses=ERROR_RESPONSES)
async def paired_t_records(req: RecordsAnalysisRequest):
    return analyze_records(
        req.records,
        iv_name=req.iv_name,
        dv_name=req.dv_name,
        alpha=req.alpha,
    )


@router.post("/paired-t/upload", response_model=AnalysisReport, responses=ERROR_RESPONSES)
async def paired_t_upload(
    file: UploadFile = File(...),
    iv_name: Optional[str] = Form(None),
    dv_name: Optional[str] = Form(None),
    alpha: Optional[float] = Form(None),
):
    content = await file.read()
    await file.close()

    return analyze_upload(
        content,
        file.filename or "",
        iv_name=iv_name,
        dv_name=dv_name,
        alpha=alpha,
    )
