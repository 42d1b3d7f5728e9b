from fastapi import APIRouter, HTTPException, Request, status

from resume_analysis.core.rate_limit import rate_limit
from resume_analysis.normalize.sanitize import sanitize_job_description
from resume_analysis.schemas.api import (
    CoverageRequest,
    CoverageResponse,
    JdAnalyzeRequest,
    SanitizeRequest,
    SanitizeResponse,
)
from resume_analysis.schemas.jd import JdAnalysisResult
from resume_analysis.services.coverage import score_coverage
from resume_analysis.services.jd_analysis import analyze_job_description
from resume_analysis.services.jd_llm import JdAnalysisError
from resume_analysis.services.suggestions import generate_suggestions

router = APIRouter()

_STATUS_BY_MESSAGE = {
    "Job description is required": status.HTTP_400_BAD_REQUEST,
    "LLM not configured": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _raise_analysis_http_error(exc: JdAnalysisError) -> None:
    code = _STATUS_BY_MESSAGE.get(str(exc), status.HTTP_502_BAD_GATEWAY)
    raise HTTPException(status_code=code, detail=str(exc)) from exc


@router.post("/jd/sanitize", response_model=SanitizeResponse)
async def jd_sanitize(payload: SanitizeRequest):
    return SanitizeResponse(job_description=sanitize_job_description(payload.job_description))


@router.post("/jd/coverage", response_model=CoverageResponse)
@rate_limit()
async def jd_coverage(request: Request, payload: CoverageRequest):
    _ = request
    coverage = score_coverage(payload.keywords, payload.cms_data)
    return CoverageResponse(coverage=coverage, suggestions=generate_suggestions(coverage, payload.cms_data))


@router.post("/jd/analyze", response_model=JdAnalysisResult)
@rate_limit()
async def jd_analyze(request: Request, payload: JdAnalyzeRequest):
    _ = request
    try:
        return await analyze_job_description(payload.job_description, payload.cms_data)
    except JdAnalysisError as exc:
        _raise_analysis_http_error(exc)
