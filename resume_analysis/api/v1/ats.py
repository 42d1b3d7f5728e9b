from fastapi import APIRouter, Request

from resume_analysis.ats import run_checks
from resume_analysis.core.rate_limit import rate_limit
from resume_analysis.schemas.api import AtsCheckRequest
from resume_analysis.schemas.ats import CheckResult

router = APIRouter()


@router.post("/ats/check", response_model=CheckResult)
@rate_limit()
async def ats_check(request: Request, payload: AtsCheckRequest):
    _ = request
    return run_checks(payload.resume_data, payload.html, payload.jd_analysis)
