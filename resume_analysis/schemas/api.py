from __future__ import annotations

from pydantic import BaseModel, Field

from .ats import JdCoverageInput
from .jd import CmsDataForAnalysis, CoverageResult, Suggestion
from .resume import ResumeData


class AtsCheckRequest(BaseModel):
    resume_data: ResumeData
    html: str = Field(default="", max_length=2_000_000)
    jd_analysis: JdCoverageInput | None = None


class SanitizeRequest(BaseModel):
    job_description: str = Field(default="", max_length=200_000)


class SanitizeResponse(BaseModel):
    job_description: str


class CoverageRequest(BaseModel):
    keywords: list[str] = Field(default_factory=list, max_length=200)
    cms_data: CmsDataForAnalysis = Field(default_factory=CmsDataForAnalysis)


class CoverageResponse(BaseModel):
    coverage: CoverageResult
    suggestions: list[Suggestion]


class JdAnalyzeRequest(BaseModel):
    job_description: str = Field(default="", max_length=200_000)
    cms_data: CmsDataForAnalysis = Field(default_factory=CmsDataForAnalysis)
