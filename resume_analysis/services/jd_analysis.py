from __future__ import annotations

import logging

from resume_analysis.core.config import settings
from resume_analysis.normalize.sanitize import sanitize_job_description
from resume_analysis.schemas.jd import CmsDataForAnalysis, JdAnalysisResult

from .coverage import score_coverage
from .jd_llm import JdAnalysisError
from .keyword_extractor import extract_keywords
from .suggestions import generate_suggestions

logger = logging.getLogger(__name__)


async def analyze_job_description(
    job_description: str,
    cms_data: CmsDataForAnalysis,
    api_key: str | None = None,
) -> JdAnalysisResult:
    if not job_description or not job_description.strip():
        raise JdAnalysisError("Job description is required")

    key = (api_key or settings.llm_api_key or "").strip()
    if not key:
        raise JdAnalysisError("LLM not configured")

    sanitized = sanitize_job_description(job_description)
    if not sanitized:
        raise JdAnalysisError("Job description is required")

    extracted = await extract_keywords(sanitized, key)
    coverage = score_coverage(extracted.keywords, cms_data)
    suggestions = generate_suggestions(coverage, cms_data)

    logger.info(
        "jd_analysis_completed keywords=%s matched=%s suggestions=%s",
        len(extracted.keywords),
        len(coverage.matched_keywords),
        len(suggestions),
    )

    return JdAnalysisResult(
        keywords=extracted,
        coverage_score=coverage.score,
        matched_keywords=coverage.matched_keywords,
        missing_keywords=coverage.missing_keywords,
        suggestions=suggestions,
    )
