"""Resume analysis engine: ATS compatibility checks and JD keyword coverage."""

from resume_analysis.ats import run_checks
from resume_analysis.normalize import sanitize_job_description
from resume_analysis.services import (
    JdAnalysisError,
    analyze_job_description,
    extract_keywords,
    generate_suggestions,
    score_coverage,
)

__all__ = [
    "JdAnalysisError",
    "analyze_job_description",
    "extract_keywords",
    "generate_suggestions",
    "run_checks",
    "sanitize_job_description",
    "score_coverage",
]
