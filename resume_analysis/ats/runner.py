from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from resume_analysis.schemas.ats import (
    AtsCheckInput,
    CategorySummary,
    Check,
    CheckCategory,
    CheckResult,
    JdCoverageInput,
)
from resume_analysis.schemas.resume import ResumeData

from .format import FORMAT_CHECKS
from .keywords import KEYWORD_CHECKS
from .parsability import PARSABILITY_CHECKS
from .readability import READABILITY_CHECKS
from .text import percent

logger = logging.getLogger(__name__)

CheckFn = Callable[[AtsCheckInput], Optional[Check]]

CATEGORY_LABELS: dict[CheckCategory, str] = {
    "parsability": "Parsability",
    "keywords": "Keyword Optimization",
    "readability": "Readability & Structure",
    "format": "Format Compliance",
}

CATEGORY_ORDER: tuple[CheckCategory, ...] = ("parsability", "keywords", "readability", "format")

ALL_CHECKS: tuple[CheckFn, ...] = (
    *PARSABILITY_CHECKS,
    *KEYWORD_CHECKS,
    *READABILITY_CHECKS,
    *FORMAT_CHECKS,
)

BASE_CHECK_COUNT = len(ALL_CHECKS) - len(KEYWORD_CHECKS)
FULL_CHECK_COUNT = len(ALL_CHECKS)


def _summarize(category: CheckCategory, checks: list[Check]) -> CategorySummary:
    return CategorySummary(
        category=category,
        label=CATEGORY_LABELS[category],
        passed=sum(1 for check in checks if check.status == "pass"),
        warned=sum(1 for check in checks if check.status == "warning"),
        failed=sum(1 for check in checks if check.status == "fail"),
        total=len(checks),
        checks=checks,
    )


def aggregate_checks(checks: Iterable[Check], *, checked_at: datetime | None = None) -> CheckResult:
    """Group checks by category and score them: pass counts 1, warning 0.5, fail 0."""
    ordered = list(checks)
    grouped: dict[CheckCategory, list[Check]] = {category: [] for category in CATEGORY_ORDER}
    for check in ordered:
        grouped[check.category].append(check)

    categories = [_summarize(category, grouped[category]) for category in CATEGORY_ORDER if grouped[category]]

    total_passed = sum(summary.passed for summary in categories)
    total_warned = sum(summary.warned for summary in categories)
    total_failed = sum(summary.failed for summary in categories)
    total_checks = len(ordered)

    raw_score = (total_passed + total_warned * 0.5) / total_checks if total_checks else 0.0
    stamp = checked_at or datetime.now(timezone.utc)

    return CheckResult(
        score=percent(raw_score),
        categories=categories,
        total_passed=total_passed,
        total_warned=total_warned,
        total_failed=total_failed,
        total_checks=total_checks,
        checked_at=stamp.isoformat().replace("+00:00", "Z"),
    )


def run_checks(
    resume_data: ResumeData,
    html: str,
    jd_analysis: JdCoverageInput | None = None,
) -> CheckResult:
    data = AtsCheckInput(resume_data=resume_data, html=html, jd_analysis=jd_analysis)
    # Keyword checks return None without JD input and drop out of the totals.
    checks = [check for check in (run(data) for run in ALL_CHECKS) if check is not None]

    result = aggregate_checks(checks)
    logger.debug("ats_checks_completed score=%s total=%s", result.score, result.total_checks)
    return result
