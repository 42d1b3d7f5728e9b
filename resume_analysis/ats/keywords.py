from __future__ import annotations

from resume_analysis.core.config.scoring import get_scoring_value
from resume_analysis.schemas.ats import AtsCheckInput, Check

from .text import is_blank, make_check, percent

COVERAGE_PASS = float(get_scoring_value("ats.keywords.coverage_pass", 0.70))
COVERAGE_WARN = float(get_scoring_value("ats.keywords.coverage_warn", 0.50))
SUMMARY_MIN_MATCHES = int(get_scoring_value("ats.keywords.summary_min_matches", 3))


def check_jd_keyword_coverage(data: AtsCheckInput) -> Check | None:
    if data.jd_analysis is None:
        return None

    name = "JD keyword coverage"
    score = data.jd_analysis.coverage_score
    shown = percent(score)

    if score >= COVERAGE_PASS:
        return make_check("K1", "keywords", name, "pass", f"Keyword coverage is {shown}% - strong match with the job description.")
    if score >= COVERAGE_WARN:
        return make_check("K1", "keywords", name, "warning", f"Keyword coverage is {shown}% - consider adding more relevant keywords.")
    return make_check("K1", "keywords", name, "fail", f"Keyword coverage is {shown}% - significant keyword gaps detected.")


def check_missing_keywords(data: AtsCheckInput) -> Check | None:
    if data.jd_analysis is None:
        return None

    name = "Missing keywords"
    missing = data.jd_analysis.missing_keywords
    if not missing:
        return make_check("K2", "keywords", name, "pass", "All JD keywords are present in the resume.")

    return make_check(
        "K2",
        "keywords",
        name,
        "warning",
        f"{len(missing)} keyword(s) from the job description are missing.",
        list(missing),
    )


def check_keywords_in_summary(data: AtsCheckInput) -> Check | None:
    if data.jd_analysis is None:
        return None

    name = "Keywords in summary"
    summary = data.resume_data.summary
    if is_blank(summary):
        return make_check("K3", "keywords", name, "warning", "No summary present to check for keyword placement.")

    summary_lower = summary.lower()
    found = [keyword for keyword in data.jd_analysis.matched_keywords if keyword.lower() in summary_lower]

    if len(found) >= SUMMARY_MIN_MATCHES:
        return make_check("K3", "keywords", name, "pass", f"{len(found)} matched keyword(s) appear in the summary.")

    return make_check(
        "K3",
        "keywords",
        name,
        "warning",
        f"Only {len(found)} matched keyword(s) in the summary. Aim for at least {SUMMARY_MIN_MATCHES}.",
        [f"Found: {', '.join(found)}"] if found else ["No matched keywords found in summary"],
    )


KEYWORD_CHECKS = (
    check_jd_keyword_coverage,
    check_missing_keywords,
    check_keywords_in_summary,
)
