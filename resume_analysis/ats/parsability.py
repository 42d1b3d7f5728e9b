from __future__ import annotations

import re

from resume_analysis.core.config.scoring import get_scoring_list, get_scoring_value
from resume_analysis.schemas.ats import AtsCheckInput, Check
from resume_analysis.semantic.similarity import is_fuzzy_match

from .text import education_items, experience_items, is_blank, make_check

STANDARD_SECTION_HEADINGS = get_scoring_list("ats.standard_section_headings")
HEADING_FUZZY_THRESHOLD = float(get_scoring_value("ats.heading_fuzzy_threshold", 0.85))
SMALL_ABSOLUTE_MAX_WIDTH_PX = int(get_scoring_value("ats.parsability.small_absolute_max_width_px", 70))

# Matched against the whole display date; the index identifies the format.
COMMON_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "Jan 2020 - Present", "Jan 2020 – Dec 2022"
    re.compile(r"[A-Z][a-z]{2}\s+\d{4}\s*[–\-]\s*(?:[A-Z][a-z]{2}\s+\d{4}|Present)"),
    # "January 2020 - December 2022"
    re.compile(r"[A-Z][a-z]+\s+\d{4}\s*[–\-]\s*(?:[A-Z][a-z]+\s+\d{4}|Present)"),
    # "2020 - 2022", "2020 - Present"
    re.compile(r"\d{4}\s*[–\-]\s*(?:\d{4}|Present)"),
    # "01/2020 - 12/2022"
    re.compile(r"\d{1,2}/\d{4}\s*[–\-]\s*(?:\d{1,2}/\d{4}|Present)"),
    # "2020"
    re.compile(r"\d{4}"),
)

_UNSAFE_TAGS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (f"<{tag}>", re.compile(rf"<{tag}[\s>]", re.IGNORECASE)) for tag in ("table", "img", "canvas", "svg")
)
_FIXED_RE = re.compile(r"position\s*:\s*fixed", re.IGNORECASE)
_ABSOLUTE_RE = re.compile(r"position\s*:\s*absolute", re.IGNORECASE)
_SIZED_ABSOLUTE_RE = re.compile(r"width\s*:\s*(\d+)px[^}]*position\s*:\s*absolute", re.IGNORECASE)
_UNSIZED_ABSOLUTE_RE = re.compile(r"position\s*:\s*absolute(?![^}]*width\s*:\s*\d+px)", re.IGNORECASE)


def _date_format_index(date: str) -> int:
    for index, pattern in enumerate(COMMON_DATE_PATTERNS):
        if pattern.fullmatch(date):
            return index
    return -1


def check_contact_info(data: AtsCheckInput) -> Check:
    profile = data.resume_data.profile
    name = "Contact info present"

    if is_blank(profile.email):
        return make_check("P1", "parsability", name, "fail", "Email is missing. ATS systems require an email address.")

    missing = []
    if is_blank(profile.phone):
        missing.append("phone")
    if is_blank(profile.location):
        missing.append("location")

    if missing:
        return make_check("P1", "parsability", name, "warning", f"Email found. Missing: {', '.join(missing)}.")

    return make_check("P1", "parsability", name, "pass", "Email, phone, and location are all present.")


def _is_standard_heading(label: str) -> bool:
    normalized = label.lower().strip()
    return any(
        heading == normalized or is_fuzzy_match(heading, normalized, HEADING_FUZZY_THRESHOLD)
        for heading in STANDARD_SECTION_HEADINGS
    )


def check_section_headings(data: AtsCheckInput) -> Check:
    name = "Standard section headings"
    non_standard = [section.label for section in data.resume_data.sections if not _is_standard_heading(section.label)]

    if non_standard:
        return make_check(
            "P2",
            "parsability",
            name,
            "warning",
            f"{len(non_standard)} non-standard section heading(s) found. Some ATS parsers may not recognize them.",
            [f'"{label}" is not a standard ATS heading' for label in non_standard],
        )

    return make_check("P2", "parsability", name, "pass", "All section headings are ATS-recognized.")


def check_date_format_consistency(data: AtsCheckInput) -> Check:
    name = "Date format consistency"
    dates: list[tuple[str, str]] = []

    for item in experience_items(data.resume_data):
        if item.display_date:
            dates.append((f"{item.title} at {item.company}", item.display_date))
    for item in education_items(data.resume_data):
        if item.display_date:
            dates.append((item.institution, item.display_date))

    if not dates:
        return make_check("P3", "parsability", name, "pass", "No dates to check.")

    indices = [_date_format_index(date) for _, date in dates]
    unrecognized = [(label, date) for (label, date), index in zip(dates, indices) if index == -1]

    if unrecognized:
        return make_check(
            "P3",
            "parsability",
            name,
            "warning",
            f"{len(unrecognized)} date(s) use an unrecognized format.",
            [f'"{date}" ({label})' for label, date in unrecognized],
        )

    if len(set(indices)) > 1:
        return make_check(
            "P3",
            "parsability",
            name,
            "warning",
            "Dates use inconsistent formats across entries.",
            [f'"{date}" ({label})' for label, date in dates],
        )

    return make_check("P3", "parsability", name, "pass", "All dates use a consistent, recognized format.")


def check_no_empty_sections(data: AtsCheckInput) -> Check:
    name = "No empty sections"
    empty = [section.label for section in data.resume_data.sections if not section.items]

    if empty:
        return make_check(
            "P4",
            "parsability",
            name,
            "fail",
            f"{len(empty)} section(s) have no items.",
            [f'"{label}" is empty' for label in empty],
        )

    return make_check("P4", "parsability", name, "pass", "All sections contain at least one item.")


def check_summary_present(data: AtsCheckInput) -> Check:
    name = "Summary present"
    if is_blank(data.resume_data.summary):
        return make_check(
            "P5",
            "parsability",
            name,
            "warning",
            "No summary/objective found. A summary helps ATS parsers identify your profile.",
        )
    return make_check("P5", "parsability", name, "pass", "Summary section is present.")


def check_template_ats_safety(data: AtsCheckInput) -> Check:
    name = "Template ATS safety"
    html = data.html or ""
    unsafe = [tag for tag, pattern in _UNSAFE_TAGS if pattern.search(html)]

    if unsafe:
        return make_check(
            "P6",
            "parsability",
            name,
            "fail",
            f"HTML contains ATS-unfriendly elements: {', '.join(unsafe)}.",
            [f"{tag} may cause parsing issues in ATS systems" for tag in unsafe],
        )

    return make_check(
        "P6",
        "parsability",
        name,
        "pass",
        "Template uses ATS-safe HTML elements (no tables, images, canvas, or SVG).",
    )


def _has_large_absolute(html: str) -> bool:
    if not _ABSOLUTE_RE.search(html):
        return False
    # Absolute positioning is tolerated only inside small monogram-sized boxes.
    if any(int(match.group(1)) > SMALL_ABSOLUTE_MAX_WIDTH_PX for match in _SIZED_ABSOLUTE_RE.finditer(html)):
        return True
    return bool(_UNSIZED_ABSOLUTE_RE.search(html))


def check_no_header_footer_content(data: AtsCheckInput) -> Check:
    name = "No header/footer content"
    html = data.html or ""
    issues = []

    if _FIXED_RE.search(html):
        issues.append("Found position: fixed - content may be lost in ATS parsing")
    if _has_large_absolute(html):
        issues.append("Found position: absolute outside small container - content may shift in ATS parsing")

    if issues:
        return make_check(
            "P7",
            "parsability",
            name,
            "warning",
            "Fixed or absolutely positioned elements detected.",
            issues,
        )

    return make_check("P7", "parsability", name, "pass", "No fixed-position elements found.")


PARSABILITY_CHECKS = (
    check_contact_info,
    check_section_headings,
    check_date_format_consistency,
    check_no_empty_sections,
    check_summary_present,
    check_template_ats_safety,
    check_no_header_footer_content,
)
