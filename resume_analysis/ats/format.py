from __future__ import annotations

import re

from resume_analysis.core.config.scoring import get_scoring_list, get_scoring_value
from resume_analysis.schemas.ats import AtsCheckInput, Check
from resume_analysis.schemas.resume import ResumeData

from .text import make_check

SAFE_FONTS = frozenset(get_scoring_list("ats.safe_fonts"))
FONT_SIZE_MIN_PT = float(get_scoring_value("ats.format.font_size_min_pt", 9))
FONT_SIZE_MAX_PT = float(get_scoring_value("ats.format.font_size_max_pt", 12))
CHARS_PER_PAGE = int(get_scoring_value("ats.format.chars_per_page", 3500))
MAX_PAGES = float(get_scoring_value("ats.format.max_pages", 1.5))

_FONT_SIZE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*pt", re.IGNORECASE)
_FANCY_QUOTES_RE = re.compile("[\u201C\u201D\u2018\u2019]")
_DASHES_RE = re.compile("[\u2013\u2014]")
_DECORATIVE_RE = re.compile(
    "[\u2022\u2023\u2043\u25AA\u25AB\u25B6\u25B8\u25BA\u25BC\u25C6"
    "\u2605\u2606\u2713\u2714\u2716\u2717\u2756\u2764\u2794\u27A1]"
)


def resume_text_parts(resume: ResumeData) -> list[str]:
    """Every user-visible text field of the resume, in reading order."""
    parts = [resume.profile.full_name, resume.profile.job_title]
    if resume.summary:
        parts.append(resume.summary)

    for section in resume.sections:
        parts.append(section.label)
        if section.type == "experience":
            for item in section.items:
                parts.extend([item.title, item.company, item.display_date, item.description])
        elif section.type == "education":
            for item in section.items:
                parts.extend([item.institution, item.degree, item.field_of_study or "", item.description or ""])
        elif section.type == "projects":
            for item in section.items:
                parts.extend([item.title, item.description, ", ".join(item.tags)])
        elif section.type == "skills":
            for group in section.items:
                parts.extend([group.category, ", ".join(group.skills)])
        elif section.type == "custom":
            parts.extend(item.content for item in section.items)

    return [part for part in parts if part]


def _prose_text_parts(resume: ResumeData) -> list[str]:
    """Prose fields only; dates, projects, skill lists and custom items are left out."""
    parts = [resume.summary or "", resume.profile.full_name, resume.profile.job_title]

    for section in resume.sections:
        parts.append(section.label)
        if section.type == "experience":
            for item in section.items:
                parts.extend([item.title, item.company, item.description])
        elif section.type == "education":
            for item in section.items:
                parts.extend([item.institution, item.degree, item.field_of_study or "", item.description or ""])

    return [part for part in parts if part]


def _primary_font(font_family: str) -> str:
    return font_family.split(",")[0].strip()


def check_font_safety(data: AtsCheckInput) -> Check:
    name = "Font is web-safe/embeddable"
    primary = _primary_font(data.resume_data.style.font_family)
    normalized = primary.replace('"', "").replace("'", "").strip().lower()

    if normalized in SAFE_FONTS:
        return make_check("F1", "format", name, "pass", f'"{primary}" is a safe, widely supported font.')
    return make_check(
        "F1",
        "format",
        name,
        "warning",
        f'"{primary}" may not be recognized by all ATS parsers. Consider using a standard font.',
    )


def check_font_size(data: AtsCheckInput) -> Check:
    name = "Font size readable"
    font_size = data.resume_data.style.font_size
    match = _FONT_SIZE_RE.fullmatch(font_size.strip())

    if match is None:
        return make_check(
            "F2",
            "format",
            name,
            "warning",
            f'Font size "{font_size}" uses a non-standard unit. Expected pt (points).',
        )

    size = float(match.group(1))
    target = f"{FONT_SIZE_MIN_PT:g}-{FONT_SIZE_MAX_PT:g}pt"
    if size < FONT_SIZE_MIN_PT:
        return make_check("F2", "format", name, "warning", f"Font size {size:g}pt is too small. Aim for {target} for readability.")
    if size > FONT_SIZE_MAX_PT:
        return make_check("F2", "format", name, "warning", f"Font size {size:g}pt is larger than typical. Aim for {target}.")
    return make_check("F2", "format", name, "pass", f"Font size {size:g}pt is within the ideal {target} range.")


def check_page_length(data: AtsCheckInput) -> Check:
    name = "Page length estimate"
    total_chars = sum(len(part) for part in resume_text_parts(data.resume_data))
    # Fixed characters-per-page heuristic; font size and margins are not considered.
    estimated_pages = total_chars / CHARS_PER_PAGE

    if estimated_pages > MAX_PAGES:
        return make_check(
            "F3",
            "format",
            name,
            "warning",
            f"Estimated content length (~{total_chars} chars) likely exceeds a single page. Consider trimming.",
        )
    return make_check(
        "F3",
        "format",
        name,
        "pass",
        f"Content length (~{total_chars} chars) should fit within a standard resume length.",
    )


def check_special_characters(data: AtsCheckInput) -> Check:
    name = "Special characters"
    full_text = " ".join(_prose_text_parts(data.resume_data))
    issues = []

    quotes = len(_FANCY_QUOTES_RE.findall(full_text))
    dashes = len(_DASHES_RE.findall(full_text))
    decorative = len(_DECORATIVE_RE.findall(full_text))

    if quotes:
        issues.append(f"{quotes} fancy quote(s) found (\u201C \u201D \u2018 \u2019) - may render as boxes in some ATS")
    if dashes:
        issues.append(f"{dashes} em/en dash(es) found (\u2013 \u2014) - some ATS may not parse these correctly")
    if decorative:
        issues.append(f"{decorative} decorative symbol(s) found - may not render in ATS systems")

    if issues:
        return make_check(
            "F4",
            "format",
            name,
            "warning",
            "Non-standard Unicode characters detected that may cause issues in some ATS parsers.",
            issues,
        )
    return make_check("F4", "format", name, "pass", "No problematic special characters found.")


FORMAT_CHECKS = (
    check_font_safety,
    check_font_size,
    check_page_length,
    check_special_characters,
)
