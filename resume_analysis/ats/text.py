from __future__ import annotations

import re
from typing import Iterator

from resume_analysis.schemas.ats import Check, CheckCategory, CheckStatus
from resume_analysis.schemas.resume import (
    EducationItem,
    ExperienceItem,
    ProjectItem,
    ResumeData,
    SkillGroupItem,
)

_BULLET_MARKER_RE = re.compile(r"^[-*•·▪►→]\s*")


def make_check(
    check_id: str,
    category: CheckCategory,
    name: str,
    status: CheckStatus,
    message: str,
    details: list[str] | None = None,
) -> Check:
    return Check(id=check_id, category=category, name=name, status=status, message=message, details=details)


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def experience_items(resume: ResumeData) -> Iterator[ExperienceItem]:
    for section in resume.sections:
        if section.type == "experience":
            yield from section.items


def education_items(resume: ResumeData) -> Iterator[EducationItem]:
    for section in resume.sections:
        if section.type == "education":
            yield from section.items


def project_items(resume: ResumeData) -> Iterator[ProjectItem]:
    for section in resume.sections:
        if section.type == "projects":
            yield from section.items


def skill_groups(resume: ResumeData) -> Iterator[SkillGroupItem]:
    for section in resume.sections:
        if section.type == "skills":
            yield from section.items


def bullet_lines(description: str) -> list[str]:
    return [line for line in description.split("\n") if line.strip()]


def experience_bullets(resume: ResumeData) -> Iterator[tuple[ExperienceItem, str]]:
    for item in experience_items(resume):
        for line in bullet_lines(item.description):
            yield item, line


def strip_bullet_marker(line: str) -> str:
    return _BULLET_MARKER_RE.sub("", line.strip(), count=1)


def percent(ratio: float) -> int:
    # Half-up rounding, matching how the scores are presented elsewhere.
    return int(ratio * 100 + 0.5)
