from __future__ import annotations

import re

from resume_analysis.core.config.scoring import get_scoring_list, get_scoring_value
from resume_analysis.schemas.ats import AtsCheckInput, Check

from .text import experience_bullets, is_blank, make_check, percent, skill_groups, strip_bullet_marker

ACTION_VERBS = frozenset(get_scoring_list("ats.action_verbs"))

BULLET_MIN_CHARS = int(get_scoring_value("ats.readability.bullet_min_chars", 30))
BULLET_MAX_CHARS = int(get_scoring_value("ats.readability.bullet_max_chars", 200))
QUANTIFIED_MIN_RATIO = float(get_scoring_value("ats.readability.quantified_min_ratio", 0.20))
MIN_SECTIONS = int(get_scoring_value("ats.readability.min_sections", 3))
EXPERIENCE_MAX_INDEX = int(get_scoring_value("ats.readability.experience_max_index", 1))
SKILLS_MIN = int(get_scoring_value("ats.readability.skills_min", 8))
SKILLS_MAX = int(get_scoring_value("ats.readability.skills_max", 40))
SUMMARY_MIN_CHARS = int(get_scoring_value("ats.readability.summary_min_chars", 100))
SUMMARY_MAX_CHARS = int(get_scoring_value("ats.readability.summary_max_chars", 400))
ACTION_VERB_MIN_RATIO = float(get_scoring_value("ats.readability.action_verb_min_ratio", 0.60))
NON_ACTION_EXAMPLES = int(get_scoring_value("ats.readability.non_action_examples", 5))

QUANTIFIED_PATTERN = re.compile(
    r"\d+%|\$\d|[0-9]+[xX]|[0-9]+\s*(?:users|clients|team|projects|apps|increase|decrease|revenue|savings|improve)",
    re.IGNORECASE,
)


def check_bullet_point_length(data: AtsCheckInput) -> Check:
    name = "Bullet point length"
    offenders = []

    for item, line in experience_bullets(data.resume_data):
        bullet = line.strip()
        if len(bullet) > BULLET_MAX_CHARS:
            offenders.append(f'Too long ({len(bullet)} chars): "{bullet[:50]}..." - {item.title}')
        elif len(bullet) < BULLET_MIN_CHARS:
            offenders.append(f'Too short ({len(bullet)} chars): "{bullet}" - {item.title}')

    if offenders:
        return make_check(
            "R1",
            "readability",
            name,
            "warning",
            f"{len(offenders)} bullet(s) are outside the ideal {BULLET_MIN_CHARS}-{BULLET_MAX_CHARS} character range.",
            offenders,
        )

    return make_check(
        "R1",
        "readability",
        name,
        "pass",
        f"All bullet points are within the ideal {BULLET_MIN_CHARS}-{BULLET_MAX_CHARS} character range.",
    )


def check_quantified_achievements(data: AtsCheckInput) -> Check:
    name = "Quantified achievements"
    bullets = [line for _, line in experience_bullets(data.resume_data)]

    if not bullets:
        return make_check("R2", "readability", name, "warning", "No experience bullets to analyze.")

    quantified = sum(1 for bullet in bullets if QUANTIFIED_PATTERN.search(bullet))
    ratio = quantified / len(bullets)

    if ratio >= QUANTIFIED_MIN_RATIO:
        return make_check(
            "R2",
            "readability",
            name,
            "pass",
            f"{percent(ratio)}% of bullets contain quantified metrics ({quantified}/{len(bullets)}).",
        )

    return make_check(
        "R2",
        "readability",
        name,
        "warning",
        f"Only {percent(ratio)}% of bullets contain metrics ({quantified}/{len(bullets)}). "
        f"Aim for at least {percent(QUANTIFIED_MIN_RATIO)}%.",
    )


def check_section_count(data: AtsCheckInput) -> Check:
    name = "Section count"
    count = len(data.resume_data.sections)
    if count >= MIN_SECTIONS:
        return make_check("R3", "readability", name, "pass", f"Resume has {count} sections.")
    return make_check(
        "R3",
        "readability",
        name,
        "warning",
        f"Resume has only {count} section(s). Consider adding more for a complete profile.",
    )


def check_experience_position(data: AtsCheckInput) -> Check:
    name = "Experience section position"
    index = next(
        (position for position, section in enumerate(data.resume_data.sections) if section.type == "experience"),
        None,
    )

    if index is None:
        return make_check("R4", "readability", name, "warning", "No experience section found in the resume.")
    if index <= EXPERIENCE_MAX_INDEX:
        return make_check(
            "R4",
            "readability",
            name,
            "pass",
            f"Experience section is at position {index + 1} - prominently placed.",
        )
    return make_check(
        "R4",
        "readability",
        name,
        "warning",
        f"Experience section is at position {index + 1}. "
        f"Consider moving it to the top {EXPERIENCE_MAX_INDEX + 1} sections.",
    )


def check_skills_density(data: AtsCheckInput) -> Check:
    name = "Skills density"
    total = sum(len(group.skills) for group in skill_groups(data.resume_data))

    if total < SKILLS_MIN:
        return make_check(
            "R5",
            "readability",
            name,
            "warning",
            f"Only {total} skill(s) listed - too few. Consider adding more to improve keyword matching.",
        )
    if total > SKILLS_MAX:
        return make_check(
            "R5",
            "readability",
            name,
            "warning",
            f"{total} skills listed - this may appear as keyword stuffing. Consider focusing on the most relevant.",
        )
    return make_check("R5", "readability", name, "pass", f"{total} skills listed - good density for ATS matching.")


def check_summary_length(data: AtsCheckInput) -> Check:
    name = "Summary length"
    summary = data.resume_data.summary

    if is_blank(summary):
        return make_check("R6", "readability", name, "warning", "No summary present.")

    length = len(summary.strip())
    target = f"Aim for {SUMMARY_MIN_CHARS}-{SUMMARY_MAX_CHARS} characters."
    if length < SUMMARY_MIN_CHARS:
        return make_check("R6", "readability", name, "warning", f"Summary is {length} characters - too short. {target}")
    if length > SUMMARY_MAX_CHARS:
        return make_check("R6", "readability", name, "warning", f"Summary is {length} characters - too long. {target}")
    return make_check("R6", "readability", name, "pass", f"Summary is {length} characters - within the ideal range.")


def _first_word(bullet: str) -> str:
    words = strip_bullet_marker(bullet).split()
    return words[0].lower() if words else ""


def check_action_verbs(data: AtsCheckInput) -> Check:
    name = "Action verbs in bullets"
    total = 0
    with_verb = 0
    non_action: list[str] = []

    for item, line in experience_bullets(data.resume_data):
        total += 1
        if _first_word(line) in ACTION_VERBS:
            with_verb += 1
            continue
        stripped = strip_bullet_marker(line)
        preview = stripped[:60] + ("..." if len(stripped) > 60 else "")
        non_action.append(f'"{preview}" - {item.title}')

    if total == 0:
        return make_check("R7", "readability", name, "warning", "No experience bullets to analyze.")

    ratio = with_verb / total
    if ratio >= ACTION_VERB_MIN_RATIO:
        return make_check(
            "R7",
            "readability",
            name,
            "pass",
            f"{percent(ratio)}% of bullets start with strong action verbs ({with_verb}/{total}).",
        )

    return make_check(
        "R7",
        "readability",
        name,
        "warning",
        f"Only {percent(ratio)}% of bullets start with action verbs ({with_verb}/{total}). "
        f"Aim for at least {percent(ACTION_VERB_MIN_RATIO)}%.",
        non_action[:NON_ACTION_EXAMPLES],
    )


READABILITY_CHECKS = (
    check_bullet_point_length,
    check_quantified_achievements,
    check_section_count,
    check_experience_position,
    check_skills_density,
    check_summary_length,
    check_action_verbs,
)
