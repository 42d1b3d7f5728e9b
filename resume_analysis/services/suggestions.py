from __future__ import annotations

from resume_analysis.core.config.scoring import get_scoring_value
from resume_analysis.schemas.jd import (
    CmsDataForAnalysis,
    CoverageResult,
    ItemRef,
    ItemType,
    Suggestion,
    SuggestionType,
)

from .corpus import build_corpus
from .coverage import find_keyword_matches

EMPHASIZE_MIN_KEYWORDS = int(get_scoring_value("coverage.emphasize_min_keywords", 3))

_INCLUDE_TYPES: dict[ItemType, SuggestionType] = {
    "experience": "include_experience",
    "project": "include_project",
    "skill_group": "include_skill_group",
}


def _item_name(ref: ItemRef, cms_data: CmsDataForAnalysis) -> str:
    if ref.type == "experience":
        for exp in cms_data.experiences:
            if exp.id == ref.item_id:
                return f"{exp.title} at {exp.company}"
    elif ref.type == "project":
        for proj in cms_data.projects:
            if proj.id == ref.item_id:
                return proj.title
    elif ref.type == "skill_group":
        for group in cms_data.skill_groups:
            if group.id == ref.item_id:
                return group.category
    return ref.item_id


def _keyword_count_for_item(item_id: str, keyword_item_map: dict[str, list[ItemRef]]) -> int:
    return sum(
        1 for refs in keyword_item_map.values() if any(ref.item_id == item_id for ref in refs)
    )


def generate_suggestions(coverage: CoverageResult, cms_data: CmsDataForAnalysis) -> list[Suggestion]:
    """Recommend content items to add for missing keywords and to emphasize for strong ones.

    Each item id gets at most one suggestion; include suggestions for missing
    keywords are considered first.
    """
    suggestions: list[Suggestion] = []
    seen_item_ids: set[str] = set()

    corpus = build_corpus(cms_data)
    for keyword in coverage.missing_keywords:
        for ref in find_keyword_matches(keyword, corpus):
            if ref.item_id in seen_item_ids:
                continue
            seen_item_ids.add(ref.item_id)
            suggestions.append(
                Suggestion(
                    type=_INCLUDE_TYPES[ref.type],
                    item_id=ref.item_id,
                    reason=f'Matches keyword "{keyword}" - consider including "{_item_name(ref, cms_data)}"',
                )
            )

    for keyword in coverage.matched_keywords:
        for ref in coverage.keyword_item_map.get(keyword, []):
            if ref.item_id in seen_item_ids:
                continue
            keyword_count = _keyword_count_for_item(ref.item_id, coverage.keyword_item_map)
            if keyword_count < EMPHASIZE_MIN_KEYWORDS:
                continue
            seen_item_ids.add(ref.item_id)
            suggestions.append(
                Suggestion(
                    type="emphasize",
                    item_id=ref.item_id,
                    reason=f'Matches {keyword_count} keywords - consider emphasizing "{_item_name(ref, cms_data)}"',
                )
            )

    return suggestions
