from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence

from resume_analysis.core.config.scoring import get_scoring_value
from resume_analysis.schemas.jd import CmsDataForAnalysis, CorpusEntry, CoverageResult, ItemRef
from resume_analysis.semantic.similarity import is_fuzzy_match
from resume_analysis.taxonomy import get_default_alias_provider

from .corpus import build_corpus

MIN_FUZZY_WORD_LENGTH = int(get_scoring_value("coverage.min_fuzzy_word_length", 3))

_WORD_SPLIT_RE = re.compile(r"[\s,;|/]+")


@lru_cache(maxsize=512)
def _term_pattern(term: str) -> re.Pattern[str]:
    # A term counts as a whole token when it sits between list/path delimiters,
    # so "node.js" matches inside "node.js developer" and "(react)".
    return re.compile(rf"(?:^|[\s,;|/(]){re.escape(term)}(?:[\s,;|/).]|$)", re.IGNORECASE)


def matches_in_text(term: str, text: str) -> bool:
    return bool(_term_pattern(term).search(text))


def _fuzzy_words(text: str) -> list[str]:
    return [word for word in _WORD_SPLIT_RE.split(text) if len(word) >= MIN_FUZZY_WORD_LENGTH]


def _entry_matches(search_terms: Sequence[str], entry: CorpusEntry) -> bool:
    words: list[str] | None = None
    for term in search_terms:
        if matches_in_text(term, entry.text):
            return True
        if words is None:
            words = _fuzzy_words(entry.text)
        if any(is_fuzzy_match(term, word) for word in words):
            return True
    return False


def find_keyword_matches(keyword: str, corpus: Sequence[CorpusEntry]) -> list[ItemRef]:
    """Every corpus item mentioning the keyword or one of its aliases, in corpus order."""
    search_terms = get_default_alias_provider().search_terms(keyword)
    return [
        ItemRef(type=entry.type, item_id=entry.item_id)
        for entry in corpus
        if _entry_matches(search_terms, entry)
    ]


def score_coverage(keywords: Sequence[str], cms_data: CmsDataForAnalysis) -> CoverageResult:
    if not keywords:
        return CoverageResult(score=0.0)

    corpus = build_corpus(cms_data)

    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    keyword_item_map: dict[str, list[ItemRef]] = {}

    for keyword in keywords:
        matches = find_keyword_matches(keyword, corpus)
        if matches:
            matched_keywords.append(keyword)
            keyword_item_map[keyword] = matches
        else:
            missing_keywords.append(keyword)

    return CoverageResult(
        score=len(matched_keywords) / len(keywords),
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
        keyword_item_map=keyword_item_map,
    )
