from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from resume_analysis.core.config.scoring import get_scoring_value

# Section headings and JD keywords are both accepted at this threshold.
FUZZY_SIMILARITY_THRESHOLD = float(get_scoring_value("coverage.fuzzy_threshold", 0.85))


def normalized_similarity(a: str, b: str) -> float:
    """Return ``1 - levenshtein(a, b) / max(len(a), len(b))``; two empty strings are identical."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / max_len


def is_fuzzy_match(a: str, b: str, threshold: float = FUZZY_SIMILARITY_THRESHOLD) -> bool:
    return normalized_similarity(a, b) >= threshold
