from .corpus import build_corpus
from .coverage import find_keyword_matches, matches_in_text, score_coverage
from .jd_analysis import analyze_job_description
from .jd_llm import JdAnalysisError
from .keyword_extractor import extract_keywords, parse_extracted_keywords
from .suggestions import generate_suggestions

__all__ = [
    "JdAnalysisError",
    "analyze_job_description",
    "build_corpus",
    "extract_keywords",
    "find_keyword_matches",
    "generate_suggestions",
    "matches_in_text",
    "parse_extracted_keywords",
    "score_coverage",
]
