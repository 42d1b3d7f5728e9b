from __future__ import annotations

import re

from resume_analysis.core.config.scoring import get_scoring_value

MAX_JD_LENGTH = int(get_scoring_value("sanitizer.max_jd_length", 10_000))

# C0 controls and DEL, keeping newline and tab.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F]")
_CODE_FENCE_RE = re.compile(r"```.*?```", re.DOTALL)
_INLINE_CODE_RE = re.compile(r"`[^`]*`")
_BRACE_SPAN_RE = re.compile(r"\{.*?\}", re.DOTALL)
_SPACE_RUN_RE = re.compile(r"[ \t]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def _drop_json_like(match: re.Match[str]) -> str:
    span = match.group(0)
    if '"' in span and ":" in span:
        return ""
    return span


def sanitize_job_description(raw: str) -> str:
    """Clean job-description text before it reaches the LLM or the matcher.

    Code fences, inline code and brace spans that look like JSON are removed
    because they are the usual carriers for prompt-injection payloads. The
    JSON heuristic also drops object-literal snippets that are legitimate JD
    content; that is accepted.
    """
    text = raw or ""

    text = _CONTROL_RE.sub("", text)
    text = _CODE_FENCE_RE.sub("", text)
    text = _INLINE_CODE_RE.sub("", text)
    text = _BRACE_SPAN_RE.sub(_drop_json_like, text)

    text = _SPACE_RUN_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    text = text.strip()

    if len(text) > MAX_JD_LENGTH:
        # Re-strip so a cut that lands on whitespace stays idempotent.
        text = text[:MAX_JD_LENGTH].rstrip()

    return text
