from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from .resume import ResumeData

CheckStatus = Literal["pass", "warning", "fail"]
CheckCategory = Literal["parsability", "keywords", "readability", "format"]


class Check(BaseModel):
    id: str
    category: CheckCategory
    name: str
    status: CheckStatus
    message: str
    details: list[str] | None = None


class CategorySummary(BaseModel):
    category: CheckCategory
    label: str
    passed: int = Field(ge=0)
    warned: int = Field(ge=0)
    failed: int = Field(ge=0)
    total: int = Field(ge=0)
    checks: list[Check]


class CheckResult(BaseModel):
    score: int = Field(ge=0, le=100)
    categories: list[CategorySummary]
    total_passed: int = Field(ge=0)
    total_warned: int = Field(ge=0)
    total_failed: int = Field(ge=0)
    total_checks: int = Field(ge=0)
    checked_at: str


class JdCoverageInput(BaseModel):
    """The slice of a coverage result the keyword checks look at."""

    coverage_score: float = Field(ge=0.0, le=1.0)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class AtsCheckInput:
    resume_data: ResumeData
    html: str
    jd_analysis: JdCoverageInput | None = None
