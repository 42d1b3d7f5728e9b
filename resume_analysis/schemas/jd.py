from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

ItemType = Literal["experience", "project", "skill_group"]
SuggestionType = Literal["include_experience", "include_project", "include_skill_group", "emphasize"]


class KeywordCategories(BaseModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)
    qualifications: list[str] = Field(default_factory=list)


class ExtractedKeywords(BaseModel):
    keywords: list[str] = Field(default_factory=list)
    categories: KeywordCategories = Field(default_factory=KeywordCategories)


class CmsExperience(BaseModel):
    id: str
    title: str = ""
    company: str = ""
    description: str = ""


class CmsProject(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)


class CmsSkillGroup(BaseModel):
    id: str
    category: str = ""
    skills: list[str] = Field(default_factory=list)


class CmsDataForAnalysis(BaseModel):
    experiences: list[CmsExperience] = Field(default_factory=list)
    projects: list[CmsProject] = Field(default_factory=list)
    skill_groups: list[CmsSkillGroup] = Field(default_factory=list)


@dataclass(frozen=True)
class CorpusEntry:
    text: str
    type: ItemType
    item_id: str


class ItemRef(BaseModel):
    type: ItemType
    item_id: str


class CoverageResult(BaseModel):
    score: float = Field(ge=0.0, le=1.0)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    # Insertion order follows the order keywords were supplied.
    keyword_item_map: dict[str, list[ItemRef]] = Field(default_factory=dict)


class Suggestion(BaseModel):
    type: SuggestionType
    item_id: str
    reason: str


class JdAnalysisResult(BaseModel):
    keywords: ExtractedKeywords
    coverage_score: float = Field(ge=0.0, le=1.0)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
