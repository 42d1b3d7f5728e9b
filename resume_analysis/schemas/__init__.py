from .ats import AtsCheckInput, CategorySummary, Check, CheckResult, JdCoverageInput
from .jd import (
    CmsDataForAnalysis,
    CmsExperience,
    CmsProject,
    CmsSkillGroup,
    CorpusEntry,
    CoverageResult,
    ExtractedKeywords,
    ItemRef,
    JdAnalysisResult,
    KeywordCategories,
    Suggestion,
)
from .resume import (
    CustomItem,
    CustomSection,
    EducationItem,
    EducationSection,
    ExperienceItem,
    ExperienceSection,
    ProjectItem,
    ProjectsSection,
    ResumeData,
    ResumeMargins,
    ResumeProfile,
    ResumeStyle,
    SkillGroupItem,
    SkillsSection,
)

__all__ = [
    "AtsCheckInput",
    "CategorySummary",
    "Check",
    "CheckResult",
    "JdCoverageInput",
    "CmsDataForAnalysis",
    "CmsExperience",
    "CmsProject",
    "CmsSkillGroup",
    "CorpusEntry",
    "CoverageResult",
    "ExtractedKeywords",
    "ItemRef",
    "JdAnalysisResult",
    "KeywordCategories",
    "Suggestion",
    "CustomItem",
    "CustomSection",
    "EducationItem",
    "EducationSection",
    "ExperienceItem",
    "ExperienceSection",
    "ProjectItem",
    "ProjectsSection",
    "ResumeData",
    "ResumeMargins",
    "ResumeProfile",
    "ResumeStyle",
    "SkillGroupItem",
    "SkillsSection",
]
