from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

PageSize = Literal["A4", "Letter"]
SectionType = Literal["experience", "projects", "skills", "education", "custom"]


class ResumeProfile(BaseModel):
    full_name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str | None = None
    location: str | None = None
    website_url: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None


class ExperienceItem(BaseModel):
    title: str = ""
    company: str = ""
    display_date: str = ""
    description: str = ""


class ProjectItem(BaseModel):
    title: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    source_code_url: str | None = None
    live_site_url: str | None = None


class SkillGroupItem(BaseModel):
    category: str = ""
    skills: list[str] = Field(default_factory=list)


class EducationItem(BaseModel):
    institution: str = ""
    degree: str = ""
    field_of_study: str | None = None
    display_date: str = ""
    description: str | None = None


class CustomItem(BaseModel):
    content: str = ""


class ExperienceSection(BaseModel):
    type: Literal["experience"] = "experience"
    label: str
    items: list[ExperienceItem] = Field(default_factory=list)


class ProjectsSection(BaseModel):
    type: Literal["projects"] = "projects"
    label: str
    items: list[ProjectItem] = Field(default_factory=list)


class SkillsSection(BaseModel):
    type: Literal["skills"] = "skills"
    label: str
    items: list[SkillGroupItem] = Field(default_factory=list)


class EducationSection(BaseModel):
    type: Literal["education"] = "education"
    label: str
    items: list[EducationItem] = Field(default_factory=list)


class CustomSection(BaseModel):
    type: Literal["custom"] = "custom"
    label: str
    items: list[CustomItem] = Field(default_factory=list)


ResumeSection = Annotated[
    Union[ExperienceSection, ProjectsSection, SkillsSection, EducationSection, CustomSection],
    Field(discriminator="type"),
]


class ResumeMargins(BaseModel):
    top: str = "0.75in"
    right: str = "0.75in"
    bottom: str = "0.75in"
    left: str = "0.75in"


class ResumeStyle(BaseModel):
    primary_color: str = "#1a1a1a"
    accent_color: str = "#2563eb"
    font_family: str = "Inter, sans-serif"
    heading_font_family: str = "Inter, sans-serif"
    font_size: str = "10pt"
    line_height: str = "1.4"
    margins: ResumeMargins = Field(default_factory=ResumeMargins)


class ResumeData(BaseModel):
    """Assembled resume as handed to the template renderer and the ATS checks."""

    profile: ResumeProfile
    summary: str | None = None
    sections: list[ResumeSection] = Field(default_factory=list)
    style: ResumeStyle = Field(default_factory=ResumeStyle)
    page_size: PageSize = "Letter"
