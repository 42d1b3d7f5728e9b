from __future__ import annotations

from resume_analysis.schemas.jd import CmsDataForAnalysis, CorpusEntry


def build_corpus(cms_data: CmsDataForAnalysis) -> list[CorpusEntry]:
    entries: list[CorpusEntry] = []

    for exp in cms_data.experiences:
        entries.append(
            CorpusEntry(
                text=f"{exp.title} {exp.company} {exp.description}".lower(),
                type="experience",
                item_id=exp.id,
            )
        )

    for proj in cms_data.projects:
        entries.append(
            CorpusEntry(
                text=f"{proj.title} {proj.description} {' '.join(proj.tags)}".lower(),
                type="project",
                item_id=proj.id,
            )
        )

    for group in cms_data.skill_groups:
        entries.append(
            CorpusEntry(
                text=f"{group.category} {' '.join(group.skills)}".lower(),
                type="skill_group",
                item_id=group.id,
            )
        )

    return entries
