import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from _resume_fixtures import CLEAN_HTML, GOOD_SUMMARY, strong_resume  # noqa: E402

from resume_analysis.ats.keywords import (  # noqa: E402
    check_jd_keyword_coverage,
    check_keywords_in_summary,
    check_missing_keywords,
)
from resume_analysis.ats.readability import (  # noqa: E402
    check_action_verbs,
    check_bullet_point_length,
    check_experience_position,
    check_quantified_achievements,
    check_section_count,
    check_skills_density,
    check_summary_length,
)
from resume_analysis.schemas.ats import AtsCheckInput, JdCoverageInput  # noqa: E402
from resume_analysis.schemas.resume import (  # noqa: E402
    CustomItem,
    CustomSection,
    ExperienceItem,
    ExperienceSection,
    SkillGroupItem,
    SkillsSection,
)


def _input(resume=None, jd=None) -> AtsCheckInput:
    return AtsCheckInput(resume_data=resume or strong_resume(), html=CLEAN_HTML, jd_analysis=jd)


def _with_bullets(*bullets: str):
    section = ExperienceSection(
        label="Experience",
        items=[ExperienceItem(title="Engineer", company="Co", display_date="2020", description="\n".join(bullets))],
    )
    return strong_resume(sections=[section])


class KeywordCheckTests(unittest.TestCase):
    def test_keyword_checks_are_skipped_without_jd(self):
        data = _input()
        self.assertIsNone(check_jd_keyword_coverage(data))
        self.assertIsNone(check_missing_keywords(data))
        self.assertIsNone(check_keywords_in_summary(data))

    def test_coverage_thresholds(self):
        cases = [(0.7, "pass", "70%"), (0.69, "warning", "69%"), (0.5, "warning", "50%"), (0.499, "fail", "50%")]
        for score, status, shown in cases:
            check = check_jd_keyword_coverage(_input(jd=JdCoverageInput(coverage_score=score)))
            self.assertEqual(check.status, status, score)
            self.assertIn(shown, check.message)

    def test_missing_keywords_are_listed(self):
        jd = JdCoverageInput(coverage_score=0.5, missing_keywords=["Rust", "gRPC"])
        check = check_missing_keywords(_input(jd=jd))
        self.assertEqual(check.status, "warning")
        self.assertEqual(check.details, ["Rust", "gRPC"])
        jd = JdCoverageInput(coverage_score=1.0)
        self.assertEqual(check_missing_keywords(_input(jd=jd)).status, "pass")

    def test_summary_keywords(self):
        jd = JdCoverageInput(coverage_score=0.8, matched_keywords=["Python", "TypeScript", "Kubernetes", "Go"])
        self.assertEqual(check_keywords_in_summary(_input(jd=jd)).status, "pass")

        jd = JdCoverageInput(coverage_score=0.8, matched_keywords=["python", "Rust"])
        check = check_keywords_in_summary(_input(jd=jd))
        self.assertEqual(check.status, "warning")
        self.assertEqual(check.details, ["Found: python"])

        check = check_keywords_in_summary(_input(strong_resume(summary=None), jd=jd))
        self.assertEqual(check.status, "warning")
        self.assertIsNone(check.details)


class BulletLengthTests(unittest.TestCase):
    def test_short_and_long_bullets_are_offenders(self):
        resume = _with_bullets("Fixed bugs", "Built " + "x" * 210, "Designed a service mesh rollout across four regions")
        check = check_bullet_point_length(_input(resume))
        self.assertEqual(check.status, "warning")
        self.assertEqual(len(check.details), 2)
        self.assertTrue(check.details[0].startswith("Too short (10 chars)"))
        self.assertTrue(check.details[1].startswith("Too long (216 chars)"))

    def test_blank_lines_are_ignored(self):
        resume = _with_bullets("Designed a service mesh rollout across four regions", "", "   ")
        self.assertEqual(check_bullet_point_length(_input(resume)).status, "pass")


class QuantifiedTests(unittest.TestCase):
    def test_no_bullets_warns(self):
        resume = strong_resume(sections=[CustomSection(label="Interests", items=[CustomItem(content="Chess")])])
        check = check_quantified_achievements(_input(resume))
        self.assertEqual(check.status, "warning")
        self.assertEqual(check.message, "No experience bullets to analyze.")

    def test_ratio_threshold(self):
        plain = "Worked on internal tooling for the platform team"
        resume = _with_bullets("Cut costs by 30%", plain, plain, plain, plain)
        self.assertEqual(check_quantified_achievements(_input(resume)).status, "pass")
        resume = _with_bullets("Cut costs by 30%", plain, plain, plain, plain, plain)
        self.assertEqual(check_quantified_achievements(_input(resume)).status, "warning")

    def test_metric_patterns(self):
        for bullet in ("Saved $40k", "Made builds 3x faster", "Onboarded 120 clients", "Grew by 15%"):
            check = check_quantified_achievements(_input(_with_bullets(bullet)))
            self.assertEqual(check.status, "pass", bullet)


class StructureTests(unittest.TestCase):
    def test_section_count(self):
        self.assertEqual(check_section_count(_input()).status, "pass")
        resume = strong_resume(sections=strong_resume().sections[:2])
        self.assertEqual(check_section_count(_input(resume)).status, "warning")

    def test_experience_position(self):
        sections = strong_resume().sections
        experience, skills, education = sections
        resume = strong_resume(sections=[skills, experience, education])
        self.assertEqual(check_experience_position(_input(resume)).status, "pass")

        resume = strong_resume(sections=[skills, education, experience])
        check = check_experience_position(_input(resume))
        self.assertEqual(check.status, "warning")
        self.assertIn("position 3", check.message)

        check = check_experience_position(_input(strong_resume(sections=[skills, education])))
        self.assertEqual(check.message, "No experience section found in the resume.")

    def test_skills_density(self):
        def skills(count):
            group = SkillGroupItem(category="All", skills=[f"skill{i}" for i in range(count)])
            return strong_resume(sections=[SkillsSection(label="Skills", items=[group])])

        self.assertIn("too few", check_skills_density(_input(skills(7))).message)
        self.assertEqual(check_skills_density(_input(skills(8))).status, "pass")
        self.assertEqual(check_skills_density(_input(skills(40))).status, "pass")
        self.assertIn("keyword stuffing", check_skills_density(_input(skills(41))).message)

    def test_summary_length(self):
        self.assertEqual(check_summary_length(_input()).status, "pass")
        self.assertIn("too short", check_summary_length(_input(strong_resume(summary="Engineer."))).message)
        self.assertIn("too long", check_summary_length(_input(strong_resume(summary=GOOD_SUMMARY * 3))).message)
        self.assertEqual(check_summary_length(_input(strong_resume(summary=None))).message, "No summary present.")


class ActionVerbTests(unittest.TestCase):
    def test_markers_are_stripped_before_checking_the_verb(self):
        resume = _with_bullets("• Led the platform team", "- Built the API gateway", "* Responsible for QA")
        check = check_action_verbs(_input(resume))
        self.assertEqual(check.status, "pass")
        self.assertIn("(2/3)", check.message)

    def test_non_action_bullets_are_listed_up_to_five(self):
        bullets = [f"Responsible for area number {i} of the product surface and its long tail" for i in range(7)]
        check = check_action_verbs(_input(_with_bullets(*bullets)))
        self.assertEqual(check.status, "warning")
        self.assertEqual(len(check.details), 5)
        self.assertTrue(check.details[0].startswith('"Responsible for area number 0 of the product surface and its...'))


if __name__ == "__main__":
    unittest.main()
