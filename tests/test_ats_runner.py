import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from _resume_fixtures import CLEAN_HTML, strong_resume  # noqa: E402

from resume_analysis.ats import BASE_CHECK_COUNT, FULL_CHECK_COUNT, aggregate_checks, run_checks  # noqa: E402
from resume_analysis.ats.text import make_check  # noqa: E402
from resume_analysis.schemas.ats import JdCoverageInput  # noqa: E402


class RunChecksTests(unittest.TestCase):
    def test_check_counts(self):
        self.assertEqual(BASE_CHECK_COUNT, 18)
        self.assertEqual(FULL_CHECK_COUNT, 21)

    def test_strong_resume_without_jd(self):
        result = run_checks(strong_resume(), CLEAN_HTML)

        self.assertEqual(result.total_checks, BASE_CHECK_COUNT)
        self.assertEqual(result.total_failed, 0)
        self.assertEqual(result.score, 100)
        self.assertEqual([c.category for c in result.categories], ["parsability", "readability", "format"])
        self.assertEqual([c.label for c in result.categories], ["Parsability", "Readability & Structure", "Format Compliance"])

    def test_keyword_category_appears_with_jd(self):
        jd = JdCoverageInput(
            coverage_score=0.4,
            matched_keywords=["Python", "TypeScript", "Kubernetes"],
            missing_keywords=["Rust"],
        )
        result = run_checks(strong_resume(), CLEAN_HTML, jd)

        self.assertEqual(result.total_checks, FULL_CHECK_COUNT)
        self.assertEqual([c.category for c in result.categories], ["parsability", "keywords", "readability", "format"])
        keywords = result.categories[1]
        self.assertEqual([check.id for check in keywords.checks], ["K1", "K2", "K3"])
        self.assertEqual((keywords.passed, keywords.warned, keywords.failed), (1, 1, 1))
        # (19 + 0.5) / 21
        self.assertEqual(result.score, 93)

    def test_totals_are_consistent(self):
        resume = strong_resume(summary=None, sections=[])
        result = run_checks(resume, "<table><tr><td>x</td></tr></table>")

        self.assertEqual(result.total_passed + result.total_warned + result.total_failed, result.total_checks)
        self.assertEqual(sum(c.total for c in result.categories), result.total_checks)
        for summary in result.categories:
            self.assertEqual(summary.total, len(summary.checks))
            self.assertTrue(all(check.category == summary.category for check in summary.checks))
        self.assertGreaterEqual(result.score, 0)
        self.assertLessEqual(result.score, 100)
        self.assertLess(result.score, 100)

    def test_checks_keep_their_order_within_categories(self):
        result = run_checks(strong_resume(), CLEAN_HTML)
        ids = [check.id for summary in result.categories for check in summary.checks]
        self.assertEqual(
            ids,
            ["P1", "P2", "P3", "P4", "P5", "P6", "P7", "R1", "R2", "R3", "R4", "R5", "R6", "R7", "F1", "F2", "F3", "F4"],
        )


class AggregateChecksTests(unittest.TestCase):
    def test_score_and_timestamp(self):
        checks = [
            make_check("P1", "parsability", "a", "pass", "ok"),
            make_check("F1", "format", "b", "warning", "hm"),
            make_check("F2", "format", "c", "fail", "no"),
        ]
        stamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        result = aggregate_checks(checks, checked_at=stamp)

        # (1 + 0.5) / 3
        self.assertEqual(result.score, 50)
        self.assertEqual(result.checked_at, "2026-01-02T03:04:05Z")
        self.assertEqual([c.category for c in result.categories], ["parsability", "format"])
        self.assertEqual(result.categories[1].warned, 1)
        self.assertEqual(result.categories[1].failed, 1)

    def test_no_checks_scores_zero(self):
        result = aggregate_checks([])
        self.assertEqual(result.score, 0)
        self.assertEqual(result.categories, [])
        self.assertTrue(result.checked_at.endswith("Z"))


if __name__ == "__main__":
    unittest.main()
