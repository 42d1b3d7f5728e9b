import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analysis.core.config.scoring import get_scoring_config, get_scoring_list, get_scoring_value


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("coverage.fuzzy_threshold"), 0.85)
        self.assertEqual(get_scoring_value("sanitizer.max_jd_length"), 10000)

    def test_missing_paths_fall_back_to_default(self):
        self.assertIsNone(get_scoring_value("coverage.nope"))
        self.assertEqual(get_scoring_value("coverage.fuzzy_threshold.deeper", 7), 7)
        self.assertEqual(get_scoring_value("", 3), 3)

    def test_word_lists_are_lowercase(self):
        headings = get_scoring_list("ats.standard_section_headings")
        self.assertIn("experience", headings)
        self.assertTrue(all(h == h.lower() for h in headings))
        self.assertIn("led", get_scoring_list("ats.action_verbs"))

    def test_non_list_value_is_rejected(self):
        with self.assertRaises(RuntimeError):
            get_scoring_list("coverage.fuzzy_threshold")


if __name__ == "__main__":
    unittest.main()
