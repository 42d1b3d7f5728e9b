import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from _resume_fixtures import sample_cms  # noqa: E402

from resume_analysis.schemas.jd import (  # noqa: E402
    CmsDataForAnalysis,
    CmsExperience,
    CmsProject,
    CmsSkillGroup,
    ItemRef,
)
from resume_analysis.services.corpus import build_corpus  # noqa: E402
from resume_analysis.services.coverage import matches_in_text, score_coverage  # noqa: E402


def _skills(*skills: str, item_id: str = "sg-1") -> CmsDataForAnalysis:
    return CmsDataForAnalysis(skill_groups=[CmsSkillGroup(id=item_id, category="Tools", skills=list(skills))])


class BuildCorpusTests(unittest.TestCase):
    def test_entries_are_lowercased_and_tagged_in_source_order(self):
        corpus = build_corpus(sample_cms())
        self.assertEqual(
            [(entry.type, entry.item_id) for entry in corpus],
            [
                ("experience", "exp-1"),
                ("experience", "exp-2"),
                ("project", "proj-1"),
                ("skill_group", "sg-1"),
                ("skill_group", "sg-2"),
            ],
        )
        self.assertEqual(corpus[2].text, "portfolio personal site built with next.js react tailwind")
        self.assertEqual(corpus[3].text, "frontend react typescript")

    def test_empty_cms_gives_empty_corpus(self):
        self.assertEqual(build_corpus(CmsDataForAnalysis()), [])


class MatchesInTextTests(unittest.TestCase):
    def test_dotted_terms_match_as_whole_tokens(self):
        self.assertTrue(matches_in_text("node.js", "node.js developer"))
        self.assertTrue(matches_in_text("react", "skills (react)"))
        self.assertTrue(matches_in_text("ci/cd", "built ci/cd pipelines"))

    def test_terms_inside_other_words_do_not_match(self):
        self.assertFalse(matches_in_text("java", "javascript engineer"))
        self.assertFalse(matches_in_text("go", "good communication"))


class ScoreCoverageTests(unittest.TestCase):
    def test_empty_keyword_list_scores_zero(self):
        result = score_coverage([], sample_cms())
        self.assertEqual(result.score, 0)
        self.assertEqual(result.matched_keywords, [])
        self.assertEqual(result.missing_keywords, [])
        self.assertEqual(result.keyword_item_map, {})

    def test_case_insensitive_exact_match(self):
        result = score_coverage(["react", "typescript"], _skills("React", "TypeScript"))
        self.assertEqual(result.score, 1)
        self.assertEqual(result.matched_keywords, ["react", "typescript"])
        self.assertEqual(result.missing_keywords, [])

    def test_aliases_resolve_in_both_directions(self):
        kubernetes_corpus = _skills("Kubernetes", "Helm")
        k8s_corpus = _skills("k8s", "Helm")
        self.assertEqual(score_coverage(["k8s"], kubernetes_corpus).matched_keywords, ["k8s"])
        self.assertEqual(score_coverage(["Kubernetes"], k8s_corpus).matched_keywords, ["Kubernetes"])
        self.assertEqual(score_coverage(["CI/CD"], _skills("cicd")).score, 1)

    def test_fuzzy_match_tolerates_small_typos(self):
        result = score_coverage(["Kubernetes"], _skills("Kubernets"))
        self.assertEqual(result.matched_keywords, ["Kubernetes"])

    def test_short_words_are_not_fuzzy_matched(self):
        result = score_coverage(["Rust"], _skills("Go", "C"))
        self.assertEqual(result.missing_keywords, ["Rust"])

    def test_every_matching_item_is_recorded(self):
        result = score_coverage(["React"], sample_cms())
        self.assertEqual(
            result.keyword_item_map["React"],
            [
                ItemRef(type="experience", item_id="exp-1"),
                ItemRef(type="project", item_id="proj-1"),
                ItemRef(type="skill_group", item_id="sg-1"),
            ],
        )

    def test_lists_keep_input_order_and_partition_keywords(self):
        keywords = ["Terraform", "Haskell", "Node.js", "COBOL", "AWS"]
        result = score_coverage(keywords, sample_cms())
        self.assertEqual(result.matched_keywords, ["Terraform", "Node.js", "AWS"])
        self.assertEqual(result.missing_keywords, ["Haskell", "COBOL"])
        self.assertEqual(len(result.matched_keywords) + len(result.missing_keywords), len(keywords))
        self.assertAlmostEqual(result.score, 3 / 5)
        self.assertEqual(list(result.keyword_item_map), ["Terraform", "Node.js", "AWS"])

    def test_empty_corpus_misses_everything(self):
        result = score_coverage(["Python", "SQL"], CmsDataForAnalysis())
        self.assertEqual(result.score, 0)
        self.assertEqual(result.missing_keywords, ["Python", "SQL"])

    def test_project_tags_are_searchable(self):
        cms = CmsDataForAnalysis(
            projects=[CmsProject(id="p-9", title="CLI", description="Terminal tool", tags=["Rust", "Tokio"])],
            experiences=[CmsExperience(id="e-9", title="Dev", company="X", description="Wrote docs")],
        )
        result = score_coverage(["tokio"], cms)
        self.assertEqual(result.keyword_item_map["tokio"], [ItemRef(type="project", item_id="p-9")])


if __name__ == "__main__":
    unittest.main()
