import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.matching.resolver import SynonymResolver, get_default_resolver  # noqa: E402


class SynonymResolverTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.resolver = get_default_resolver()

    def test_variants_include_self_and_registered_alternates(self):
        self.assertEqual(
            self.resolver.variants(".NET"),
            [".net", "dotnet", ".net core", "net core", "net-core", "dot net"],
        )
        self.assertEqual(self.resolver.variants("Kotlin"), ["kotlin"])

    def test_exact_contains_matches_synonyms(self):
        self.assertTrue(self.resolver.exact_contains("Built services on Amazon Web Services.", "aws"))
        self.assertTrue(self.resolver.exact_contains("Ran workloads on K8s clusters", "kubernetes"))

    def test_exact_contains_handles_symbol_terms(self):
        text = "Wrote C++ and C# daily; shipped .NET services"
        self.assertTrue(self.resolver.exact_contains(text, "c++"))
        self.assertTrue(self.resolver.exact_contains(text, "c#"))
        self.assertTrue(self.resolver.exact_contains(text, ".net"))

    def test_exact_contains_is_whole_word(self):
        self.assertFalse(self.resolver.exact_contains("javascripting all day", "javascript"))
        self.assertFalse(self.resolver.exact_contains("scalable systems", "scala"))

    def test_fuzzy_contains_uses_stems(self):
        text = "Managed data pipelines and testing"
        self.assertTrue(self.resolver.fuzzy_contains(text, "data pipeline testing"))
        self.assertEqual(self.resolver.match_method("javascripting all day", "javascript"), "fuzzy")

    def test_fuzzy_contains_needs_majority_of_stems(self):
        self.assertTrue(self.resolver.fuzzy_contains("data pipelines", "data pipeline testing"))
        self.assertFalse(self.resolver.fuzzy_contains("data work", "data pipeline testing"))
        self.assertFalse(self.resolver.fuzzy_contains("python developer", "kubernetes"))

    def test_stem_never_empties_a_token(self):
        self.assertEqual(self.resolver.stem("processes"), "process")
        self.assertEqual(self.resolver.stem("testing"), "test")
        self.assertEqual(self.resolver.stem("es"), "es")

    def test_empty_inputs_never_match(self):
        self.assertFalse(self.resolver.contains("", "python"))
        self.assertFalse(self.resolver.contains("python", ""))
        self.assertEqual(self.resolver.match_method("", ""), "none")

    def test_threshold_is_configurable(self):
        strict = SynonymResolver(fuzzy_threshold=1.0)
        self.assertFalse(strict.fuzzy_contains("data pipelines", "data pipeline testing"))


if __name__ == "__main__":
    unittest.main()
