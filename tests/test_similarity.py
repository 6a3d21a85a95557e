import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.semantic import tfidf_similarity  # noqa: E402


class TfidfSimilarityTests(unittest.TestCase):
    def test_identical_texts(self):
        self.assertAlmostEqual(tfidf_similarity("python sql aws", "Python, SQL, AWS"), 1.0)

    def test_disjoint_texts(self):
        self.assertEqual(tfidf_similarity("python sql", "nursing care"), 0.0)

    def test_empty_texts(self):
        self.assertEqual(tfidf_similarity("", ""), 0.0)
        self.assertEqual(tfidf_similarity("python", ""), 0.0)

    def test_partial_overlap_is_between_bounds(self):
        value = tfidf_similarity("python developer with sql", "python engineer with docker")
        self.assertGreater(value, 0.0)
        self.assertLess(value, 1.0)


if __name__ == "__main__":
    unittest.main()
