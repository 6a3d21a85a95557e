import math
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.matching.model import LogisticModel, compute_features, get_default_model  # noqa: E402

FEATURES = ("overlap_ratio", "resume_coverage", "length_diff", "kw_ratio")


class LogisticModelTests(unittest.TestCase):
    def test_default_artifact_is_loaded_from_config(self):
        model = get_default_model()
        self.assertEqual(model.version, "lr-2024.1")
        self.assertEqual(model.features, FEATURES)
        self.assertEqual(len(model.weights), 4)
        self.assertAlmostEqual(model.intercept, -2.288096774813138)

    def test_all_zero_features_give_intercept_probability(self):
        model = get_default_model()
        expected = 1 / (1 + math.exp(2.288096774813138))
        self.assertAlmostEqual(model.predict_proba({}), expected)
        self.assertAlmostEqual(model.score(dict.fromkeys(FEATURES, 0.0)), expected * 100)

    def test_extreme_decision_values_stay_finite(self):
        model = LogisticModel(
            version="test",
            feature_set="lexical-v1",
            features=("kw_ratio",),
            weights=(5000.0,),
            intercept=0.0,
        )
        self.assertEqual(model.score({"kw_ratio": 1.0}), 100.0)
        self.assertEqual(model.score({"kw_ratio": -1.0}), 0.0)

    def test_validation(self):
        with self.assertRaises(ValueError):
            LogisticModel(version="v", feature_set="", features=("kw_ratio",), weights=(), intercept=0.0)
        with self.assertRaises(ValueError):
            LogisticModel(version="v", feature_set="", features=("bogus",), weights=(1.0,), intercept=0.0)
        with self.assertRaises(RuntimeError):
            LogisticModel.from_config({"version": "v", "features": ["kw_ratio"]})
        with self.assertRaises(RuntimeError):
            LogisticModel.from_config(["not", "a", "mapping"])
        with self.assertRaises(RuntimeError):
            LogisticModel.from_config(
                {"version": "v", "features": ["kw_ratio", "length_diff"], "weights": [1.0], "intercept": 0}
            )


class FeatureTests(unittest.TestCase):
    def test_feature_values(self):
        features = compute_features(
            "Experienced Python developer with SQL and AWS.",
            "Requirements: Python, SQL, AWS\nPreferred: Docker",
        )
        self.assertAlmostEqual(features["overlap_ratio"], 0.75)
        self.assertAlmostEqual(features["resume_coverage"], 0.75)
        self.assertAlmostEqual(features["length_diff"], 0.0)
        self.assertAlmostEqual(features["kw_ratio"], 0.75)

    def test_empty_texts_give_finite_features(self):
        for resume, jd in (("", ""), ("", "Python and SQL"), ("Python and SQL", "")):
            features = compute_features(resume, jd)
            self.assertEqual(set(features), set(FEATURES))
            for value in features.values():
                self.assertTrue(math.isfinite(value))
                self.assertGreaterEqual(value, 0.0)
                self.assertLessEqual(value, 1.0)
        self.assertEqual(compute_features("", "Python and SQL")["length_diff"], 1.0)


if __name__ == "__main__":
    unittest.main()
