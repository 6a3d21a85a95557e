"""Frozen logistic match model.

The weights are a versioned calibration artifact trained offline on labelled
resume/JD pairs and shipped in ``config/scoring.yaml``; nothing here fits or
updates them. Swapping the artifact only requires a new ``model`` section.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping

from app.core.config.scoring import get_scoring_value
from app.taxonomy import TaxonomyProvider

from .ranking import rank_keywords
from .tokenize import tokenize

KNOWN_FEATURES = ("overlap_ratio", "resume_coverage", "length_diff", "kw_ratio")


@dataclass(frozen=True)
class LogisticModel:
    version: str
    feature_set: str
    features: tuple[str, ...]
    weights: tuple[float, ...]
    intercept: float

    def __post_init__(self) -> None:
        if len(self.features) != len(self.weights):
            raise ValueError("model weights must match the feature list")
        unknown = [name for name in self.features if name not in KNOWN_FEATURES]
        if unknown:
            raise ValueError(f"unknown model features: {', '.join(unknown)}")
        if not all(math.isfinite(value) for value in (*self.weights, self.intercept)):
            raise ValueError("model weights and intercept must be finite")

    @classmethod
    def from_config(cls, raw: Any) -> "LogisticModel":
        if not isinstance(raw, dict):
            raise RuntimeError("Invalid scoring config: 'model' must be a mapping.")
        try:
            return cls(
                version=str(raw["version"]),
                feature_set=str(raw.get("feature_set", "")),
                features=tuple(str(name) for name in raw["features"]),
                weights=tuple(float(value) for value in raw["weights"]),
                intercept=float(raw["intercept"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise RuntimeError(f"Invalid model artifact in scoring config: {exc}") from exc

    def decision(self, values: Mapping[str, float]) -> float:
        return self.intercept + sum(
            weight * float(values.get(name, 0.0)) for name, weight in zip(self.features, self.weights)
        )

    def predict_proba(self, values: Mapping[str, float]) -> float:
        z = self.decision(values)
        if z >= 0:
            return 1.0 / (1.0 + math.exp(-z))
        exp_z = math.exp(z)
        return exp_z / (1.0 + exp_z)

    def score(self, values: Mapping[str, float]) -> float:
        return min(100.0, max(0.0, self.predict_proba(values) * 100.0))


@lru_cache(maxsize=1)
def get_default_model() -> LogisticModel:
    return LogisticModel.from_config(get_scoring_value("model"))


def compute_features(
    resume_text: str,
    jd_text: str,
    *,
    top_k: int = 10,
    taxonomy: TaxonomyProvider | None = None,
) -> dict[str, float]:
    """Whole-text lexical features for the model; every value is finite and in [0, 1]."""
    resume_tokens = tokenize(resume_text)
    jd_tokens = tokenize(jd_text)
    resume_set = set(resume_tokens)
    jd_set = set(jd_tokens)
    common = len(resume_set & jd_set)

    longest = max(len(resume_tokens), len(jd_tokens), 1)
    jd_keywords = rank_keywords(jd_text, top_k, taxonomy)
    keyword_hits = sum(1 for keyword in jd_keywords if keyword in resume_set)

    return {
        "overlap_ratio": common / (len(jd_set) or 1),
        "resume_coverage": common / (len(resume_set) or 1),
        "length_diff": abs(len(resume_tokens) - len(jd_tokens)) / longest,
        "kw_ratio": keyword_hits / (len(jd_keywords) or 1),
    }
