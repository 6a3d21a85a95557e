from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from app.core.config.scoring import get_scoring_value


@dataclass(frozen=True)
class EngineConfig:
    required_weight: float = 4.0
    preferred_weight: float = 1.0
    required_skills_bonus: float = 1.0
    preferred_skills_bonus: float = 0.5
    required_cap: int = 15
    preferred_cap: int = 20
    bucket_rank: int = 25
    global_rank: int = 35
    global_split: int = 15
    backfill_rank: int = 20
    backfill_threshold: int = 12
    model_top_k: int = 10
    weave_rank: int = 40
    must_weave_cap: int = 25
    jd_only_cap: int = 20
    low_overlap_min: int = 4
    low_overlap_ratio: float = 0.2
    focus_each: int = 5
    blend_base_weight: float = 0.5

    def __post_init__(self) -> None:
        if not 0.0 <= self.blend_base_weight <= 1.0:
            raise ValueError("blend_base_weight must be between 0 and 1")
        if self.required_weight < 0 or self.preferred_weight < 0:
            raise ValueError("keyword weights must be non-negative")
        caps = (
            self.required_cap,
            self.preferred_cap,
            self.bucket_rank,
            self.global_rank,
            self.global_split,
            self.backfill_rank,
            self.model_top_k,
            self.weave_rank,
            self.must_weave_cap,
            self.jd_only_cap,
        )
        if any(cap < 0 for cap in caps):
            raise ValueError("keyword caps must be non-negative")

    @classmethod
    def from_scoring_config(cls) -> "EngineConfig":
        defaults = cls()

        def value(path: str, current: Any, cast: type) -> Any:
            raw = get_scoring_value(path, current)
            try:
                return cast(raw)
            except (TypeError, ValueError) as exc:
                raise RuntimeError(f"Invalid scoring config value at '{path}': {raw!r}") from exc

        return cls(
            required_weight=value("keywords.weights.required", defaults.required_weight, float),
            preferred_weight=value("keywords.weights.preferred", defaults.preferred_weight, float),
            required_skills_bonus=value("keywords.skills_bonus.required", defaults.required_skills_bonus, float),
            preferred_skills_bonus=value("keywords.skills_bonus.preferred", defaults.preferred_skills_bonus, float),
            required_cap=value("keywords.caps.required", defaults.required_cap, int),
            preferred_cap=value("keywords.caps.preferred", defaults.preferred_cap, int),
            bucket_rank=value("keywords.caps.bucket_rank", defaults.bucket_rank, int),
            global_rank=value("keywords.caps.global_rank", defaults.global_rank, int),
            global_split=value("keywords.caps.global_split", defaults.global_split, int),
            backfill_rank=value("keywords.caps.backfill_rank", defaults.backfill_rank, int),
            backfill_threshold=value("keywords.caps.backfill_threshold", defaults.backfill_threshold, int),
            model_top_k=value("keywords.caps.model_top_k", defaults.model_top_k, int),
            weave_rank=value("keywords.caps.weave_rank", defaults.weave_rank, int),
            must_weave_cap=value("weave.must_weave_cap", defaults.must_weave_cap, int),
            jd_only_cap=value("weave.jd_only_cap", defaults.jd_only_cap, int),
            low_overlap_min=value("weave.low_overlap_min", defaults.low_overlap_min, int),
            low_overlap_ratio=value("weave.low_overlap_ratio", defaults.low_overlap_ratio, float),
            focus_each=value("weave.focus_each", defaults.focus_each, int),
            blend_base_weight=value("blend.base_weight", defaults.blend_base_weight, float),
        )


@lru_cache(maxsize=1)
def get_engine_config() -> EngineConfig:
    return EngineConfig.from_scoring_config()
