from __future__ import annotations

import logging
import math

from app.schemas.match import KeywordMatch, ScoreBreakdown

from .config import EngineConfig, get_engine_config
from .matcher import Partition, partition_keywords
from .model import LogisticModel, compute_features, get_default_model
from .normalize import normalize
from .ranking import select_keyword_lists
from .resolver import SynonymResolver, get_default_resolver
from .sections import extract_skills_block

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def _skills_hits(partition: Partition, skills_text: str, resolver: SynonymResolver) -> list[str]:
    if not skills_text:
        return []
    return [keyword for keyword in partition.present if resolver.contains(skills_text, keyword)]


def compute_base_score(
    required: Partition,
    preferred: Partition,
    skills_text: str,
    config: EngineConfig,
    resolver: SynonymResolver,
) -> int:
    """Weighted keyword coverage, 0-100, with a bonus for hits inside the skills block."""
    total = len(required.results) * config.required_weight + len(preferred.results) * config.preferred_weight
    total = max(1.0, total)
    earned = len(required.present) * config.required_weight + len(preferred.present) * config.preferred_weight
    earned += len(_skills_hits(required, skills_text, resolver)) * config.required_skills_bonus
    earned += len(_skills_hits(preferred, skills_text, resolver)) * config.preferred_skills_bonus
    return clamp_score(100 * earned / total)


def blend_scores(base_score: float, model_score: float, base_weight: float) -> int:
    return clamp_score(base_weight * base_score + (1.0 - base_weight) * model_score)


def _keyword_matches(
    category: str,
    partition: Partition,
    skills_text: str,
    resolver: SynonymResolver,
) -> list[KeywordMatch]:
    skills_hits = set(_skills_hits(partition, skills_text, resolver))
    return [
        KeywordMatch(
            keyword=result.keyword,
            category=category,
            present=result.present,
            method=result.method,
            in_skills_block=result.keyword in skills_hits,
        )
        for result in partition.results
    ]


def score(
    resume_text: str,
    jd_text: str,
    *,
    config: EngineConfig | None = None,
    model: LogisticModel | None = None,
    resolver: SynonymResolver | None = None,
) -> ScoreBreakdown:
    """Score a resume against a job description.

    Pure and deterministic: identical inputs give identical breakdowns, and
    empty or keyword-free texts produce a well-formed, possibly all-missing
    result instead of an error.
    """
    cfg = config or get_engine_config()
    mdl = model or get_default_model()
    checker = resolver or get_default_resolver()
    resume_text = resume_text or ""
    jd_text = jd_text or ""

    lists = select_keyword_lists(jd_text, cfg, checker.taxonomy)
    skills_text = normalize(extract_skills_block(resume_text))
    required = partition_keywords(lists.required, resume_text, checker)
    preferred = partition_keywords(lists.preferred, resume_text, checker)

    base_score = compute_base_score(required, preferred, skills_text, cfg, checker)
    features = compute_features(resume_text, jd_text, top_k=cfg.model_top_k, taxonomy=checker.taxonomy)
    model_score = mdl.score(features)
    final_score = blend_scores(base_score, model_score, cfg.blend_base_weight)

    logger.debug(
        "match_score_computed score=%s base=%s model=%.2f model_version=%s required=%s/%s preferred=%s/%s fallback=%s",
        final_score,
        base_score,
        model_score,
        mdl.version,
        len(required.present),
        len(lists.required),
        len(preferred.present),
        len(lists.preferred),
        lists.used_fallback,
    )

    return ScoreBreakdown(
        score=final_score,
        base_score=base_score,
        model_score=round(model_score, 2),
        model_version=mdl.version,
        required=list(lists.required),
        preferred=list(lists.preferred),
        present_required=required.present,
        missing_required=required.missing,
        present_preferred=preferred.present,
        missing_preferred=preferred.missing,
        matches=_keyword_matches("required", required, skills_text, checker)
        + _keyword_matches("preferred", preferred, skills_text, checker),
    )
