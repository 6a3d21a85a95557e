from __future__ import annotations

import logging
import math

from app.schemas.match import WeavePlan

from .config import EngineConfig, get_engine_config
from .matcher import partition_keywords
from .ranking import rank_keywords
from .resolver import SynonymResolver, get_default_resolver

logger = logging.getLogger(__name__)


def _unique_ci(terms: list[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for term in terms:
        key = term.lower()
        if key in seen:
            continue
        seen.add(key)
        output.append(term)
    return output


def build_weave_plan(
    resume_text: str,
    jd_text: str,
    *,
    config: EngineConfig | None = None,
    resolver: SynonymResolver | None = None,
) -> WeavePlan:
    """Pick the JD keywords a content generator may weave into a tailored resume.

    ``must_weave`` terms are already backed by the resume; ``jd_only`` terms are
    not and may only be presented as familiarity.
    """
    cfg = config or get_engine_config()
    checker = resolver or get_default_resolver()

    jd_keywords = rank_keywords(jd_text or "", cfg.weave_rank, checker.taxonomy)
    split = partition_keywords(jd_keywords, resume_text or "", checker)
    low_overlap = len(split.present) < max(cfg.low_overlap_min, math.floor(len(jd_keywords) * cfg.low_overlap_ratio))

    must_weave = _unique_ci(split.present)[: cfg.must_weave_cap]
    jd_only = _unique_ci(split.missing)[: cfg.jd_only_cap]
    focus = _unique_ci(must_weave[: cfg.focus_each] + jd_only[: cfg.focus_each])

    logger.debug(
        "weave_plan_built keywords=%s must_weave=%s jd_only=%s low_overlap=%s",
        len(jd_keywords),
        len(must_weave),
        len(jd_only),
        low_overlap,
    )
    return WeavePlan(
        jd_keywords=jd_keywords,
        must_weave=must_weave,
        jd_only=jd_only,
        focus=focus,
        low_overlap=low_overlap,
    )
