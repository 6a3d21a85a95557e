import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.core.rate_limit import rate_limit
from app.matching import build_weave_plan, score
from app.schemas.match import MatchRequest, ScoreBreakdown, SimilarityResponse, WeavePlan
from app.semantic import tfidf_similarity

router = APIRouter()
logger = logging.getLogger(__name__)


def _require_jd(payload: MatchRequest) -> None:
    if not payload.jd_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="jdText is required")


@router.post("/score", response_model=ScoreBreakdown)
@rate_limit()
def score_resume(request: Request, payload: MatchRequest):
    _ = request
    _require_jd(payload)
    breakdown = score(payload.resume_text, payload.jd_text)
    logger.info(
        "match_score resume_chars=%s jd_chars=%s score=%s base=%s model=%s missing_required=%s",
        len(payload.resume_text),
        len(payload.jd_text),
        breakdown.score,
        breakdown.base_score,
        breakdown.model_score,
        len(breakdown.missing_required),
    )
    return breakdown


@router.post("/weave-plan", response_model=WeavePlan)
@rate_limit()
def weave_plan(request: Request, payload: MatchRequest):
    _ = request
    _require_jd(payload)
    plan = build_weave_plan(payload.resume_text, payload.jd_text)
    logger.info(
        "match_weave_plan must_weave=%s jd_only=%s low_overlap=%s",
        len(plan.must_weave),
        len(plan.jd_only),
        plan.low_overlap,
    )
    return plan


@router.post("/similarity", response_model=SimilarityResponse)
@rate_limit()
def similarity(request: Request, payload: MatchRequest):
    _ = request
    _require_jd(payload)
    return SimilarityResponse(similarity=round(tfidf_similarity(payload.resume_text, payload.jd_text), 4))
