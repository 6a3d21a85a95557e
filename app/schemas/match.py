from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings

KeywordCategory = Literal["required", "preferred"]
MatchMethod = Literal["exact", "fuzzy", "none"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MatchRequest(_CamelModel):
    resume_text: str = Field(default="", alias="resumeText", max_length=settings.max_text_chars)
    jd_text: str = Field(default="", alias="jdText", max_length=settings.max_text_chars)


class KeywordMatch(_CamelModel):
    keyword: str
    category: KeywordCategory
    present: bool
    method: MatchMethod
    in_skills_block: bool = Field(default=False, alias="inSkillsBlock")


class ScoreBreakdown(_CamelModel):
    score: int = Field(ge=0, le=100)
    base_score: int = Field(alias="baseScore", ge=0, le=100)
    model_score: float = Field(alias="modelScore", ge=0.0, le=100.0)
    model_version: str = Field(default="", alias="modelVersion")
    required: list[str] = Field(default_factory=list)
    preferred: list[str] = Field(default_factory=list)
    present_required: list[str] = Field(default_factory=list, alias="presentRequired")
    missing_required: list[str] = Field(default_factory=list, alias="missingRequired")
    present_preferred: list[str] = Field(default_factory=list, alias="presentPreferred")
    missing_preferred: list[str] = Field(default_factory=list, alias="missingPreferred")
    matches: list[KeywordMatch] = Field(default_factory=list)


class WeavePlan(_CamelModel):
    jd_keywords: list[str] = Field(default_factory=list, alias="jdKeywords")
    must_weave: list[str] = Field(default_factory=list, alias="mustWeave")
    jd_only: list[str] = Field(default_factory=list, alias="jdOnly")
    focus: list[str] = Field(default_factory=list)
    low_overlap: bool = Field(default=False, alias="lowOverlap")


class SimilarityResponse(BaseModel):
    similarity: float = Field(ge=0.0, le=1.0)
