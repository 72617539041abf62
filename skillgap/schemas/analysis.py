from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillgap.schemas.careers import GeneratedCareer
from skillgap.schemas.common import CamelModel


class MatchingSkill(CamelModel):
    skill_name: str
    user_proficiency: str
    required_proficiency: str


class PartialSkill(CamelModel):
    skill_name: str
    user_proficiency: str
    required_proficiency: str
    gap: str


class MissingSkill(CamelModel):
    skill_name: str
    importance: str
    required_proficiency: str


class MatchBreakdown(CamelModel):
    match_score: int = Field(ge=0, le=100)
    matching_skills: list[MatchingSkill] = Field(default_factory=list)
    partial_skills: list[PartialSkill] = Field(default_factory=list)
    missing_skills: list[MissingSkill] = Field(default_factory=list)


class SkillGapRequest(CamelModel):
    career_ids: list[int] = Field(min_length=1, max_length=50)


class GeneratedCareerGapRequest(CamelModel):
    career: GeneratedCareer


class CareerAnalysis(MatchBreakdown):
    career_id: int | str
    career_name: str
    ai_insights: str


class SkillGapResponse(CamelModel):
    analyses: list[CareerAnalysis] = Field(default_factory=list)


class AnalysisHistoryItem(CamelModel):
    id: int
    target_career_id: int | None = None
    target_career_name: str | None = None
    analysis_date: datetime
    results: MatchBreakdown
    ai_insights: str | None = None
