"""Shapes the LLM gateway is asked to reply with.

Every reply is decoded against one of these models; anything that does
not validate is a decode error, never a silently defaulted field.
"""

from __future__ import annotations

from pydantic import Field

from skillgap.schemas.careers import GeneratedSkill
from skillgap.schemas.common import CamelModel


class CareerReasoningReply(CamelModel):
    reasoning: dict[str, str] = Field(default_factory=dict)


class LearningStrategiesReply(CamelModel):
    strategies: dict[str, str] = Field(default_factory=dict)


class SkillGapAnalysesReply(CamelModel):
    analyses: dict[str, str] = Field(default_factory=dict)


class ResumeAnalysisReply(CamelModel):
    skills: list[str] = Field(default_factory=list)
    experience: str | None = None
    summary: str | None = None
    recommendations: list[str] = Field(default_factory=list)


class GeneratedCareerPayload(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    match_reason: str | None = None
    required_skills: list[GeneratedSkill] = Field(default_factory=list)
    salary_range: str = "Varies"
    growth_outlook: str = "Stable"


class GeneratedCareersReply(CamelModel):
    careers: list[GeneratedCareerPayload] = Field(default_factory=list)
