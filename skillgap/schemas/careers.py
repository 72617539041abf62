from __future__ import annotations

from pydantic import AliasChoices, Field

from skillgap.schemas.common import CamelModel


class RequiredSkill(CamelModel):
    skill_name: str = Field(min_length=1)
    importance: str = "Important"
    minimum_proficiency: str = "Intermediate"
    # 0/None fall back to the default weight when scoring.
    weight: float | None = Field(default=None, ge=0)


class CareerRead(CamelModel):
    id: int
    title: str
    description: str | None = None
    industry_id: str | None = None
    salary_range: str | None = None
    growth_outlook: str | None = None
    demand_score: int | None = None


class CareerListResponse(CamelModel):
    careers: list[CareerRead] = Field(default_factory=list)


class GeneratedSkill(CamelModel):
    skill_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("skillName", "skill_name", "name"),
        serialization_alias="skillName",
    )
    importance: str = "Important"
    minimum_proficiency: str = Field(
        default="Intermediate",
        validation_alias=AliasChoices("minimumProficiency", "minimum_proficiency", "proficiency"),
        serialization_alias="minimumProficiency",
    )
    weight: float | None = Field(default=None, ge=0)


class GeneratedCareer(CamelModel):
    """Ephemeral AI-generated career; never persisted."""

    id: str
    title: str
    description: str = ""
    match_reason: str | None = None
    required_skills: list[GeneratedSkill] = Field(default_factory=list)
    salary_range: str = "Varies"
    growth_outlook: str = "Stable"


class CareerSearchResponse(CamelModel):
    keyword: str
    careers: list[GeneratedCareer]


class CareerSuggestionsResponse(CamelModel):
    careers: list[GeneratedCareer]
    based_on_skills: list[str] = Field(default_factory=list)
