from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from skillgap.schemas.common import CamelModel, Text


ProficiencyLevel = Literal["Beginner", "Intermediate", "Advanced", "Expert"]


class SkillEntryIn(CamelModel):
    skill_name: Text = Field(min_length=1)
    proficiency_level: ProficiencyLevel


class UserSkillEntry(CamelModel):
    # Stored records are read back as plain strings; scoring tolerates unknown levels.
    skill_name: str
    proficiency_level: str
    proficiency_score: int = 0
    added_date: datetime | None = None


class UserSkillsUpdate(CamelModel):
    skills: list[SkillEntryIn] = Field(default_factory=list, max_length=200)
    interests: list[Text] = Field(default_factory=list, max_length=50)


class UserSkillsResponse(CamelModel):
    skills: list[UserSkillEntry] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)


class SkillRead(CamelModel):
    id: int
    name: str
    category: str | None = None
    subcategory: str | None = None
