from typing import Optional

from pydantic import Field

from skillgap.schemas.common import CamelModel, Text


class CareerRecommendation(CamelModel):
    career_id: int
    career_name: str
    description: Optional[str] = None
    match_score: int
    salary_range: Optional[str] = None
    growth_outlook: Optional[str] = None
    matching_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    reasoning: str


class CareerRecommendationsResponse(CamelModel):
    recommendations: list[CareerRecommendation] = Field(default_factory=list)


class LearningPathRequest(CamelModel):
    missing_skills: list[Text] = Field(default_factory=list, max_length=50)


class LearningResourceRead(CamelModel):
    title: str
    provider: Optional[str] = None
    url: str
    type: Optional[str] = None
    difficulty: Optional[str] = None
    duration: Optional[str] = None
    is_free: bool = True
    rating: Optional[float] = None


class LearningPath(CamelModel):
    skill: str
    strategy: str
    resources: list[LearningResourceRead] = Field(default_factory=list)


class LearningPathsResponse(CamelModel):
    learning_paths: list[LearningPath] = Field(default_factory=list)
