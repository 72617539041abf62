from datetime import datetime

from pydantic import Field

from skillgap.schemas.common import CamelModel


class ResumeAnalysis(CamelModel):
    skills: list[str] = Field(default_factory=list)
    experience: str
    summary: str
    recommendations: list[str] = Field(default_factory=list)


class ResumeUploadResponse(CamelModel):
    file_name: str
    analysis: ResumeAnalysis
    detected_skills: list[str] = Field(default_factory=list)


class ResumeRead(CamelModel):
    file_name: str
    uploaded_at: datetime | None = None
    analysis: ResumeAnalysis
    detected_skills: list[str] = Field(default_factory=list)
