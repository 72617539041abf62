from skillgap.schemas.analysis import (
    CareerAnalysis,
    MatchBreakdown,
    MatchingSkill,
    MissingSkill,
    PartialSkill,
    SkillGapRequest,
    SkillGapResponse,
)
from skillgap.schemas.careers import CareerRead, GeneratedCareer, GeneratedSkill, RequiredSkill
from skillgap.schemas.recommendation import CareerRecommendation, LearningPath, LearningPathRequest
from skillgap.schemas.resume import ResumeAnalysis, ResumeUploadResponse
from skillgap.schemas.skills import SkillEntryIn, UserSkillEntry, UserSkillsResponse, UserSkillsUpdate
from skillgap.schemas.user import Education, Token, TokenData, UserCreate, UserLogin, UserRead

__all__ = [
	"CareerAnalysis",
	"MatchBreakdown",
	"MatchingSkill",
	"MissingSkill",
	"PartialSkill",
	"SkillGapRequest",
	"SkillGapResponse",
	"CareerRead",
	"GeneratedCareer",
	"GeneratedSkill",
	"RequiredSkill",
	"CareerRecommendation",
	"LearningPath",
	"LearningPathRequest",
	"ResumeAnalysis",
	"ResumeUploadResponse",
	"SkillEntryIn",
	"UserSkillEntry",
	"UserSkillsResponse",
	"UserSkillsUpdate",
	"Education",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserRead",
]
