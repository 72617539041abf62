from skillgap.models.analysis import Analysis
from skillgap.models.career import Career, CareerSkill
from skillgap.models.learning_resource import LearningResource
from skillgap.models.resume import ResumeRecord
from skillgap.models.skills import Skill
from skillgap.models.user import User
from skillgap.models.user_skill import UserSkillSet

__all__ = [
	"Analysis",
	"Career",
	"CareerSkill",
	"LearningResource",
	"ResumeRecord",
	"Skill",
	"User",
	"UserSkillSet",
]
