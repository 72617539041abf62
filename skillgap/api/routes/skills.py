from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from skillgap.database import get_db
from skillgap.schemas.skills import SkillRead
from skillgap.services import career_service


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("/search", response_model=list[SkillRead])
def search_skills(q: str = Query(default="", max_length=100), db: Session = Depends(get_db)) -> list[SkillRead]:
    return [SkillRead.model_validate(s) for s in career_service.search_skills(db, q)]
