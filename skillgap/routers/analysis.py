from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from skillgap.config import settings
from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.routers.dependencies import get_current_user, get_llm_client
from skillgap.schemas.analysis import (
    AnalysisHistoryItem,
    CareerAnalysis,
    GeneratedCareerGapRequest,
    SkillGapRequest,
    SkillGapResponse,
)
from skillgap.services import analysis_service, profile_service
from skillgap.services.enrichment import TextGenerator
from skillgap.services.profile_service import NoSkillsOnFileError


router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("/skill-gap", response_model=SkillGapResponse)
def analyze_skill_gap(
    payload: SkillGapRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    client: TextGenerator = Depends(get_llm_client),
) -> SkillGapResponse:
    try:
        user_skills, _ = profile_service.require_skills(db, current_user.id)
    except NoSkillsOnFileError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc

    analyses = analysis_service.analyze_careers(
        db,
        current_user.id,
        user_skills,
        payload.career_ids,
        client,
        limit=settings.analysis_career_limit,
    )
    return SkillGapResponse(analyses=analyses)


@router.post("/skill-gap/generated", response_model=CareerAnalysis)
def analyze_generated_career_gap(
    payload: GeneratedCareerGapRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    client: TextGenerator = Depends(get_llm_client),
) -> CareerAnalysis:
    try:
        user_skills, _ = profile_service.require_skills(db, current_user.id)
    except NoSkillsOnFileError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    return analysis_service.analyze_generated_career(user_skills, payload.career, client)


@router.get("/history", response_model=list[AnalysisHistoryItem])
def read_analysis_history(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> list[AnalysisHistoryItem]:
    return analysis_service.list_history(db, current_user.id)
