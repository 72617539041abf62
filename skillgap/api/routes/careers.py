import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.routers.dependencies import get_current_user, get_llm_client
from skillgap.schemas.careers import CareerListResponse, CareerRead, CareerSearchResponse, CareerSuggestionsResponse
from skillgap.services import career_service, enrichment, profile_service
from skillgap.services.enrichment import TextGenerator
from skillgap.services.profile_service import NO_SKILLS_MESSAGE


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/careers", tags=["careers"])

MIN_KEYWORD_LENGTH = 2


@router.get("", response_model=CareerListResponse)
def list_careers(
    industry: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
) -> CareerListResponse:
    careers = career_service.list_careers(db, industry=industry)
    return CareerListResponse(careers=[CareerRead.model_validate(c) for c in careers])


@router.get("/search", response_model=CareerSearchResponse)
def search_careers(
    keyword: str = Query(default=""),
    client: TextGenerator = Depends(get_llm_client),
) -> CareerSearchResponse:
    """Generate careers for a free-text industry or field keyword."""
    term = keyword.strip()
    if len(term) < MIN_KEYWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter at least 2 characters to search",
        )

    careers = enrichment.generate_careers(client, term)
    if not careers:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No careers found for this search. Try a different keyword.",
        )
    return CareerSearchResponse(keyword=term, careers=careers)


@router.get("/suggestions", response_model=CareerSuggestionsResponse)
def suggest_careers(
    interests: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    client: TextGenerator = Depends(get_llm_client),
) -> CareerSuggestionsResponse:
    record = profile_service.get_skill_set(db, current_user.id)
    user_skills = profile_service.skill_entries(record)
    if not user_skills:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": NO_SKILLS_MESSAGE, "needsSkills": True},
        )

    if not interests and record.interests:
        interests = ", ".join(record.interests)
    careers = enrichment.suggest_careers(client, user_skills, interests)
    logger.info("career suggestions user_id=%s count=%s", current_user.id, len(careers))
    return CareerSuggestionsResponse(careers=careers, based_on_skills=[s.skill_name for s in user_skills])
