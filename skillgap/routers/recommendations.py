from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from skillgap.config import settings
from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.routers.dependencies import get_cache, get_current_user, get_llm_client
from skillgap.schemas.recommendation import CareerRecommendationsResponse, LearningPathRequest, LearningPathsResponse
from skillgap.services import profile_service, recommendation_service
from skillgap.services.cache import CacheStore
from skillgap.services.enrichment import TextGenerator
from skillgap.services.profile_service import NoSkillsOnFileError


router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post("/careers", response_model=CareerRecommendationsResponse)
def recommend_careers(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: CacheStore = Depends(get_cache),
    client: TextGenerator = Depends(get_llm_client),
) -> CareerRecommendationsResponse:
    try:
        user_skills, interests = profile_service.require_skills(db, current_user.id)
    except NoSkillsOnFileError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc

    recommendations = recommendation_service.recommend_careers(
        db,
        current_user.id,
        user_skills,
        interests,
        cache,
        client,
        limit=settings.recommendation_limit,
    )
    return CareerRecommendationsResponse(recommendations=recommendations)


@router.post("/learning-paths", response_model=LearningPathsResponse)
def recommend_learning_paths(
    payload: LearningPathRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: CacheStore = Depends(get_cache),
    client: TextGenerator = Depends(get_llm_client),
) -> LearningPathsResponse:
    paths = recommendation_service.build_learning_paths(db, current_user.id, payload.missing_skills, cache, client)
    if not paths:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing skills array required")
    return LearningPathsResponse(learning_paths=paths)
