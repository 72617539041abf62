from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from skillgap.config import is_production, settings
from skillgap.database import get_db
from skillgap.routers.dependencies import get_cache
from skillgap.services.cache import CacheStore
from skillgap.services.seed_service import seed_catalog


router = APIRouter(tags=["seed"])


class SeedResult(BaseModel):
    message: str
    skills: int
    careers: int
    resources: int


@router.post("/seed", response_model=SeedResult)
def seed_database(db: Session = Depends(get_db), cache: CacheStore = Depends(get_cache)) -> SeedResult:
    if is_production(settings):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Seeding is disabled in production")
    summary = seed_catalog(db)
    # Cached reasoning refers to the old catalog.
    cache.flush()
    return SeedResult(
        message="Database seeded successfully",
        skills=summary.skills,
        careers=summary.careers,
        resources=summary.resources,
    )
