import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session
from skillgap.config import settings
from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.routers.dependencies import get_current_user, get_llm_client
from skillgap.schemas.resume import ResumeRead, ResumeUploadResponse
from skillgap.schemas.skills import UserSkillsResponse, UserSkillsUpdate
from skillgap.schemas.user import ProfileRead, ProfileUpdate, UserRead
from skillgap.services import enrichment, profile_service, resume_service
from skillgap.services.enrichment import TextGenerator
from skillgap.services.resume_service import ResumeParseError
from skillgap.services.skill_extractor import detect_catalog_skills


logger = logging.getLogger(__name__)

router = APIRouter()

PDF_CONTENT_TYPES = {"application/pdf", "application/x-pdf"}


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return profile_service.to_user_read(current_user)


@router.get("/me/profile", response_model=ProfileRead)
def read_my_profile(current_user: User = Depends(get_current_user)) -> ProfileRead:
    return profile_service.to_profile_read(current_user)


@router.put("/me/profile", response_model=ProfileRead)
def update_my_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    return profile_service.update_profile(db, current_user, payload)


@router.get("/me/skills", response_model=UserSkillsResponse)
def read_my_skills(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> UserSkillsResponse:
    record = profile_service.get_or_create_skill_set(db, current_user.id)
    return profile_service.to_skills_response(record)


@router.post("/me/skills", response_model=UserSkillsResponse)
def save_my_skills(
    payload: UserSkillsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserSkillsResponse:
    record = profile_service.save_skill_set(db, current_user.id, payload.skills, payload.interests)
    return profile_service.to_skills_response(record)


@router.post("/me/resume", response_model=ResumeUploadResponse)
def upload_my_resume(
    resume: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    client: TextGenerator = Depends(get_llm_client),
) -> ResumeUploadResponse:
    if (resume.content_type or "").lower() not in PDF_CONTENT_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only PDF files are allowed")

    max_bytes = settings.max_resume_size_mb * 1024 * 1024
    data = resume.file.read(max_bytes + 1)
    if not data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum size is {settings.max_resume_size_mb}MB",
        )

    try:
        text = resume_service.extract_text(data)
    except ResumeParseError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    analysis = enrichment.analyze_resume(client, text)
    detected = detect_catalog_skills(db, text)
    file_name = resume.filename or "resume.pdf"
    resume_service.save_resume(db, current_user.id, file_name, text, analysis, detected)
    logger.info("resume analyzed user_id=%s detected=%s", current_user.id, len(detected))
    return ResumeUploadResponse(file_name=file_name, analysis=analysis, detected_skills=detected)


@router.get("/me/resume", response_model=Optional[ResumeRead])
def read_my_resume(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> Optional[ResumeRead]:
    return resume_service.get_resume(db, current_user.id)
