from datetime import datetime, timezone
from typing import Any, Iterable
from sqlalchemy.orm import Session
from skillgap.models.user import User
from skillgap.models.user_skill import UserSkillSet
from skillgap.schemas.skills import SkillEntryIn, UserSkillEntry, UserSkillsResponse
from skillgap.schemas.user import Education, ProfileRead, ProfileUpdate, UserRead
from skillgap.services.match_calculator import proficiency_score


NO_SKILLS_MESSAGE = "No skills found. Please add skills in your profile first."


class NoSkillsOnFileError(LookupError):
    def __init__(self, message: str = NO_SKILLS_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def education_of(user: User) -> Education:
    return Education(
        level=user.education_level,
        institution=user.institution,
        field_of_study=user.field_of_study,
        graduation_year=user.graduation_year,
    )


def to_user_read(user: User) -> UserRead:
    return UserRead(id=user.id, email=user.email, name=user.name, education=education_of(user))


def to_profile_read(user: User) -> ProfileRead:
    return ProfileRead(email=user.email, name=user.name, education=education_of(user))


def apply_education(user: User, education: Education | None) -> None:
    education = education or Education()
    user.education_level = education.level
    user.institution = education.institution
    user.field_of_study = education.field_of_study
    user.graduation_year = education.graduation_year


def update_profile(db: Session, user: User, update: ProfileUpdate) -> ProfileRead:
    fields = update.model_dump(exclude_unset=True)
    if "name" in fields and update.name:
        user.name = update.name
    if "education" in fields:
        apply_education(user, update.education)
    db.add(user)
    db.commit()
    db.refresh(user)
    return to_profile_read(user)


def _load_entries(raw: Iterable[Any] | None) -> list[UserSkillEntry]:
    entries: list[UserSkillEntry] = []
    for item in raw or []:
        if isinstance(item, dict) and item.get("skill_name"):
            entries.append(UserSkillEntry.model_validate(item))
    return entries


def get_skill_set(db: Session, user_id: int) -> UserSkillSet | None:
    return db.query(UserSkillSet).filter(UserSkillSet.user_id == user_id).first()


def get_or_create_skill_set(db: Session, user_id: int) -> UserSkillSet:
    record = get_skill_set(db, user_id)
    if record:
        return record
    record = UserSkillSet(user_id=user_id, skills=[], interests=[])
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def save_skill_set(db: Session, user_id: int, skills: list[SkillEntryIn], interests: list[str]) -> UserSkillSet:
    """Replace the user's whole skill list; scores are always derived from levels."""
    now = datetime.now(timezone.utc).isoformat()
    payload = [
        {
            "skill_name": entry.skill_name.strip(),
            "proficiency_level": entry.proficiency_level,
            "proficiency_score": proficiency_score(entry.proficiency_level),
            "added_date": now,
        }
        for entry in skills
        if entry.skill_name and entry.skill_name.strip()
    ]
    cleaned_interests = [i.strip() for i in interests if i and i.strip()]

    record = get_skill_set(db, user_id)
    if record:
        record.skills = payload
        record.interests = cleaned_interests
    else:
        record = UserSkillSet(user_id=user_id, skills=payload, interests=cleaned_interests)
        db.add(record)
    db.commit()
    db.refresh(record)
    return record


def skill_entries(record: UserSkillSet | None) -> list[UserSkillEntry]:
    if record is None:
        return []
    return _load_entries(record.skills)


def to_skills_response(record: UserSkillSet) -> UserSkillsResponse:
    return UserSkillsResponse(skills=skill_entries(record), interests=list(record.interests or []))


def require_skills(db: Session, user_id: int) -> tuple[list[UserSkillEntry], list[str]]:
    record = get_skill_set(db, user_id)
    entries = skill_entries(record)
    if not entries:
        raise NoSkillsOnFileError()
    return entries, list(record.interests or [])
