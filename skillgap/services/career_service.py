from typing import Any, Iterable, Sequence
from sqlalchemy.orm import Session
from skillgap.models.career import Career, CareerSkill
from skillgap.models.skills import Skill
from skillgap.schemas.careers import RequiredSkill


MAX_CAREERS = 50
MAX_SKILL_SEARCH_RESULTS = 20


def list_careers(db: Session, industry: str | None = None, limit: int = MAX_CAREERS) -> list[Career]:
    query = db.query(Career)
    if industry:
        query = query.filter(Career.industry_id == industry)
    return query.order_by(Career.demand_score.desc(), Career.id.asc()).limit(limit).all()


def get_careers_by_ids(db: Session, career_ids: Sequence[int]) -> dict[int, Career]:
    if not career_ids:
        return {}
    rows = db.query(Career).filter(Career.id.in_(list(career_ids))).all()
    return {row.id: row for row in rows}


def _parse_required(raw: Iterable[Any] | None) -> list[RequiredSkill]:
    result: list[RequiredSkill] = []
    for item in raw or []:
        if isinstance(item, dict) and item.get("skill_name"):
            result.append(RequiredSkill.model_validate(item))
    return result


def load_requirements(db: Session, career_ids: Sequence[int] | None = None) -> dict[int, list[RequiredSkill]]:
    """Required skills per career id, fetched in one query."""
    query = db.query(CareerSkill)
    if career_ids is not None:
        if not career_ids:
            return {}
        query = query.filter(CareerSkill.career_id.in_(list(career_ids)))
    return {row.career_id: _parse_required(row.required_skills) for row in query.all()}


def search_skills(db: Session, q: str, limit: int = MAX_SKILL_SEARCH_RESULTS) -> list[Skill]:
    query = db.query(Skill)
    term = (q or "").strip()
    if term:
        # LIKE wildcards in user input are matched literally.
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        query = query.filter(Skill.name.ilike(f"%{escaped}%", escape="\\"))
    return query.order_by(Skill.demand_score.desc(), Skill.name.asc()).limit(limit).all()
