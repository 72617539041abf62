from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session

from skillgap.models.learning_resource import LearningResource
from skillgap.schemas.recommendation import CareerRecommendation, LearningPath, LearningResourceRead
from skillgap.schemas.skills import UserSkillEntry
from skillgap.services import career_service, enrichment
from skillgap.services.cache import CacheStore, build_cache_key
from skillgap.services.career_ranker import CareerCandidate, rank_careers
from skillgap.services.enrichment import CareerMatchSummary, TextGenerator


CAREER_POOL_SIZE = 50
SKILLS_SHOWN_PER_CAREER = 3
RESOURCES_PER_SKILL = 5


def recommend_careers(
    db: Session,
    user_id: int,
    user_skills: list[UserSkillEntry],
    interests: list[str],
    cache: CacheStore,
    client: TextGenerator,
    limit: int = 5,
) -> list[CareerRecommendation]:
    careers = career_service.list_careers(db, limit=CAREER_POOL_SIZE)
    requirements = career_service.load_requirements(db, [c.id for c in careers])

    # Careers without a requirement record are not candidates.
    candidates = [
        CareerCandidate(career=career, required_skill_names=[s.skill_name for s in requirements[career.id]])
        for career in careers
        if career.id in requirements
    ]
    skill_names = [s.skill_name for s in user_skills]
    top = rank_careers(skill_names, candidates, top_n=limit)
    if not top:
        return []

    cache_key = build_cache_key("career-reasoning", user_id, ",".join(m.career.title for m in top))
    reasoning = cache.get_or_compute(
        cache_key,
        lambda: enrichment.batch_explain_careers(
            client,
            [
                CareerMatchSummary(
                    career_name=m.career.title,
                    match_score=m.match_score,
                    matching_skills=m.matching_skills,
                    missing_skills=m.missing_skills,
                )
                for m in top
            ],
            skill_names,
            interests,
        ),
        "medium",
    )

    return [
        CareerRecommendation(
            career_id=m.career.id,
            career_name=m.career.title,
            description=m.career.description,
            match_score=m.match_score,
            salary_range=m.career.salary_range,
            growth_outlook=m.career.growth_outlook,
            matching_skills=m.matching_skills[:SKILLS_SHOWN_PER_CAREER],
            missing_skills=m.missing_skills[:SKILLS_SHOWN_PER_CAREER],
            reasoning=reasoning.get(m.career.title) or enrichment.REASONING_MISSING,
        )
        for m in top
    ]


def _clean_skills(skills: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        value = (skill or "").strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def _resources_by_skill(db: Session, skills: list[str]) -> dict[str, list[LearningResource]]:
    rows = (
        db.query(LearningResource)
        .filter(LearningResource.skill_name.in_(skills))
        .order_by(LearningResource.rating.desc(), LearningResource.review_count.desc(), LearningResource.id.asc())
        .all()
    )
    grouped: dict[str, list[LearningResource]] = {skill: [] for skill in skills}
    for row in rows:
        bucket = grouped.setdefault(row.skill_name, [])
        if len(bucket) < RESOURCES_PER_SKILL:
            bucket.append(row)
    return grouped


def build_learning_paths(
    db: Session,
    user_id: int,
    missing_skills: Sequence[str],
    cache: CacheStore,
    client: TextGenerator,
) -> list[LearningPath]:
    skills = _clean_skills(missing_skills)
    if not skills:
        return []

    resources = _resources_by_skill(db, skills)

    cache_key = build_cache_key("learning-strategies", user_id, ",".join(sorted(skills)))
    strategies = cache.get_or_compute(
        cache_key,
        lambda: enrichment.batch_learning_strategies(client, skills),
        "medium",
    )

    return [
        LearningPath(
            skill=skill,
            strategy=strategies.get(skill) or enrichment.strategy_fallback(skill),
            resources=[
                LearningResourceRead(
                    title=r.title,
                    provider=r.provider,
                    url=r.url,
                    type=r.type,
                    difficulty=r.difficulty,
                    duration=r.duration,
                    is_free=True if r.is_free is None else bool(r.is_free),
                    rating=r.rating,
                )
                for r in resources.get(skill, [])
            ],
        )
        for skill in skills
    ]
