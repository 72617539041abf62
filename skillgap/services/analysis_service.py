from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy.orm import Session

from skillgap.models.analysis import Analysis
from skillgap.schemas.analysis import AnalysisHistoryItem, CareerAnalysis, MatchBreakdown
from skillgap.schemas.careers import GeneratedCareer
from skillgap.schemas.skills import UserSkillEntry
from skillgap.services import career_service, enrichment
from skillgap.services.enrichment import CareerRequirements, TextGenerator
from skillgap.services.match_calculator import compute_match


logger = logging.getLogger(__name__)


def _dedupe_ids(career_ids: Sequence[int]) -> list[int]:
    seen: set[int] = set()
    result: list[int] = []
    for career_id in career_ids:
        if career_id not in seen:
            seen.add(career_id)
            result.append(career_id)
    return result


def analyze_careers(
    db: Session,
    user_id: int,
    user_skills: list[UserSkillEntry],
    career_ids: Sequence[int],
    client: TextGenerator,
    limit: int = 5,
) -> list[CareerAnalysis]:
    """Score the user against up to `limit` stored careers and persist each snapshot.

    Unknown ids and careers without a requirement record are skipped.
    """
    wanted = _dedupe_ids(career_ids)[:limit]
    careers = career_service.get_careers_by_ids(db, wanted)
    requirements = career_service.load_requirements(db, list(careers.keys()))

    scored: list[tuple[int, str, MatchBreakdown, CareerRequirements]] = []
    for career_id in wanted:
        career = careers.get(career_id)
        required = requirements.get(career_id)
        if career is None or not required:
            logger.info("skill-gap skip career_id=%s (missing career or requirements)", career_id)
            continue
        breakdown = compute_match(user_skills, required)
        scored.append((career.id, career.title, breakdown, CareerRequirements(career.title, required)))

    if not scored:
        return []

    insights = enrichment.batch_analyze_skill_gaps(client, user_skills, [item[3] for item in scored])

    analyses: list[CareerAnalysis] = []
    for career_id, title, breakdown, _ in scored:
        ai_insights = insights.get(title) or enrichment.INSIGHTS_FAILED
        db.add(
            Analysis(
                user_id=user_id,
                target_career_id=career_id,
                target_career_name=title,
                results=breakdown.model_dump(mode="json"),
                ai_insights=ai_insights,
            )
        )
        analyses.append(
            CareerAnalysis(
                career_id=career_id,
                career_name=title,
                ai_insights=ai_insights,
                **breakdown.model_dump(),
            )
        )
    db.commit()
    return analyses


def analyze_generated_career(
    user_skills: list[UserSkillEntry],
    career: GeneratedCareer,
    client: TextGenerator,
) -> CareerAnalysis:
    breakdown = compute_match(user_skills, career.required_skills)
    ai_insights = enrichment.analyze_skill_gap(client, user_skills, career.required_skills, career.title)
    return CareerAnalysis(
        career_id=career.id,
        career_name=career.title,
        ai_insights=ai_insights,
        **breakdown.model_dump(),
    )


def list_history(db: Session, user_id: int, limit: int = 50) -> list[AnalysisHistoryItem]:
    rows = (
        db.query(Analysis)
        .filter(Analysis.user_id == user_id)
        .order_by(Analysis.analysis_date.desc(), Analysis.id.desc())
        .limit(limit)
        .all()
    )
    return [
        AnalysisHistoryItem(
            id=row.id,
            target_career_id=row.target_career_id,
            target_career_name=row.target_career_name,
            analysis_date=row.analysis_date,
            results=MatchBreakdown.model_validate(row.results),
            ai_insights=row.ai_insights,
        )
        for row in rows
    ]
