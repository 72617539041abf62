from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from skillgap.data.careers import CAREERS
from skillgap.data.resources import RESOURCES
from skillgap.data.skills import SKILLS
from skillgap.models.career import Career, CareerSkill
from skillgap.models.learning_resource import LearningResource
from skillgap.models.skills import Skill


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedSummary:
    skills: int
    careers: int
    resources: int


def seed_catalog(db: Session) -> SeedSummary:
    """Replace the skill, career and learning-resource catalog with the bundled seed data."""
    db.query(CareerSkill).delete(synchronize_session=False)
    db.query(Career).delete(synchronize_session=False)
    db.query(Skill).delete(synchronize_session=False)
    db.query(LearningResource).delete(synchronize_session=False)

    db.add_all(Skill(**row) for row in SKILLS)

    for row in CAREERS:
        data = dict(row)
        required = data.pop("required_skills")
        career = Career(**data)
        db.add(career)
        db.flush()
        db.add(CareerSkill(career_id=career.id, required_skills=required))

    db.add_all(LearningResource(**row) for row in RESOURCES)
    db.commit()

    summary = SeedSummary(skills=len(SKILLS), careers=len(CAREERS), resources=len(RESOURCES))
    logger.info("seeded catalog skills=%s careers=%s resources=%s", summary.skills, summary.careers, summary.resources)
    return summary
