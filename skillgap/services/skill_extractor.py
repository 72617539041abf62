# skill_extractor.py
import re
from typing import Any
from sqlalchemy.orm import Session
from skillgap.models.skills import Skill


def _skill_pattern(name: str) -> re.Pattern[str]:
    # Boundaries that keep "Java" out of "JavaScript" and still allow "C++" / "Node.js".
    return re.compile(rf"(?<![\w+#.]){re.escape(name.lower())}(?![\w+#]|\.\w)")


def match_catalog_skills(text: str, skill_names: list[str]) -> list[str]:
    if not text:
        return []
    normalized_text = text.lower()
    matches: list[str] = []
    for name in skill_names:
        if not name or name in matches:
            continue
        if _skill_pattern(name).search(normalized_text):
            matches.append(name)
    return matches


def detect_catalog_skills(db: Session, text: str) -> list[str]:
    """Catalog skills mentioned in `text`, most in-demand first."""
    skills: list[Any] = db.query(Skill).order_by(Skill.demand_score.desc(), Skill.name.asc()).all()
    return match_catalog_skills(text, [skill.name for skill in skills])
