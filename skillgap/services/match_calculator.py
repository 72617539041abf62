"""Weighted skill-gap scoring between a user's skills and a career's requirements."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from skillgap.schemas.analysis import MatchBreakdown, MatchingSkill, MissingSkill, PartialSkill


PROFICIENCY_SCORES: dict[str, int] = {
    "Beginner": 25,
    "Intermediate": 50,
    "Advanced": 75,
    "Expert": 100,
}

# Unrecognized levels score 0 on both sides of the comparison.
UNKNOWN_PROFICIENCY_SCORE = 0
DEFAULT_SKILL_WEIGHT = 5.0


class UserSkillLike(Protocol):
    skill_name: str
    proficiency_level: str


class RequiredSkillLike(Protocol):
    skill_name: str
    importance: str
    minimum_proficiency: str
    weight: float | None


def proficiency_score(level: str | None) -> int:
    if not level:
        return UNKNOWN_PROFICIENCY_SCORE
    return PROFICIENCY_SCORES.get(level, UNKNOWN_PROFICIENCY_SCORE)


def skill_weight(required: RequiredSkillLike) -> float:
    return float(required.weight) if required.weight else DEFAULT_SKILL_WEIGHT


def round_percent(value: float) -> int:
    # Half-up, not banker's rounding: 12.5 -> 13.
    return int(math.floor(value + 0.5))


def compute_match(
    user_skills: Sequence[UserSkillLike],
    required_skills: Sequence[RequiredSkillLike],
) -> MatchBreakdown:
    """Partition `required_skills` into matching / partial / missing and score the fit.

    Names are compared exactly (case-sensitive). When `user_skills` holds the
    same name twice the later entry wins. A partial match earns
    `user_score / required_score` of the skill's weight.
    """
    by_name = {skill.skill_name: skill for skill in user_skills}

    matching: list[MatchingSkill] = []
    partial: list[PartialSkill] = []
    missing: list[MissingSkill] = []

    total_weight = 0.0
    achieved_weight = 0.0

    for required in required_skills:
        weight = skill_weight(required)
        total_weight += weight

        user_skill = by_name.get(required.skill_name)
        if user_skill is None:
            missing.append(
                MissingSkill(
                    skill_name=required.skill_name,
                    importance=required.importance,
                    required_proficiency=required.minimum_proficiency,
                )
            )
            continue

        user_score = proficiency_score(user_skill.proficiency_level)
        required_score = proficiency_score(required.minimum_proficiency)

        if user_score >= required_score:
            matching.append(
                MatchingSkill(
                    skill_name=required.skill_name,
                    user_proficiency=user_skill.proficiency_level,
                    required_proficiency=required.minimum_proficiency,
                )
            )
            achieved_weight += weight
        else:
            # required_score > user_score >= 0 here, so the ratio is safe.
            partial.append(
                PartialSkill(
                    skill_name=required.skill_name,
                    user_proficiency=user_skill.proficiency_level,
                    required_proficiency=required.minimum_proficiency,
                    gap=f"Need to improve from {user_skill.proficiency_level} to {required.minimum_proficiency}",
                )
            )
            achieved_weight += (user_score / required_score) * weight

    match_score = round_percent(achieved_weight / total_weight * 100) if total_weight > 0 else 0

    return MatchBreakdown(
        match_score=max(0, min(100, match_score)),
        matching_skills=matching,
        partial_skills=partial,
        missing_skills=missing,
    )
