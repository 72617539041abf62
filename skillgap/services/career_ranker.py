from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from skillgap.services.match_calculator import round_percent


@dataclass(frozen=True)
class CareerCandidate:
    career: Any
    required_skill_names: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RankedCareer:
    career: Any
    match_score: int
    matching_skills: list[str]
    missing_skills: list[str]


def _unique_in_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def score_overlap(user_skill_names: set[str], required_names: list[str]) -> tuple[int, list[str], list[str]]:
    matching = [name for name in required_names if name in user_skill_names]
    missing = [name for name in required_names if name not in user_skill_names]
    return round_percent(len(matching) / len(required_names) * 100), matching, missing


def rank_careers(
    user_skill_names: Iterable[str],
    careers: Sequence[CareerCandidate],
    top_n: int = 5,
) -> list[RankedCareer]:
    """Rank careers by the share of their required skills the user already has.

    Careers without any required skill are left out. Equal scores keep
    input order.
    """
    if top_n <= 0:
        return []

    user_set = set(user_skill_names)
    ranked: list[RankedCareer] = []
    for candidate in careers:
        required = _unique_in_order(candidate.required_skill_names)
        if not required:
            continue
        score, matching, missing = score_overlap(user_set, required)
        ranked.append(
            RankedCareer(
                career=candidate.career,
                match_score=score,
                matching_skills=matching,
                missing_skills=missing,
            )
        )

    # sorted() is stable, including with reverse=True.
    ranked = sorted(ranked, key=lambda item: item.match_score, reverse=True)
    return ranked[:top_n]
