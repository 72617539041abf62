from __future__ import annotations

import pytest

from skillgap.schemas.careers import GeneratedSkill, RequiredSkill
from skillgap.schemas.skills import UserSkillEntry
from skillgap.services.match_calculator import compute_match, proficiency_score, round_percent


def _user(name: str, level: str) -> UserSkillEntry:
    return UserSkillEntry(skill_name=name, proficiency_level=level)


def _required(name: str, minimum: str = "Intermediate", importance: str = "Critical", weight: float | None = 5) -> RequiredSkill:
    return RequiredSkill(skill_name=name, importance=importance, minimum_proficiency=minimum, weight=weight)


def test_skill_at_or_above_threshold_is_a_full_match() -> None:
    result = compute_match([_user("SQL", "Advanced")], [_required("SQL", "Intermediate", weight=8)])

    assert result.match_score == 100
    assert [s.skill_name for s in result.matching_skills] == ["SQL"]
    assert result.matching_skills[0].user_proficiency == "Advanced"
    assert result.matching_skills[0].required_proficiency == "Intermediate"
    assert result.partial_skills == []
    assert result.missing_skills == []


def test_skill_below_threshold_earns_proportional_credit() -> None:
    result = compute_match([_user("SQL", "Beginner")], [_required("SQL", "Advanced", weight=10)])

    # 25 / 75 of the weight.
    assert result.match_score == 33
    assert len(result.partial_skills) == 1
    assert result.partial_skills[0].gap == "Need to improve from Beginner to Advanced"
    assert result.matching_skills == []
    assert result.missing_skills == []


def test_no_user_skills_means_everything_is_missing() -> None:
    result = compute_match([], [_required("Python"), _required("Git", "Beginner", "Important")])

    assert result.match_score == 0
    assert [s.skill_name for s in result.missing_skills] == ["Python", "Git"]
    assert result.missing_skills[1].importance == "Important"
    assert result.missing_skills[1].required_proficiency == "Beginner"
    assert result.matching_skills == [] and result.partial_skills == []


def test_lists_partition_the_requirements() -> None:
    user = [_user("JavaScript", "Advanced"), _user("React", "Beginner"), _user("Git", "Expert")]
    required = [
        _required("JavaScript", weight=8),
        _required("React", weight=7),
        _required("Node.js", weight=7),
        _required("SQL", "Beginner", weight=5),
        _required("Git", "Beginner", weight=4),
    ]
    result = compute_match(user, required)

    names = (
        [s.skill_name for s in result.matching_skills]
        + [s.skill_name for s in result.partial_skills]
        + [s.skill_name for s in result.missing_skills]
    )
    assert sorted(names) == sorted(r.skill_name for r in required)
    assert len(names) == len(required)
    assert 0 <= result.match_score <= 100


def test_weighted_score_mixes_full_and_partial_matches() -> None:
    user = [_user("JavaScript", "Advanced"), _user("React", "Intermediate"), _user("SQL", "Beginner"), _user("Git", "Expert")]
    required = [
        _required("JavaScript", weight=8),
        _required("React", weight=7),
        _required("Node.js", weight=7),
        _required("SQL", weight=5),
        _required("Git", "Beginner", weight=4),
    ]
    # (8 + 7 + 2.5 + 4) / 31
    assert compute_match(user, required).match_score == 69


def test_missing_or_zero_weight_defaults_to_five() -> None:
    user = [_user("A", "Expert")]
    required = [_required("A", weight=None), _required("B", weight=0), _required("C", weight=10)]
    # 5 / (5 + 5 + 10)
    assert compute_match(user, required).match_score == 25


def test_empty_requirements_score_zero() -> None:
    assert compute_match([_user("Python", "Expert")], []).match_score == 0


def test_names_are_case_sensitive() -> None:
    result = compute_match([_user("python", "Expert")], [_required("Python")])
    assert [s.skill_name for s in result.missing_skills] == ["Python"]


def test_later_duplicate_user_entry_wins() -> None:
    user = [_user("SQL", "Expert"), _user("SQL", "Beginner")]
    result = compute_match(user, [_required("SQL", "Advanced")])
    assert [s.skill_name for s in result.partial_skills] == ["SQL"]


def test_unknown_required_level_is_always_met() -> None:
    result = compute_match([_user("Go", "Beginner")], [_required("Go", "Guru")])
    assert result.match_score == 100
    assert [s.skill_name for s in result.matching_skills] == ["Go"]


def test_unknown_user_level_is_a_partial_with_no_credit() -> None:
    result = compute_match([_user("Go", "Wizard")], [_required("Go", "Beginner")])
    assert result.match_score == 0
    assert result.partial_skills[0].gap == "Need to improve from Wizard to Beginner"


def test_generated_skills_score_like_stored_requirements() -> None:
    required = [
        GeneratedSkill.model_validate({"skillName": "Python", "importance": "Essential", "minimumProficiency": "Advanced"}),
        GeneratedSkill.model_validate({"name": "SQL", "proficiency": "Beginner"}),
    ]
    result = compute_match([_user("SQL", "Intermediate")], required)
    assert result.match_score == 50
    assert [s.skill_name for s in result.missing_skills] == ["Python"]


def test_compute_match_is_idempotent() -> None:
    user = [_user("SQL", "Beginner"), _user("Python", "Advanced")]
    required = [_required("SQL", "Advanced"), _required("Python"), _required("Docker")]
    assert compute_match(user, required) == compute_match(user, required)


@pytest.mark.parametrize(
    ("level", "expected"),
    [("Beginner", 25), ("Intermediate", 50), ("Advanced", 75), ("Expert", 100), ("beginner", 0), ("", 0), (None, 0)],
)
def test_proficiency_score(level, expected) -> None:
    assert proficiency_score(level) == expected


def test_round_percent_rounds_half_up() -> None:
    assert round_percent(12.5) == 13
    assert round_percent(0.5) == 1
    assert round_percent(33.33) == 33
    assert round_percent(66.67) == 67


def test_generated_skill_weight_is_honoured() -> None:
    required = [
        GeneratedSkill.model_validate({"skillName": "Python", "minimumProficiency": "Beginner", "weight": 15}),
        GeneratedSkill.model_validate({"skillName": "Docker"}),
    ]
    # 15 / (15 + 5)
    assert compute_match([_user("Python", "Expert")], required).match_score == 75
