from __future__ import annotations

import httpx
import openai
import pytest

from skillgap.schemas.careers import RequiredSkill
from skillgap.schemas.enrichment import CareerReasoningReply, GeneratedCareersReply
from skillgap.schemas.skills import UserSkillEntry
from skillgap.services import enrichment
from skillgap.services.enrichment import (
    CareerMatchSummary,
    CareerRequirements,
    EnrichmentDecodeError,
    decode_reply,
    strip_code_fences,
)


USER_SKILLS = [UserSkillEntry(skill_name="Python", proficiency_level="Advanced")]


def test_strip_code_fences() -> None:
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('```\n{"a": 1}```') == '{"a": 1}'
    assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


def test_decode_reply_validates_shape() -> None:
    reply = decode_reply('```json\n{"reasoning": {"Data Scientist": "Strong Python."}}\n```', CareerReasoningReply)
    assert reply.reasoning == {"Data Scientist": "Strong Python."}

    with pytest.raises(EnrichmentDecodeError):
        decode_reply("not json at all", CareerReasoningReply)
    with pytest.raises(EnrichmentDecodeError):
        decode_reply('{"reasoning": ["not", "a", "map"]}', CareerReasoningReply)


def test_decode_reply_accepts_skill_name_aliases() -> None:
    reply = decode_reply(
        '{"careers": [{"title": "Analyst", "requiredSkills": [{"name": "SQL"}, {"skillName": "Excel"}]}]}',
        GeneratedCareersReply,
    )
    assert [s.skill_name for s in reply.careers[0].required_skills] == ["SQL", "Excel"]


def test_batch_explain_careers_fills_missing_names(fake_llm) -> None:
    fake_llm.queue('{"reasoning": {"Data Scientist": "You know Python."}}')
    careers = [
        CareerMatchSummary("Data Scientist", 50, ["Python"], ["SQL"]),
        CareerMatchSummary("DevOps Engineer", 25),
    ]
    result = enrichment.batch_explain_careers(fake_llm, careers, ["Python"], ["data"])

    assert result["Data Scientist"] == "You know Python."
    assert result["DevOps Engineer"] == enrichment.REASONING_MISSING
    assert "1. Data Scientist (50% match); has: Python; missing: SQL" in fake_llm.prompts[0]
    assert "2. DevOps Engineer (25% match)\n" in fake_llm.prompts[0]
    assert "And interests: data" in fake_llm.prompts[0]


def test_batch_explain_careers_falls_back_when_gateway_is_down(fake_llm) -> None:
    careers = [CareerMatchSummary("Data Scientist", 50)]
    result = enrichment.batch_explain_careers(fake_llm, careers, ["Python"], [])
    assert result == {"Data Scientist": enrichment.REASONING_FAILED}


def test_batch_explain_careers_falls_back_on_malformed_reply(fake_llm) -> None:
    fake_llm.queue("Sure! Here are the reasons...")
    result = enrichment.batch_explain_careers(fake_llm, [CareerMatchSummary("UX Designer", 0)], [], [])
    assert result == {"UX Designer": enrichment.REASONING_FAILED}


def test_batch_with_nothing_to_explain_skips_the_call(fake_llm) -> None:
    assert enrichment.batch_explain_careers(fake_llm, [], ["Python"], []) == {}
    assert enrichment.batch_learning_strategies(fake_llm, []) == {}
    assert enrichment.batch_analyze_skill_gaps(fake_llm, USER_SKILLS, []) == {}
    assert fake_llm.prompts == []


def test_batch_learning_strategies(fake_llm) -> None:
    fake_llm.queue('{"strategies": {"SQL": "Two weeks of joins."}}')
    result = enrichment.batch_learning_strategies(fake_llm, ["SQL", "Docker"])
    assert result["SQL"] == "Two weeks of joins."
    assert result["Docker"] == enrichment.strategy_fallback("Docker")

    failed = enrichment.batch_learning_strategies(fake_llm, ["Docker"])
    assert failed == {"Docker": "Start with fundamentals and practice Docker regularly."}


def test_batch_analyze_skill_gaps_returns_empty_on_failure(fake_llm) -> None:
    careers = [CareerRequirements("Data Scientist", [RequiredSkill(skill_name="SQL")])]
    assert enrichment.batch_analyze_skill_gaps(fake_llm, USER_SKILLS, careers) == {}

    fake_llm.queue('{"analyses": {"Data Scientist": "Almost there."}}')
    assert enrichment.batch_analyze_skill_gaps(fake_llm, USER_SKILLS, careers) == {"Data Scientist": "Almost there."}
    assert "Data Scientist: Needs SQL" in fake_llm.prompts[-1]


def test_analyze_skill_gap_plain_text(fake_llm) -> None:
    required = [RequiredSkill(skill_name="SQL", minimum_proficiency="Advanced")]
    assert enrichment.analyze_skill_gap(fake_llm, USER_SKILLS, required, "Analyst") == enrichment.INSIGHTS_FAILED

    fake_llm.queue("   ")
    assert enrichment.analyze_skill_gap(fake_llm, USER_SKILLS, required, "Analyst") == enrichment.INSIGHTS_EMPTY

    fake_llm.queue("  Ready in three months.\n")
    assert enrichment.analyze_skill_gap(fake_llm, USER_SKILLS, required, "Analyst") == "Ready in three months."
    assert "SQL(Advanced)" in fake_llm.prompts[-1]


def test_analyze_resume_truncates_and_falls_back(fake_llm) -> None:
    failed = enrichment.analyze_resume(fake_llm, "x" * 5000)
    assert failed.skills == []
    assert failed.experience == "Analysis failed"
    assert failed.recommendations == ["Please try uploading again"]
    assert "x" * enrichment.RESUME_TEXT_LIMIT in fake_llm.prompts[0]
    assert "x" * (enrichment.RESUME_TEXT_LIMIT + 1) not in fake_llm.prompts[0]

    fake_llm.queue('{"skills": ["Python"], "recommendations": ["Add metrics"]}')
    parsed = enrichment.analyze_resume(fake_llm, "resume text")
    assert parsed.skills == ["Python"]
    assert parsed.experience == "Unable to extract experience"
    assert parsed.summary == "Unable to generate summary"


def test_generate_careers_ids_use_industry_slug(fake_llm) -> None:
    fake_llm.queue(
        '```json\n{"careers": [{"title": "Quant Developer", "requiredSkills": [{"skillName": "Python"}]},'
        ' {"title": "Risk Analyst"}]}\n```'
    )
    careers = enrichment.generate_careers(fake_llm, "Financial Technology")
    assert [c.id for c in careers] == ["ai-financial-technology-0", "ai-financial-technology-1"]
    assert careers[0].required_skills[0].minimum_proficiency == "Intermediate"
    assert careers[1].salary_range == "Varies"

    assert enrichment.generate_careers(fake_llm, "fintech") == []


def test_suggest_careers(fake_llm) -> None:
    fake_llm.queue('{"careers": [{"title": "ML Engineer", "matchReason": "Python depth"}]}')
    careers = enrichment.suggest_careers(fake_llm, USER_SKILLS, "robotics")
    assert careers[0].id == "suggested-0"
    assert careers[0].match_reason == "Python depth"
    assert "Python(Advanced)" in fake_llm.prompts[0]
    assert "Interests: robotics" in fake_llm.prompts[0]

    assert enrichment.suggest_careers(fake_llm, USER_SKILLS) == []


def _gateway_errors() -> list[Exception]:
    request = httpx.Request("POST", "http://gateway.test/v1/chat/completions")
    return [openai.APITimeoutError(request=request), openai.APIConnectionError(request=request)]


@pytest.mark.parametrize("error", _gateway_errors(), ids=["timeout", "connection"])
def test_gateway_errors_resolve_to_fallbacks(fake_llm, error) -> None:
    required = [RequiredSkill(skill_name="SQL")]
    gap_careers = [CareerRequirements("Data Scientist", required)]

    fake_llm.queue(*([error] * 7))

    assert enrichment.batch_explain_careers(fake_llm, [CareerMatchSummary("Data Scientist", 50)], ["Python"], []) == {
        "Data Scientist": enrichment.REASONING_FAILED
    }
    assert enrichment.batch_learning_strategies(fake_llm, ["SQL"]) == {
        "SQL": "Start with fundamentals and practice SQL regularly."
    }
    assert enrichment.batch_analyze_skill_gaps(fake_llm, USER_SKILLS, gap_careers) == {}
    assert enrichment.analyze_skill_gap(fake_llm, USER_SKILLS, required, "Data Scientist") == enrichment.INSIGHTS_FAILED
    assert enrichment.analyze_resume(fake_llm, "resume text").experience == "Analysis failed"
    assert enrichment.generate_careers(fake_llm, "fintech") == []
    assert enrichment.suggest_careers(fake_llm, USER_SKILLS) == []
    assert fake_llm.replies == []
