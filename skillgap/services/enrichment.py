"""AI narrative enrichment on top of already-computed scores.

Each helper sends one prompt, decodes the reply against an explicit
schema and falls back to deterministic text when the gateway is down,
times out, or replies with something that does not decode. Nothing in
here raises to the caller.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Protocol, Sequence, TypeVar

from openai import OpenAIError
from pydantic import BaseModel, ValidationError

from skillgap.schemas.careers import GeneratedCareer
from skillgap.schemas.enrichment import (
    CareerReasoningReply,
    GeneratedCareersReply,
    LearningStrategiesReply,
    ResumeAnalysisReply,
    SkillGapAnalysesReply,
)
from skillgap.schemas.resume import ResumeAnalysis
from skillgap.services.llm_client import LLMUnavailableError
from skillgap.services.match_calculator import RequiredSkillLike, UserSkillLike


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

REASONING_MISSING = "Great career match based on your skills!"
REASONING_FAILED = "This career aligns well with your skill set."
INSIGHTS_FAILED = "Unable to generate AI insights at this time."
INSIGHTS_EMPTY = "Analysis unavailable"
RESUME_TEXT_LIMIT = 4000

_FENCE_RE = re.compile(r"```(?:json)?\n?")


class EnrichmentDecodeError(ValueError):
    pass


class TextGenerator(Protocol):
    def complete(self, prompt: str, *, max_tokens: int, temperature: float = 0.7) -> str: ...


_RECOVERABLE = (LLMUnavailableError, EnrichmentDecodeError, OpenAIError)


@dataclass(frozen=True)
class CareerMatchSummary:
    career_name: str
    match_score: int
    matching_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CareerRequirements:
    career_name: str
    required_skills: Sequence[RequiredSkillLike]


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()


def decode_reply(text: str, schema: type[M]) -> M:
    cleaned = strip_code_fences(text) or "{}"
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise EnrichmentDecodeError(f"reply is not valid JSON: {exc}") from exc
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise EnrichmentDecodeError(f"reply does not match {schema.__name__}: {exc.error_count()} error(s)") from exc


def strategy_fallback(skill: str) -> str:
    return f"Focus on building strong fundamentals in {skill} through hands-on projects."


def _numbered(lines: Sequence[str]) -> str:
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))


def _format_user_skills(user_skills: Sequence[UserSkillLike]) -> str:
    return ", ".join(f"{s.skill_name} ({s.proficiency_level})" for s in user_skills)


def _career_line(career: CareerMatchSummary) -> str:
    line = f"{career.career_name} ({career.match_score}% match)"
    if career.matching_skills:
        line += f"; has: {', '.join(career.matching_skills)}"
    if career.missing_skills:
        line += f"; missing: {', '.join(career.missing_skills)}"
    return line


def batch_explain_careers(
    client: TextGenerator,
    careers: Sequence[CareerMatchSummary],
    user_skills: Sequence[str],
    interests: Sequence[str],
) -> dict[str, str]:
    """One call for all careers; keyed by career name."""
    if not careers:
        return {}

    interests_line = f"And interests: {', '.join(interests)}" if interests else ""
    prompt = f"""
You are a career advisor. For each career below, provide a brief 1-2 sentence explanation of why it matches someone with these skills: {', '.join(user_skills)}
{interests_line}

CAREERS TO ANALYZE:
{_numbered([_career_line(c) for c in careers])}

Respond in JSON format ONLY (no markdown):
{{
    "reasoning": {{
        "Career Name 1": "Why this career matches...",
        "Career Name 2": "Why this career matches..."
    }}
}}
"""
    try:
        reply = decode_reply(client.complete(prompt, max_tokens=400), CareerReasoningReply)
    except _RECOVERABLE as exc:
        logger.warning("batch career reasoning failed: %s", exc)
        return {c.career_name: REASONING_FAILED for c in careers}

    reasoning = dict(reply.reasoning)
    for c in careers:
        reasoning.setdefault(c.career_name, REASONING_MISSING)
    return reasoning


def batch_learning_strategies(client: TextGenerator, skills: Sequence[str]) -> dict[str, str]:
    if not skills:
        return {}

    prompt = f"""
You are a learning advisor. For each skill below, provide a brief 2-3 sentence learning strategy including estimated time to job-ready level.

SKILLS:
{_numbered(list(skills))}

Respond in JSON format ONLY (no markdown):
{{
    "strategies": {{
        "Skill Name 1": "Learning strategy...",
        "Skill Name 2": "Learning strategy..."
    }}
}}
"""
    try:
        reply = decode_reply(client.complete(prompt, max_tokens=500), LearningStrategiesReply)
    except _RECOVERABLE as exc:
        logger.warning("batch learning strategies failed: %s", exc)
        return {s: f"Start with fundamentals and practice {s} regularly." for s in skills}

    strategies = dict(reply.strategies)
    for s in skills:
        strategies.setdefault(s, strategy_fallback(s))
    return strategies


def batch_analyze_skill_gaps(
    client: TextGenerator,
    user_skills: Sequence[UserSkillLike],
    careers: Sequence[CareerRequirements],
) -> dict[str, str]:
    """Readiness notes per career. Careers the model skipped are simply absent."""
    if not careers:
        return {}

    summaries = [
        f"{c.career_name}: Needs {', '.join(s.skill_name for s in c.required_skills)}" for c in careers
    ]
    prompt = f"""
You are a career guidance AI. Briefly analyze skill gaps for each career.

USER SKILLS: {_format_user_skills(user_skills)}

CAREERS:
{_numbered(summaries)}

For each career, provide a 2-3 sentence analysis covering readiness level and key gaps.

Respond in JSON format ONLY (no markdown):
{{
    "analyses": {{
        "Career Name 1": "Analysis...",
        "Career Name 2": "Analysis..."
    }}
}}
"""
    try:
        reply = decode_reply(client.complete(prompt, max_tokens=600), SkillGapAnalysesReply)
    except _RECOVERABLE as exc:
        logger.warning("batch skill gap analysis failed: %s", exc)
        return {}
    return dict(reply.analyses)


def analyze_skill_gap(
    client: TextGenerator,
    user_skills: Sequence[UserSkillLike],
    required_skills: Sequence[RequiredSkillLike],
    career_name: str,
) -> str:
    prompt = f"""
Career advisor: Briefly analyze skill gap for "{career_name}".

USER: {', '.join(f"{s.skill_name}({s.proficiency_level})" for s in user_skills)}
NEEDS: {', '.join(f"{s.skill_name}({s.minimum_proficiency})" for s in required_skills)}

In 2-3 sentences: readiness level, top strength, critical gap, time estimate.
"""
    try:
        text = client.complete(prompt, max_tokens=150)
    except _RECOVERABLE as exc:
        logger.warning("skill gap insight failed career=%s: %s", career_name, exc)
        return INSIGHTS_FAILED
    return text.strip() or INSIGHTS_EMPTY


def analyze_resume(client: TextGenerator, resume_text: str) -> ResumeAnalysis:
    prompt = f"""
Extract from this resume (JSON only, no markdown):

{resume_text[:RESUME_TEXT_LIMIT]}

{{
    "skills": ["skill1", "skill2"],
    "experience": "Brief 1-2 sentences",
    "summary": "1-2 sentences",
    "recommendations": ["rec1", "rec2", "rec3"]
}}
"""
    try:
        reply = decode_reply(client.complete(prompt, max_tokens=500, temperature=0.3), ResumeAnalysisReply)
    except _RECOVERABLE as exc:
        logger.warning("resume analysis failed: %s", exc)
        return ResumeAnalysis(
            skills=[],
            experience="Analysis failed",
            summary="Unable to analyze resume at this time",
            recommendations=["Please try uploading again"],
        )

    return ResumeAnalysis(
        skills=reply.skills,
        experience=reply.experience or "Unable to extract experience",
        summary=reply.summary or "Unable to generate summary",
        recommendations=reply.recommendations,
    )


def _slug(value: str) -> str:
    return re.sub(r"\s+", "-", value.lower())


def _to_generated(reply: GeneratedCareersReply, id_prefix: str) -> list[GeneratedCareer]:
    return [
        GeneratedCareer(
            id=f"{id_prefix}-{index}",
            title=career.title,
            description=career.description,
            match_reason=career.match_reason,
            required_skills=career.required_skills,
            salary_range=career.salary_range,
            growth_outlook=career.growth_outlook,
        )
        for index, career in enumerate(reply.careers)
    ]


def generate_careers(client: TextGenerator, industry: str) -> list[GeneratedCareer]:
    prompt = f"""
Generate 6 jobs in "{industry}" industry. JSON only, no markdown:

{{
    "careers": [{{
        "title": "Job Title",
        "description": "1 sentence",
        "requiredSkills": [{{"skillName": "X", "importance": "Essential", "minimumProficiency": "Intermediate"}}],
        "salaryRange": "$XX,XXX - $XX,XXX",
        "growthOutlook": "High demand"
    }}]
}}
"""
    try:
        reply = decode_reply(client.complete(prompt, max_tokens=800), GeneratedCareersReply)
    except _RECOVERABLE as exc:
        logger.warning("career generation failed industry=%s: %s", industry, exc)
        return []
    return _to_generated(reply, f"ai-{_slug(industry)}")


def suggest_careers(
    client: TextGenerator,
    user_skills: Sequence[UserSkillLike],
    interests: str | None = None,
) -> list[GeneratedCareer]:
    skills_list = ", ".join(f"{s.skill_name}({s.proficiency_level})" for s in user_skills)
    interests_line = f"Interests: {interests}" if interests else ""
    prompt = f"""
Suggest 6 careers for someone with: {skills_list or 'No skills yet'}
{interests_line}

JSON only, no markdown:
{{
    "careers": [{{
        "title": "Job Title",
        "description": "Why this matches (1 sentence)",
        "matchReason": "Skill alignment",
        "requiredSkills": [{{"skillName": "X", "importance": "Essential", "minimumProficiency": "Intermediate"}}],
        "salaryRange": "$XX,XXX - $XX,XXX",
        "growthOutlook": "High demand"
    }}]
}}
"""
    try:
        reply = decode_reply(client.complete(prompt, max_tokens=800), GeneratedCareersReply)
    except _RECOVERABLE as exc:
        logger.warning("career suggestion failed: %s", exc)
        return []
    return _to_generated(reply, "suggested")
