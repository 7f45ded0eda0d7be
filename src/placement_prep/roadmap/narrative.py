"""Narrative enrichment for roadmaps: LLM-written guidance plus a local fallback."""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel

from placement_prep.clients.llm_client import DEFAULT_MODEL, LLMClient
from placement_prep.models.roadmap import NarrativeInsights, RoadmapResult, WeeklyGuide
from placement_prep.models.skills import SkillGap

logger = logging.getLogger(__name__)

TOP_GAPS_IN_PROMPT = 5
DAILY_PRACTICE_HOURS = 3

SYSTEM_PROMPT = """\
You are an expert career coach specializing in technical interview preparation.
Always respond with valid JSON only, no markdown or extra text.

Output format:
{
  "overview": "brief overview of the preparation strategy",
  "weeklyPlan": [
    {
      "week": 1,
      "focus": "focus area",
      "topics": ["topic"],
      "practiceExercises": ["exercise"],
      "resources": ["resource"],
      "successMetrics": ["metric"]
    }
  ],
  "additionalInsights": ["insight"],
  "motivationalTips": ["tip"]
}"""

FALLBACK_RESOURCES = [
    "GeeksforGeeks and LeetCode for coding skills",
    "System Design Primer for architecture concepts",
    "YouTube tutorials for conceptual understanding",
]

FALLBACK_TIPS = [
    "Break down large topics into smaller, manageable chunks",
    "Practice consistently - 3 hours daily is better than 21 hours in one day",
    "Explain concepts aloud to solidify understanding",
    "Take mock interviews to simulate real scenarios",
    "Learn from failures - review wrong answers thoroughly",
]


class NarrativeError(ValueError):
    """The text-generation service returned an unusable narrative."""


class NarrativeContext(BaseModel):
    """Compact prompt context sent to the text-generation service."""

    company_name: str
    top_gaps: list[SkillGap]
    available_weeks: int
    readiness_score: int

    @classmethod
    def from_roadmap(
        cls, company_name: str, roadmap: RoadmapResult, available_weeks: int
    ) -> NarrativeContext:
        return cls(
            company_name=company_name,
            top_gaps=roadmap.skill_gaps[:TOP_GAPS_IN_PROMPT],
            available_weeks=available_weeks,
            readiness_score=roadmap.readiness_score,
        )


class NarrativeGenerator(Protocol):
    async def generate(self, context: NarrativeContext) -> NarrativeInsights: ...


def build_prompt(context: NarrativeContext) -> str:
    skill_summary = "\n".join(
        f"{g.skill_code}: Gap of {g.gap:.1f} levels "
        f"(from {g.self_rating}/10 to {g.required_level}/5)"
        for g in context.top_gaps
    )
    return f"""Generate a personalized, week-by-week preparation roadmap for a student targeting the following:

Company: {context.company_name}
Current Readiness: {context.readiness_score}%
Available Weeks: {context.available_weeks}
Top Skill Gaps:
{skill_summary or "None"}

Include a brief overview of the strategy, a weekly breakdown (focus areas, learning
topics, practice exercises, recommended resources, success metrics), and additional
insights and tips. Make it actionable and achievable within the timeframe, building
fundamentals first."""


def parse_narrative(data: dict | list) -> NarrativeInsights:
    """Validate an LLM payload, raising NarrativeError when required fields are missing."""
    if not isinstance(data, dict):
        raise NarrativeError(f"Expected dict from LLM, got {type(data).__name__}")
    overview = data.get("overview")
    weekly = data.get("weeklyPlan")
    if not overview or not isinstance(weekly, list):
        raise NarrativeError("Narrative is missing overview or weeklyPlan")

    guides = []
    for index, item in enumerate(weekly, 1):
        if not isinstance(item, dict):
            continue
        guides.append(
            WeeklyGuide(
                week=item.get("week") or index,
                focus=item.get("focus") or "",
                topics=item.get("topics") or [],
                practice_exercises=item.get("practiceExercises") or [],
                resources=item.get("resources") or [],
                success_metrics=item.get("successMetrics") or [],
            )
        )
    return NarrativeInsights(
        overview=str(overview),
        additional_insights=data.get("additionalInsights") or [],
        motivational_tips=data.get("motivationalTips") or [],
        weekly_guides=guides,
        source="llm",
    )


class LLMNarrativeGenerator:
    """NarrativeGenerator backed by the Claude API."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(self, context: NarrativeContext) -> NarrativeInsights:
        logger.info("Requesting roadmap narrative for %s", context.company_name)
        data = await self.llm.generate_json(
            prompt=build_prompt(context),
            system=SYSTEM_PROMPT,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return parse_narrative(data)


def build_fallback_narrative(roadmap: RoadmapResult, company_name: str) -> NarrativeInsights:
    """Deterministic narrative computed from the numeric roadmap alone."""
    guides = []
    for week in roadmap.weekly_plan:
        first_skill = week.skills[0].skill_name if week.skills else "core skills"
        week_hours = sum(s.hours for s in week.skills)
        guides.append(
            WeeklyGuide(
                week=week.week,
                focus=week.theme,
                topics=[
                    topic.strip()
                    for s in week.skills
                    for topic in s.topics.split(",")
                    if topic.strip()
                ],
                practice_exercises=[
                    f"Complete {len(week.skills)} skill-focused exercises",
                    f"Build 1 mini-project related to {first_skill}",
                    "Solve 10 practice problems from expected topics",
                ],
                resources=list(FALLBACK_RESOURCES),
                success_metrics=[
                    f"Spend {week_hours}+ hours on focused learning",
                    "Complete all assigned exercises with 80%+ accuracy",
                    "Be able to explain concepts to someone else",
                ],
            )
        )

    return NarrativeInsights(
        overview=(
            f"This is a deterministic preparation plan for {company_name}. "
            f"You are currently {roadmap.readiness_score}% ready. The roadmap focuses "
            "on closing skill gaps in order of priority and importance."
        ),
        additional_insights=[
            f"Total estimated preparation time: {roadmap.total_hours_required} hours",
            f"Expected completion timeline: {roadmap.estimated_days_to_close} days "
            f"with consistent {DAILY_PRACTICE_HOURS}-hour daily practice",
            "Focus on depth over breadth - master fundamentals thoroughly",
            "Revise regularly and maintain a learning journal",
        ],
        motivational_tips=list(FALLBACK_TIPS),
        weekly_guides=guides,
        source="fallback",
    )
