"""Pydantic models for the generated study roadmap."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from placement_prep.models.skills import SkillGap

READINESS_COMPLETE = "Complete"
READINESS_TIERS = ("Very High", "High", "Medium", "Low")


class WeekSkill(BaseModel):
    skill_id: str
    skill_name: str
    skill_code: str
    focus_proficiency: str
    hours: int
    practice_type: str
    topics: str = ""

    model_config = {"frozen": True}


class WeekPlan(BaseModel):
    week: int  # 1-based
    week_range: str
    skills: list[WeekSkill]
    theme: str
    completion_target: str

    model_config = {"frozen": True}


class WeeklyGuide(BaseModel):
    week: int
    focus: str = ""
    topics: list[str] = []
    practice_exercises: list[str] = []
    resources: list[str] = []
    success_metrics: list[str] = []

    model_config = {"frozen": True}


class NarrativeInsights(BaseModel):
    overview: str
    additional_insights: list[str] = []
    motivational_tips: list[str] = []
    weekly_guides: list[WeeklyGuide] = []
    source: Literal["llm", "fallback"] = "fallback"

    model_config = {"frozen": True}


class RoadmapResult(BaseModel):
    readiness_score: int  # 0-100
    readiness_tier: str
    estimated_days_to_close: int
    total_hours_required: int
    skill_gaps: list[SkillGap]
    weekly_plan: list[WeekPlan]
    insights: NarrativeInsights | None = None

    model_config = {"frozen": True}

    @classmethod
    def fully_ready(cls) -> RoadmapResult:
        """Sentinel result when nothing is left to study."""
        return cls(
            readiness_score=100,
            readiness_tier=READINESS_COMPLETE,
            estimated_days_to_close=0,
            total_hours_required=0,
            skill_gaps=[],
            weekly_plan=[],
        )
