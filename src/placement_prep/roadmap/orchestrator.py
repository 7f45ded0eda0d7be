"""Roadmap orchestrator - composes the five planning stages."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Sequence

from placement_prep.models.roadmap import NarrativeInsights, RoadmapResult
from placement_prep.models.skills import SkillRequirement
from placement_prep.roadmap.gap_calculator import SelfRatings, calculate_skill_gaps
from placement_prep.roadmap.narrative import (
    DAILY_PRACTICE_HOURS,
    NarrativeContext,
    NarrativeGenerator,
    build_fallback_narrative,
)
from placement_prep.roadmap.priority_ranker import rank_skill_gaps
from placement_prep.roadmap.readiness import estimate_readiness
from placement_prep.roadmap.time_allocator import allocate_weeks
from placement_prep.roadmap.weekly_plan import build_weekly_plan

logger = logging.getLogger(__name__)


def estimated_days_to_close(total_hours: int) -> int:
    """Calendar days to cover ``total_hours`` at the fixed daily practice rate."""
    return math.ceil(total_hours / DAILY_PRACTICE_HOURS * 7 / 24)


def generate_roadmap(
    requirements: Sequence[SkillRequirement] | None,
    self_ratings: SelfRatings | None,
    available_weeks: int,
) -> RoadmapResult:
    """Build a prioritized, week-by-week study roadmap.

    Runs gap calculation, ranking, readiness, allocation and plan building in
    that order. No skills demanded, or no gaps left, yields the fully-ready
    result. ``available_weeks`` is assumed to be range-checked by the caller.
    """
    if not requirements:
        return RoadmapResult.fully_ready()

    gaps = calculate_skill_gaps(requirements, self_ratings)
    if not gaps:
        return RoadmapResult.fully_ready()

    gaps = rank_skill_gaps(gaps)
    readiness = estimate_readiness(gaps, requirements)
    allocation = allocate_weeks(gaps, max(available_weeks, len(gaps)))
    weekly_plan = build_weekly_plan(gaps, allocation, available_weeks)

    total_hours = sum(g.estimated_hours for g in gaps)
    return RoadmapResult(
        readiness_score=readiness.score,
        readiness_tier=readiness.tier,
        estimated_days_to_close=estimated_days_to_close(total_hours),
        total_hours_required=total_hours,
        skill_gaps=gaps,
        weekly_plan=weekly_plan,
    )


class RoadmapPlanner:
    """Generates roadmaps and attaches narrative insights.

    The narrator is optional. Without one, or when it fails, times out or
    returns an unusable payload, a locally built narrative is attached instead.
    """

    def __init__(self, narrator: NarrativeGenerator | None = None, *, timeout: float = 30.0):
        self.narrator = narrator
        self.timeout = timeout

    async def plan(
        self,
        company_name: str,
        requirements: Sequence[SkillRequirement] | None,
        self_ratings: SelfRatings | None,
        available_weeks: int,
        *,
        enrich: bool = True,
    ) -> RoadmapResult:
        roadmap = generate_roadmap(requirements, self_ratings, available_weeks)
        if not enrich:
            return roadmap
        insights = await self._narrate(company_name, roadmap, available_weeks)
        return roadmap.model_copy(update={"insights": insights})

    async def _narrate(
        self, company_name: str, roadmap: RoadmapResult, available_weeks: int
    ) -> NarrativeInsights:
        if self.narrator is None:
            logger.info("No narrative generator configured, using local narrative")
            return build_fallback_narrative(roadmap, company_name)

        context = NarrativeContext.from_roadmap(company_name, roadmap, available_weeks)
        try:
            return await asyncio.wait_for(self.narrator.generate(context), self.timeout)
        except Exception:
            logger.warning(
                "Narrative generation failed for %s, using local narrative",
                company_name,
                exc_info=True,
            )
            return build_fallback_narrative(roadmap, company_name)
