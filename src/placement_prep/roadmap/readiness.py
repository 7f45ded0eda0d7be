"""Step 3: aggregate readiness score and tier."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from placement_prep.models.roadmap import READINESS_COMPLETE
from placement_prep.models.skills import SkillGap, SkillRequirement
from placement_prep.utils.numeric import clamp, round_half_up

# (minimum score, tier), checked top-down.
TIER_THRESHOLDS = (
    (80, "Very High"),
    (60, "High"),
    (40, "Medium"),
)
LOWEST_TIER = "Low"


class Readiness(NamedTuple):
    score: int
    tier: str


def readiness_tier(score: float) -> str:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return LOWEST_TIER


def estimate_readiness(
    gaps: Sequence[SkillGap],
    requirements: Sequence[SkillRequirement],
) -> Readiness:
    """Average the gap percentage over every requirement, met or not."""
    if not requirements or not gaps:
        return Readiness(100, READINESS_COMPLETE)

    average_gap = sum(g.gap_percentage for g in gaps) / len(requirements)
    score = clamp(100 - average_gap)
    return Readiness(round_half_up(score), readiness_tier(score))
