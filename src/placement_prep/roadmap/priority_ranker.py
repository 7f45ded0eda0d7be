"""Step 2: weighted priority scoring of skill gaps."""

from __future__ import annotations

from placement_prep.models.skills import SkillGap

GAP_WEIGHT = 0.6
PROFICIENCY_WEIGHT = 0.3
REQUIRED_LEVEL_WEIGHT = 0.1
MAX_PROFICIENCY_WEIGHT = 5
MAX_REQUIRED_LEVEL = 5


def priority_score(gap: SkillGap, max_gap: float) -> float:
    return (
        GAP_WEIGHT * (gap.gap / max_gap)
        + PROFICIENCY_WEIGHT * (gap.proficiency_weight / MAX_PROFICIENCY_WEIGHT)
        + REQUIRED_LEVEL_WEIGHT * (gap.required_level / MAX_REQUIRED_LEVEL)
    )


def rank_skill_gaps(gaps: list[SkillGap]) -> list[SkillGap]:
    """Score every gap and return them highest priority first.

    The sort is stable, so equal scores keep their input order.
    """
    if not gaps:
        return []
    max_gap = max(max(g.gap for g in gaps), 1)
    scored = [
        g.model_copy(update={"priority_score": priority_score(g, max_gap)})
        for g in gaps
    ]
    return sorted(scored, key=lambda g: g.priority_score, reverse=True)
