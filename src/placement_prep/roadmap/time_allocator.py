"""Step 4: proportional week allocation."""

from __future__ import annotations

from collections.abc import Sequence

from placement_prep.models.skills import SkillGap
from placement_prep.utils.numeric import round_half_up


def allocate_weeks(gaps: Sequence[SkillGap], available_weeks: int) -> dict[str, int]:
    """Give each skill a share of the week budget proportional to its gap.

    Every gapped skill gets at least one week, so the total can exceed
    ``available_weeks``; the weekly plan builder truncates the overflow.
    """
    allocation: dict[str, int] = {}
    if not gaps:
        return allocation

    total_gap = sum(g.gap for g in gaps)
    for gap in gaps:
        proportional = gap.gap / total_gap * available_weeks
        allocation[gap.skill_id] = max(1, round_half_up(proportional))
    return allocation
