"""Step 5: expand a week allocation into a week-by-week curriculum."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from placement_prep.models.roadmap import WeekPlan, WeekSkill
from placement_prep.models.skills import SkillGap, get_proficiency

FOUNDATION_THEME = "Build Foundation in Core Skills"


def week_range_label(start: int, block_weeks: int, available_weeks: int) -> str:
    end = min(start + block_weeks - 1, available_weeks)
    if end > start:
        return f"Week {start}-{end}"
    return f"Week {start}"


def week_theme(entries: Sequence[WeekSkill]) -> tuple[str, str]:
    """Return (theme, completion target) for the skills studied in one week."""
    if len(entries) == 1:
        only = entries[0]
        return (
            f"Master {only.skill_code}",
            f"Achieve {only.focus_proficiency} in {only.skill_name}",
        )
    return FOUNDATION_THEME, f"Complete {len(entries)} skill modules"


def build_weekly_plan(
    gaps: Sequence[SkillGap],
    allocation: Mapping[str, int],
    available_weeks: int,
) -> list[WeekPlan]:
    """Walk gaps in priority order, giving each its allocated consecutive weeks.

    Skills that no longer fit inside ``available_weeks`` are dropped, and a
    skill whose block runs past the budget is cut short.
    """
    entries: dict[int, list[WeekSkill]] = {}
    ranges: dict[int, str] = {}
    week = 1

    for gap in gaps:
        if week > available_weeks:
            break
        block = allocation.get(gap.skill_id, 1)
        hours = math.ceil(gap.estimated_hours / block)
        entry = WeekSkill(
            skill_id=gap.skill_id,
            skill_name=gap.skill_name,
            skill_code=gap.skill_code,
            focus_proficiency=gap.proficiency_code,
            hours=hours,
            practice_type=get_proficiency(gap.proficiency_code).practice_type,
            topics=gap.topics,
        )
        for offset in range(block):
            if week > available_weeks:
                break
            if week not in entries:
                entries[week] = []
                if offset == 0:
                    ranges[week] = week_range_label(week, block, available_weeks)
                else:
                    ranges[week] = f"Week {week}"
            entries[week].append(entry)
            week += 1

    plan: list[WeekPlan] = []
    for number in sorted(entries):
        theme, target = week_theme(entries[number])
        plan.append(
            WeekPlan(
                week=number,
                week_range=ranges[number],
                skills=entries[number],
                theme=theme,
                completion_target=target,
            )
        )
    return plan
