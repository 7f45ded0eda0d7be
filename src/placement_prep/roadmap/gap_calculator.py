"""Step 1: turn required levels and self-ratings into skill gaps."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from placement_prep.models.skills import SkillGap, SkillRequirement, StudentSelfRating
from placement_prep.utils.numeric import clamp

RATING_SCALE_DIVISOR = 2  # 1-10 self-rating -> 1-5 requirement scale
HOURS_PER_LEVEL = 10

SelfRatings = Mapping[str, int] | Iterable[StudentSelfRating]


def ratings_by_skill(self_ratings: SelfRatings | None) -> dict[str, int]:
    """Normalize either accepted self-rating shape into a skill_id -> rating dict."""
    if not self_ratings:
        return {}
    if isinstance(self_ratings, Mapping):
        return {str(skill_id): int(rating) for skill_id, rating in self_ratings.items()}
    return {r.skill_id: r.rating for r in self_ratings}


def calculate_skill_gaps(
    requirements: Iterable[SkillRequirement],
    self_ratings: SelfRatings | None,
) -> list[SkillGap]:
    """Return a gap for every requirement the student does not yet meet.

    A missing self-rating counts as 0. Skills whose normalized self-rating
    meets or exceeds the required level are left out.
    """
    ratings = ratings_by_skill(self_ratings)
    gaps: list[SkillGap] = []
    for req in requirements:
        rating = ratings.get(req.skill_id, 0)
        raw_gap = req.required_level - rating / RATING_SCALE_DIVISOR
        if raw_gap <= 0:
            continue
        gaps.append(
            SkillGap(
                skill_id=req.skill_id,
                skill_name=req.skill_name,
                skill_code=req.skill_code,
                gap=max(0.0, raw_gap),
                gap_percentage=clamp(raw_gap / 5 * 100),
                required_level=req.required_level,
                self_rating=rating,
                proficiency_code=req.proficiency_code,
                proficiency_weight=req.proficiency_weight,
                topics=req.topics,
                estimated_hours=max(0, math.ceil(raw_gap * HOURS_PER_LEVEL)),
            )
        )
    return gaps
