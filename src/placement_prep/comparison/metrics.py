"""Company comparison metrics: skill intensity, cognitive depth and complexity."""

from __future__ import annotations

from placement_prep.models.comparison import (
    ComparisonCompany,
    ComparisonMetrics,
    ComplexityLabel,
)

INTENSITY_WEIGHT = 0.5
DEPTH_WEIGHT = 1.0
ROUNDS_WEIGHT = 0.3

# (upper bound, label), checked bottom-up.
COMPLEXITY_BANDS: tuple[tuple[float, ComplexityLabel], ...] = (
    (4, "Easy"),
    (6, "Moderate"),
    (8, "High"),
)


def complexity_label(index: float) -> ComplexityLabel:
    for upper, label in COMPLEXITY_BANDS:
        if index < upper:
            return label
    return "Elite"


def calculate_comparison_metrics(company: ComparisonCompany) -> ComparisonMetrics:
    """Summarise how demanding a company's hiring bar is.

    complexity = 0.5 * mean rating + 1.0 * mean proficiency weight
                 + 0.3 * total interview rounds
    """
    if not company.skills:
        return ComparisonMetrics(
            skill_intensity=0.0,
            cognitive_depth=0.0,
            complexity_index=0.0,
            complexity_label="Easy",
        )

    count = len(company.skills)
    intensity = sum(s.rating for s in company.skills) / count
    depth = sum(s.proficiency_weight for s in company.skills) / count
    index = (
        intensity * INTENSITY_WEIGHT
        + depth * DEPTH_WEIGHT
        + company.hiring.total_rounds * ROUNDS_WEIGHT
    )
    return ComparisonMetrics(
        skill_intensity=round(intensity, 1),
        cognitive_depth=round(depth, 1),
        complexity_index=round(index, 1),
        complexity_label=complexity_label(index),
    )
