"""Data models for the placement preparation engines."""

from placement_prep.models.alignment import (
    AlignmentBreakdown,
    AlignmentResult,
    CompanySignalSet,
    CompanyStrategy,
    InnovationTheme,
    InnovxMaster,
    InnovxProject,
    ParsedProject,
    StrategicFeedback,
    StrategicPillar,
)
from placement_prep.models.company import CompanyRecord, HiringRounds
from placement_prep.models.comparison import (
    ComparisonCompany,
    ComparisonMetrics,
    ComparisonSkill,
)
from placement_prep.models.roadmap import (
    NarrativeInsights,
    RoadmapResult,
    WeeklyGuide,
    WeekPlan,
    WeekSkill,
)
from placement_prep.models.skills import SkillGap, SkillRequirement, StudentSelfRating

__all__ = [
    "AlignmentBreakdown",
    "AlignmentResult",
    "CompanyRecord",
    "CompanySignalSet",
    "CompanyStrategy",
    "ComparisonCompany",
    "ComparisonMetrics",
    "ComparisonSkill",
    "HiringRounds",
    "InnovationTheme",
    "InnovxMaster",
    "InnovxProject",
    "NarrativeInsights",
    "ParsedProject",
    "RoadmapResult",
    "SkillGap",
    "SkillRequirement",
    "StrategicFeedback",
    "StrategicPillar",
    "StudentSelfRating",
    "WeekPlan",
    "WeekSkill",
    "WeeklyGuide",
]
