"""Pydantic models for company skill requirements and student skill gaps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Proficiency:
    code: str
    level: int
    label: str
    practice_type: str


# Ordered by increasing depth of mastery (Bloom-style taxonomy).
PROFICIENCY_LEVELS: dict[str, Proficiency] = {
    "CU": Proficiency("CU", 1, "Conceptual Understanding", "Conceptual Study"),
    "AP": Proficiency("AP", 2, "Application", "Hands-on Coding"),
    "AS": Proficiency("AS", 3, "Analysis & Synthesis", "Problem Solving"),
    "EV": Proficiency("EV", 4, "Evaluation", "System Design"),
    "CR": Proficiency("CR", 5, "Creation", "Mock Interviews"),
}

DEFAULT_PRACTICE_TYPE = PROFICIENCY_LEVELS["CU"].practice_type


def get_proficiency(code: str) -> Proficiency:
    """Look up a proficiency code, returning a neutral entry for unknown codes."""
    found = PROFICIENCY_LEVELS.get(code)
    if found is not None:
        return found
    return Proficiency(code, 0, code, DEFAULT_PRACTICE_TYPE)


class SkillRequirement(BaseModel):
    """One skill a target company expects, at a given proficiency."""

    skill_id: str
    skill_name: str
    skill_code: str
    required_level: int = Field(ge=1, le=5)
    proficiency_code: str
    proficiency_weight: int = Field(ge=1, le=5)
    topics: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_proficiency_row(cls, row: dict[str, Any]) -> SkillRequirement:
        """Build from a company-skill-proficiency row.

        The row carries the skill short code, its name, the proficiency code and
        the stage number; the stage doubles as required level and weight.
        """
        stage = int(row["stage"])
        code = row.get("code") or ""
        return cls(
            skill_id=str(row.get("skill_id") or code),
            skill_name=row.get("name") or code,
            skill_code=code,
            required_level=stage,
            proficiency_code=row.get("level_code") or "",
            proficiency_weight=stage,
            topics=row.get("topics") or "",
        )


class StudentSelfRating(BaseModel):
    skill_id: str
    rating: int = Field(ge=0, le=10)  # 0 = not rated

    model_config = {"frozen": True}


class SkillGap(BaseModel):
    skill_id: str
    skill_name: str
    skill_code: str
    gap: float  # required level - self rating / 2
    gap_percentage: float  # 0-100
    required_level: int
    self_rating: int  # 0-10, as given
    proficiency_code: str
    proficiency_weight: int
    topics: str = ""
    estimated_hours: int
    priority_score: float = 0.0  # 0-1, set by the ranker

    model_config = {"frozen": True}
