"""Pydantic models for side-by-side company comparison."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from placement_prep.models.company import CompanyRecord, HiringRounds

ComplexityLabel = Literal["Easy", "Moderate", "High", "Elite"]


class ComparisonSkill(BaseModel):
    skill_name: str
    rating: float  # 1-10
    proficiency_code: str
    proficiency_weight: float  # 1-5


class ComparisonCompany(BaseModel):
    company_id: int
    name: str
    category: str = ""
    skills: list[ComparisonSkill] = []
    hiring: HiringRounds = HiringRounds()

    @classmethod
    def from_record(cls, record: CompanyRecord) -> ComparisonCompany:
        """Project a stored record onto the comparison view.

        Required levels (1-5) are doubled to the 1-10 rating scale.
        """
        return cls(
            company_id=record.company_id,
            name=record.name,
            category=record.category,
            skills=[
                ComparisonSkill(
                    skill_name=s.skill_name,
                    rating=s.required_level * 2,
                    proficiency_code=s.proficiency_code,
                    proficiency_weight=s.proficiency_weight,
                )
                for s in record.skills
            ],
            hiring=record.hiring,
        )


class ComparisonMetrics(BaseModel):
    skill_intensity: float  # mean rating
    cognitive_depth: float  # mean proficiency weight
    complexity_index: float
    complexity_label: ComplexityLabel

    model_config = {"frozen": True}
