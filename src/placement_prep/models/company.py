"""Pydantic models for stored company records."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from placement_prep.models.alignment import CompanyStrategy
from placement_prep.models.skills import SkillRequirement


class HiringRounds(BaseModel):
    total_rounds: int = 0
    coding_rounds: int = 0
    system_design_rounds: int = 0
    hr_rounds: int = 0
    aptitude_rounds: int = 0


class CompanyRecord(BaseModel):
    company_id: int
    name: str
    short_name: str = ""
    category: str = ""
    skills: list[SkillRequirement] = []
    strategy: CompanyStrategy = CompanyStrategy()
    hiring: HiringRounds = HiringRounds()

    @field_validator("skills", mode="before")
    @classmethod
    def _accept_proficiency_rows(cls, value):
        if not value:
            return []
        skills = []
        for item in value:
            # Relational rows carry "stage" instead of "required_level".
            if isinstance(item, dict) and "stage" in item and "required_level" not in item:
                skills.append(SkillRequirement.from_proficiency_row(item))
            else:
                skills.append(item)
        return skills

    @field_validator("strategy", "hiring", mode="before")
    @classmethod
    def _null_section(cls, value):
        return {} if value is None else value
