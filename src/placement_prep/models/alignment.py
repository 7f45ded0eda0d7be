"""Pydantic models for project-to-company alignment scoring."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, field_validator


class InnovationTheme(BaseModel):
    theme_name: str | None = None
    problem_statement: str | None = None


class StrategicPillar(BaseModel):
    pillar_name: str | None = None
    key_technologies: list[str] = []

    @field_validator("key_technologies", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []


class InnovxProject(BaseModel):
    project_name: str | None = None
    backend_technologies: list[str] = []
    ai_ml_technologies: list[str] = []
    architecture_style: str | None = None

    @field_validator("backend_technologies", "ai_ml_technologies", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []


class InnovxMaster(BaseModel):
    industry: str | None = None
    sub_industry: str | None = None


class CompanyStrategy(BaseModel):
    """A company's innovation-strategy payload. Every section is optional."""

    innovation_themes: list[InnovationTheme] = []
    strategic_pillars: list[StrategicPillar] = []
    innovx_projects: list[InnovxProject] = []
    innovx_master: InnovxMaster | None = None

    @field_validator(
        "innovation_themes", "strategic_pillars", "innovx_projects", mode="before"
    )
    @classmethod
    def _null_list(cls, value):
        return value or []


class ParsedProject(BaseModel):
    project_name: str = ""
    problem_statement: str = ""
    technologies_used: list[str] = []
    architecture_type: str = ""
    domain: str = ""
    description: str = ""

    @field_validator("technologies_used", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []

    @field_validator(
        "project_name", "problem_statement", "architecture_type", "domain", "description",
        mode="before",
    )
    @classmethod
    def _null_text(cls, value):
        return value or ""

    @property
    def combined_text(self) -> str:
        return f"{self.problem_statement} {self.description}".lower()


@dataclass(frozen=True)
class CompanySignalSet:
    """Lower-cased vocabulary derived from a strategy payload, in encounter order."""

    themes: tuple[str, ...] = ()
    technologies: tuple[str, ...] = ()
    architectures: tuple[str, ...] = ()
    domains: tuple[str, ...] = ()


class AlignmentBreakdown(BaseModel):
    theme_match: int  # weight 30%
    tech_match: int  # weight 25%
    architecture_match: int  # weight 15%
    innovation_depth: int  # weight 15%
    domain_match: int  # weight 15%

    model_config = {"frozen": True}


class AlignmentResult(BaseModel):
    project_name: str
    total_score: int  # 0-100
    breakdown: AlignmentBreakdown
    matched_innovx_projects: list[str]
    matched_pillars: list[str]
    tech_overlap: list[str]
    domain_overlap: str = ""

    model_config = {"frozen": True}


class StrategicFeedback(BaseModel):
    feedback: str
    improvements: list[str] = []
    differentiation: list[str] = []
