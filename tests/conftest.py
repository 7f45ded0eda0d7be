"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from placement_prep.clients.llm_client import LLMClient, LLMResponse
from placement_prep.models.alignment import CompanyStrategy, ParsedProject
from placement_prep.models.company import CompanyRecord, HiringRounds
from placement_prep.models.skills import SkillRequirement


def make_requirement(
    skill_id: str,
    required_level: int = 3,
    proficiency_code: str = "AP",
    weight: int | None = None,
    topics: str = "",
) -> SkillRequirement:
    return SkillRequirement(
        skill_id=skill_id,
        skill_name=f"{skill_id} skill",
        skill_code=skill_id,
        required_level=required_level,
        proficiency_code=proficiency_code,
        proficiency_weight=weight if weight is not None else required_level,
        topics=topics,
    )


@pytest.fixture
def sample_requirements() -> list[SkillRequirement]:
    return [
        make_requirement("DSA", 5, "AS", topics="Arrays, Trees, Graphs"),
        make_requirement("OOP", 3, "AP", topics="Inheritance, Polymorphism"),
        make_requirement("DBMS", 2, "CU", topics="SQL, Normalization"),
    ]


@pytest.fixture
def sample_ratings() -> dict[str, int]:
    return {"DSA": 4, "OOP": 4, "DBMS": 6}


@pytest.fixture
def sample_strategy() -> CompanyStrategy:
    return CompanyStrategy.model_validate(
        {
            "innovation_themes": [
                {"theme_name": "Smart Farming", "problem_statement": "Crop yield prediction"}
            ],
            "strategic_pillars": [
                {"pillar_name": "Edge Analytics", "key_technologies": ["Python", "Kubernetes"]}
            ],
            "innovx_projects": [
                {
                    "project_name": "Harvest Forecaster",
                    "backend_technologies": ["FastAPI"],
                    "ai_ml_technologies": ["PyTorch"],
                    "architecture_style": "Microservices",
                }
            ],
            "innovx_master": {"industry": "Agriculture", "sub_industry": "AgriTech"},
        }
    )


@pytest.fixture
def sample_project() -> ParsedProject:
    return ParsedProject(
        project_name="CropWatch",
        problem_statement="Smart farming assistant for crop yield prediction",
        technologies_used=["Python", "PyTorch", "React"],
        architecture_type="Microservices",
        domain="AgriTech",
        description="Real-time, scalable forecasting of harvest windows.",
    )


@pytest.fixture
def sample_company(sample_requirements, sample_strategy) -> CompanyRecord:
    return CompanyRecord(
        company_id=1,
        name="Acme Agro",
        category="Product",
        skills=sample_requirements,
        strategy=sample_strategy,
        hiring=HiringRounds(total_rounds=4, coding_rounds=2, hr_rounds=1, aptitude_rounds=1),
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """LLMClient mock with controllable responses."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="mock response", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    client.get_token_summary.return_value = {"input": 0, "output": 0, "calls": []}
    return client


@pytest.fixture
def req():
    """Factory for SkillRequirement objects keyed by skill code."""
    return make_requirement
