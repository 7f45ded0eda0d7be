"""Strategic Advisor - executive feedback on how a project fits a company's strategy."""

from __future__ import annotations

import json
import logging

from placement_prep.clients.llm_client import DEFAULT_MODEL, LLMClient
from placement_prep.models.alignment import CompanyStrategy, ParsedProject, StrategicFeedback

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a CTO evaluating a candidate's project for strategic alignment with a company's
innovation strategy. Always respond with valid JSON only.

Output format:
{
  "feedback": "strategic commentary",
  "improvements": ["suggestion 1", "suggestion 2", "suggestion 3"],
  "differentiation": ["idea 1", "idea 2"]
}"""

STRATEGY_PROJECTS_IN_PROMPT = 3


def fallback_feedback(project: ParsedProject, company_name: str) -> StrategicFeedback:
    skills = ", ".join(project.technologies_used) or "your listed technologies"
    return StrategicFeedback(
        feedback=(
            f"Based on the technical alignment, this portfolio shows strong potential. "
            f"The identified skills in {skills} are relevant. To improve alignment with "
            f"{company_name}, focus on demonstrating deeper understanding of their core "
            "business domain and scaling challenges."
        ),
        improvements=[
            "Highlight specific metrics (latency, throughput) in your project descriptions.",
            "Explicitly mention how your architecture solves scalability problems.",
            "Add unit and integration tests to demonstrate reliability.",
        ],
        differentiation=[
            f"Contribute to open source projects related to {company_name}'s tech stack.",
            "Write a technical blog post explaining a complex problem you solved.",
        ],
    )


class StrategicAdvisor:
    def __init__(self, llm: LLMClient, model: str = DEFAULT_MODEL, temperature: float = 0.7):
        self.llm = llm
        self.model = model
        self.temperature = temperature

    async def feedback(
        self,
        project: ParsedProject,
        company_name: str,
        strategy: CompanyStrategy,
    ) -> StrategicFeedback:
        """Ask the LLM for feedback, falling back to generic advice on any failure."""
        company_context = json.dumps(
            {
                "name": company_name,
                "themes": [t.model_dump() for t in strategy.innovation_themes],
                "pillars": [p.model_dump() for p in strategy.strategic_pillars],
                "projects": [
                    p.model_dump()
                    for p in strategy.innovx_projects[:STRATEGY_PROJECTS_IN_PROMPT]
                ],
            },
            ensure_ascii=False,
        )
        prompt = f"""Evaluate this candidate project for {company_name}.

CANDIDATE PROJECT:
{project.model_dump_json()}

COMPANY INNOVATION STRATEGY:
{company_context}

Provide executive-style feedback, 3 concrete technical improvements for a better fit,
and 2 differentiation ideas. Respond in JSON only."""

        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                system=SYSTEM_PROMPT,
                model=self.model,
                temperature=self.temperature,
                max_tokens=800,
            )
            if not isinstance(data, dict):
                raise ValueError(f"Expected dict from LLM, got {type(data).__name__}")
            return StrategicFeedback(**data)
        except Exception:
            logger.warning("Strategic feedback failed, using generic advice", exc_info=True)
            return fallback_feedback(project, company_name)
