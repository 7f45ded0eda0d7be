"""Project Extractor - summarises portfolio text into one combined ParsedProject."""

from __future__ import annotations

import logging

from placement_prep.clients.llm_client import DEFAULT_MODEL, LLMClient
from placement_prep.models.alignment import ParsedProject

logger = logging.getLogger(__name__)

MAX_INPUT_CHARS = 30000
FALLBACK_DESCRIPTION_CHARS = 800

SYSTEM_PROMPT = """\
You are a technical recruiter analyzing student portfolios. The text may describe
MULTIPLE projects; summarise ALL of them as a single combined portfolio object.
Always respond with valid JSON only (an object, NOT an array):
{
  "project_name": "Holistic Portfolio Analysis",
  "problem_statement": "Analysis of candidate's diverse technical portfolio.",
  "technologies_used": ["every unique technology across all projects"],
  "architecture_type": "all architectures found, e.g. Microservices, MVC, Monolith",
  "domain": "all domains found, e.g. AgriTech, EdTech, Healthcare",
  "description": "1. [Name]: [Summary] 2. [Name]: [Summary] ..."
}"""


def fallback_project(text: str) -> ParsedProject:
    return ParsedProject(
        project_name="Portfolio Analysis (Fallback)",
        problem_statement="Analyzing the provided technical skills and projects.",
        technologies_used=["React", "Node.js", "Python", "Data Analysis"],
        architecture_type="Modern Web / Data Pipeline",
        domain="General Technology intersection",
        description=text[:FALLBACK_DESCRIPTION_CHARS],
    )


class ProjectExtractor:
    def __init__(self, llm: LLMClient, model: str = DEFAULT_MODEL):
        self.llm = llm
        self.model = model

    async def extract(self, text: str) -> ParsedProject:
        """Extract a combined project summary from already-extracted resume text."""
        prompt = f"""Analyze the following portfolio text:

---
{text[:MAX_INPUT_CHARS]}
---

JSON only."""
        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                system=SYSTEM_PROMPT,
                model=self.model,
                max_tokens=1500,
            )
            if isinstance(data, list):
                if not data:
                    raise ValueError("LLM returned an empty project list")
                data = data[0]
            if not isinstance(data, dict):
                raise ValueError(f"Expected dict from LLM, got {type(data).__name__}")
            return ParsedProject(**data)
        except Exception:
            logger.warning("Project extraction failed, using fallback project", exc_info=True)
            return fallback_project(text)
