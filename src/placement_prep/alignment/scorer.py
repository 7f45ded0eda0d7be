"""Alignment scorer - rates a project against a company's innovation strategy.

Weighted sub-scores, each capped at 100:
- Theme match (30%): 20 points per company theme phrase found in the project text
- Tech match (25%): 15 points per shared technology, +10 for any AI/ML technology
- Architecture match (15%): 100 exact, 40 for any declared architecture, else 0
- Innovation depth (15%): 40 base, +10 per depth keyword in the project text
- Domain match (15%): 100 when domains overlap (an empty project domain overlaps any
  company domain), 20 for any other declared domain, else 0
"""

from __future__ import annotations

import logging
from typing import Any

from placement_prep.models.alignment import (
    AlignmentBreakdown,
    AlignmentResult,
    CompanySignalSet,
    CompanyStrategy,
    ParsedProject,
)

logger = logging.getLogger(__name__)

WEIGHTS = {
    "theme_match": 30,
    "tech_match": 25,
    "architecture_match": 15,
    "innovation_depth": 15,
    "domain_match": 15,
}

MAX_SCORE = 100
THEME_POINTS = 20
TECH_POINTS = 15
AI_BONUS = 10
ARCHITECTURE_EXACT = 100
ARCHITECTURE_PARTIAL = 40
DEPTH_BASE = 40
DEPTH_POINTS = 10
DOMAIN_EXACT = 100
DOMAIN_PARTIAL = 20
REPORT_LIMIT = 3
PROJECT_WORD_MIN_LENGTH = 5

AI_KEYWORDS = ("ai", "ml", "machine learning", "deep learning", "nlp")
DEPTH_KEYWORDS = (
    "predictive",
    "automation",
    "real-time",
    "scalable",
    "cloud-native",
    "optimization",
    "distributed",
)
NO_ARCHITECTURE = ("", "n/a")


def _ordered_unique(values) -> tuple[str, ...]:
    return tuple(dict.fromkeys(v.lower() for v in values if v))


def extract_signals(strategy: CompanyStrategy) -> CompanySignalSet:
    themes: list[str | None] = []
    techs: list[str | None] = []
    architectures: list[str | None] = []
    domains: list[str | None] = []

    for theme in strategy.innovation_themes:
        themes += [theme.theme_name, theme.problem_statement]
    for pillar in strategy.strategic_pillars:
        techs += pillar.key_technologies
        themes.append(pillar.pillar_name)
    for project in strategy.innovx_projects:
        techs += project.backend_technologies
        techs += project.ai_ml_technologies
        architectures.append(project.architecture_style)
    if strategy.innovx_master is not None:
        domains += [strategy.innovx_master.industry, strategy.innovx_master.sub_industry]

    return CompanySignalSet(
        themes=_ordered_unique(themes),
        technologies=_ordered_unique(techs),
        architectures=_ordered_unique(architectures),
        domains=_ordered_unique(domains),
    )


def _theme_score(text: str, signals: CompanySignalSet) -> tuple[int, list[str]]:
    matched = [theme for theme in signals.themes if theme in text]
    return min(MAX_SCORE, THEME_POINTS * len(matched)), matched


def _tech_score(technologies: list[str], signals: CompanySignalSet) -> tuple[int, list[str]]:
    project_techs = [t.lower() for t in technologies]
    company_techs = set(signals.technologies)
    overlap = [t for t in project_techs if t in company_techs]
    score = TECH_POINTS * len(overlap)
    if any(keyword in tech for tech in project_techs for keyword in AI_KEYWORDS):
        score += AI_BONUS
    return min(MAX_SCORE, score), overlap


def _architecture_score(architecture_type: str, signals: CompanySignalSet) -> int:
    project_arch = architecture_type.lower().strip()
    if project_arch and project_arch in signals.architectures:
        return ARCHITECTURE_EXACT
    if "microservices" in project_arch and any(
        "microservices" in arch for arch in signals.architectures
    ):
        return ARCHITECTURE_EXACT
    if project_arch not in NO_ARCHITECTURE and signals.architectures:
        return ARCHITECTURE_PARTIAL
    return 0


def _depth_score(text: str) -> int:
    hits = sum(1 for keyword in DEPTH_KEYWORDS if keyword in text)
    return min(MAX_SCORE, DEPTH_BASE + DEPTH_POINTS * hits)


def _domain_score(domain: str, signals: CompanySignalSet) -> tuple[int, str]:
    """Substring match either way; an empty project domain matches any company domain.

    The last matching company domain is reported.
    """
    project_domain = domain.lower().strip()
    matched = ""
    for company_domain in signals.domains:
        if company_domain in project_domain or project_domain in company_domain:
            matched = company_domain
    if matched:
        return DOMAIN_EXACT, matched
    if project_domain:
        return DOMAIN_PARTIAL, ""
    return 0, ""


def _matched_projects(text: str, strategy: CompanyStrategy) -> list[str]:
    """Loose name match, used for cross-referencing only, never for scoring."""
    matched = []
    for project in strategy.innovx_projects:
        if not project.project_name:
            continue
        name = project.project_name.lower()
        if name in text or any(
            len(word) >= PROJECT_WORD_MIN_LENGTH and word in text for word in name.split()
        ):
            matched.append(project.project_name)
    return matched[:REPORT_LIMIT]


def calculate_alignment(
    project: ParsedProject,
    strategy_payload: CompanyStrategy | dict[str, Any] | None,
) -> AlignmentResult:
    """Score a project against a company strategy payload (0-100).

    Missing strategy sections contribute nothing; the scorer never fails on
    an empty or partial payload.
    """
    if isinstance(strategy_payload, CompanyStrategy):
        strategy = strategy_payload
    else:
        strategy = CompanyStrategy.model_validate(strategy_payload or {})

    signals = extract_signals(strategy)
    text = project.combined_text

    theme, matched_themes = _theme_score(text, signals)
    tech, overlap = _tech_score(project.technologies_used, signals)
    domain, matched_domain = _domain_score(project.domain, signals)
    breakdown = AlignmentBreakdown(
        theme_match=theme,
        tech_match=tech,
        architecture_match=_architecture_score(project.architecture_type, signals),
        innovation_depth=_depth_score(text),
        domain_match=domain,
    )

    # Weights are whole percentages; round half up.
    weighted = sum(getattr(breakdown, name) * weight for name, weight in WEIGHTS.items())
    total = (weighted + 50) // 100
    logger.debug("Alignment for %r: %d %s", project.project_name, total, breakdown)

    return AlignmentResult(
        project_name=project.project_name,
        total_score=total,
        breakdown=breakdown,
        matched_innovx_projects=_matched_projects(text, strategy),
        matched_pillars=matched_themes[:REPORT_LIMIT],
        tech_overlap=overlap,
        domain_overlap=matched_domain,
    )
