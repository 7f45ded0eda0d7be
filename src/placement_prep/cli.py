"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from placement_prep.alignment.feedback import StrategicAdvisor, fallback_feedback
from placement_prep.alignment.project_extractor import ProjectExtractor, fallback_project
from placement_prep.alignment.scorer import calculate_alignment
from placement_prep.clients.llm_client import LLMClient
from placement_prep.comparison.metrics import calculate_comparison_metrics
from placement_prep.config import AppConfig, load_config
from placement_prep.logging.cost_calculator import calculate_cost
from placement_prep.logging.models import UsageLog
from placement_prep.logging.usage_store import UsageStore
from placement_prep.models.alignment import ParsedProject
from placement_prep.models.comparison import ComparisonCompany
from placement_prep.models.roadmap import RoadmapResult
from placement_prep.roadmap.narrative import LLMNarrativeGenerator
from placement_prep.roadmap.orchestrator import RoadmapPlanner
from placement_prep.store.company_store import CompanyStore

app = typer.Typer(
    name="placement-prep",
    help="Placement preparation: skill-gap roadmaps and project alignment scoring",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show info-level logs"),
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _store(config: AppConfig) -> CompanyStore:
    return CompanyStore(db_path=config.store.resolved_db_path)


def _llm(config: AppConfig) -> LLMClient | None:
    if not os.environ.get("ANTHROPIC_API_KEY"):
        return None
    return LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)


def _company_name(store: CompanyStore, company_id: int) -> str:
    record = store.get(company_id)
    if record is None:
        console.print(f"[yellow]Unknown company id: {company_id}[/yellow]")
        return f"Company {company_id}"
    return record.name


def _record_usage(config: AppConfig, log: UsageLog, llm: LLMClient | None) -> None:
    if llm is not None:
        tokens = llm.get_token_summary()
        log = log.model_copy(
            update={
                "total_input_tokens": tokens["input"],
                "total_output_tokens": tokens["output"],
                "estimated_cost_usd": calculate_cost(tokens["calls"]),
            }
        )
    UsageStore(db_path=config.usage.resolved_db_path).save_log(log)


def parse_ratings(rates: list[str], ratings_file: Path | None) -> dict[str, int]:
    """Merge --ratings JSON file entries with CODE=N pairs (pairs win)."""
    ratings: dict[str, int] = {}
    if ratings_file is not None:
        raw = json.loads(ratings_file.read_text(encoding="utf-8"))
        ratings.update({str(k): int(v) for k, v in raw.items()})
    for pair in rates:
        skill_id, sep, value = pair.partition("=")
        if not sep or not value.strip().isdigit():
            raise typer.BadParameter(f"Expected SKILL=RATING, got {pair!r}", param_hint="--rate")
        rating = int(value)
        if not 0 <= rating <= 10:
            raise typer.BadParameter(f"Rating must be 0-10, got {rating}", param_hint="--rate")
        ratings[skill_id.strip()] = rating
    return ratings


def _render_roadmap(company_name: str, roadmap: RoadmapResult) -> None:
    console.print(
        Panel(
            f"Readiness: [bold]{roadmap.readiness_score}%[/bold] ({roadmap.readiness_tier})\n"
            f"Total study: {roadmap.total_hours_required} hours | "
            f"About {roadmap.estimated_days_to_close} days to close all gaps",
            title=f"{company_name} roadmap",
        )
    )
    if not roadmap.skill_gaps:
        console.print("[green]All required skills are already met.[/green]")
        return

    gaps = Table(title="Skill gaps (by priority)")
    for column in ("Skill", "Target", "Gap", "Hours", "Priority"):
        gaps.add_column(column)
    for gap in roadmap.skill_gaps:
        gaps.add_row(
            f"{gap.skill_name} ({gap.skill_code})",
            gap.proficiency_code,
            f"{gap.gap:.1f} levels",
            str(gap.estimated_hours),
            f"{gap.priority_score:.2f}",
        )
    console.print(gaps)

    plan = Table(title="Weekly plan")
    for column in ("Week", "Theme", "Skills", "Target"):
        plan.add_column(column)
    for week in roadmap.weekly_plan:
        skills = "\n".join(f"{s.skill_code}: {s.hours}h {s.practice_type}" for s in week.skills)
        plan.add_row(week.week_range, week.theme, skills, week.completion_target)
    console.print(plan)

    if roadmap.insights:
        insights = roadmap.insights
        body = insights.overview
        if insights.additional_insights:
            body += "\n\n" + "\n".join(f"- {i}" for i in insights.additional_insights)
        if insights.motivational_tips:
            body += "\n\n" + "\n".join(f"* {t}" for t in insights.motivational_tips)
        console.print(Panel(body, title=f"Insights ({insights.source})"))


@app.command()
def companies() -> None:
    """List stored companies."""
    config = load_config()
    records = _store(config).list_companies()
    if not records:
        console.print("[yellow]No companies stored. Use import-data first.[/yellow]")
        return
    table = Table()
    for column in ("ID", "Name", "Category", "Skills"):
        table.add_column(column)
    for record in records:
        table.add_row(str(record.company_id), record.name, record.category, str(len(record.skills)))
    console.print(table)


@app.command("import-data")
def import_data(
    file: Path = typer.Argument(help="JSON file with a list of company records"),
) -> None:
    """Load company records into the local store."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    config = load_config()
    count = _store(config).import_json(file)
    console.print(f"[green]Imported {count} companies.[/green]")


@app.command()
def roadmap(
    company_id: int = typer.Argument(help="Company ID"),
    rate: list[str] = typer.Option([], "--rate", "-r", help="Self-rating as SKILL=N (0-10)"),
    ratings: Path = typer.Option(None, "--ratings", help="JSON file mapping skill id to rating"),
    weeks: int = typer.Option(None, "--weeks", "-w", help="Study weeks available"),
    ai: bool = typer.Option(True, "--ai/--no-ai", help="Attach narrative insights"),
    as_json: bool = typer.Option(False, "--json", help="Print the roadmap as JSON"),
) -> None:
    """Generate a week-by-week preparation roadmap for a company."""
    config = load_config()
    weeks = weeks if weeks is not None else config.roadmap.default_weeks
    if not config.roadmap.accepts(weeks):
        console.print(
            f"[red]Weeks must be between {config.roadmap.min_weeks} "
            f"and {config.roadmap.max_weeks}.[/red]"
        )
        raise typer.Exit(1)

    if ratings is not None and not ratings.exists():
        console.print(f"[red]Ratings file not found: {ratings}[/red]")
        raise typer.Exit(1)

    store = _store(config)
    company_name = _company_name(store, company_id)
    self_ratings = parse_ratings(rate, ratings)
    enrich = ai and config.roadmap.enrich_narrative

    llm = _llm(config) if enrich else None
    narrator = (
        LLMNarrativeGenerator(
            llm,
            model=config.llm.model,
            temperature=config.llm.temperature,
            max_tokens=config.llm.max_tokens,
        )
        if llm
        else None
    )
    planner = RoadmapPlanner(narrator, timeout=config.roadmap.narrative_timeout)

    start = time.monotonic()
    with console.status("Building roadmap..."):
        result = asyncio.run(
            planner.plan(
                company_name,
                store.get_skill_requirements(company_id),
                self_ratings,
                weeks,
                enrich=enrich,
            )
        )

    _record_usage(
        config,
        UsageLog(
            mode="roadmap",
            company_id=company_id,
            company_name=company_name,
            score=result.readiness_score,
            narrative_source=result.insights.source if result.insights else None,
            elapsed_seconds=time.monotonic() - start,
        ),
        llm,
    )

    if as_json:
        console.print_json(result.model_dump_json())
    else:
        _render_roadmap(company_name, result)


@app.command()
def align(
    company_id: int = typer.Argument(help="Company ID"),
    project: Path = typer.Option(None, "--project", "-p", help="Parsed project JSON file"),
    text: Path = typer.Option(None, "--text", help="Portfolio text file to summarise"),
    feedback: bool = typer.Option(False, "--feedback", help="Add strategic feedback"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Score a project against a company's innovation strategy."""
    if (project is None) == (text is None):
        console.print("[red]Give exactly one of --project or --text.[/red]")
        raise typer.Exit(1)
    source = project if project is not None else text
    if not source.exists():
        console.print(f"[red]Project file not found: {source}[/red]")
        raise typer.Exit(1)

    config = load_config()
    store = _store(config)
    company_name = _company_name(store, company_id)
    strategy = store.get_strategy(company_id)

    start = time.monotonic()
    llm = _llm(config) if (feedback or text is not None) else None
    if project is not None:
        parsed = ParsedProject.model_validate_json(project.read_text(encoding="utf-8"))
    elif llm is None:
        parsed = fallback_project(text.read_text(encoding="utf-8"))
    else:
        extractor = ProjectExtractor(llm, model=config.llm.model)
        with console.status("Summarising portfolio..."):
            parsed = asyncio.run(extractor.extract(text.read_text(encoding="utf-8")))

    result = calculate_alignment(parsed, strategy)

    advice = None
    if feedback:
        if llm is None:
            advice = fallback_feedback(parsed, company_name)
        else:
            advisor = StrategicAdvisor(llm, model=config.llm.model)
            with console.status("Requesting strategic feedback..."):
                advice = asyncio.run(advisor.feedback(parsed, company_name, strategy))

    _record_usage(
        config,
        UsageLog(
            mode="alignment",
            company_id=company_id,
            company_name=company_name,
            score=result.total_score,
            elapsed_seconds=time.monotonic() - start,
        ),
        llm,
    )

    if as_json:
        payload = result.model_dump()
        if advice is not None:
            payload["feedback"] = advice.model_dump()
        console.print_json(json.dumps(payload))
        return

    b = result.breakdown
    console.print(
        Panel(
            f"[bold]{result.total_score}/100[/bold]\n"
            f"Theme: {b.theme_match} | Tech: {b.tech_match} | "
            f"Architecture: {b.architecture_match} | Depth: {b.innovation_depth} | "
            f"Domain: {b.domain_match}\n"
            f"Matched themes: {', '.join(result.matched_pillars) or '-'}\n"
            f"Shared tech: {', '.join(result.tech_overlap) or '-'}\n"
            f"Domain: {result.domain_overlap or '-'}\n"
            f"Related projects: {', '.join(result.matched_innovx_projects) or '-'}",
            title=f"{parsed.project_name or 'Project'} vs {company_name}",
        )
    )
    if advice is not None:
        body = advice.feedback + "\n\n" + "\n".join(f"- {i}" for i in advice.improvements)
        if advice.differentiation:
            body += "\n\n" + "\n".join(f"* {d}" for d in advice.differentiation)
        console.print(Panel(body, title="Strategic feedback"))


@app.command()
def compare(
    company_ids: list[int] = typer.Argument(help="Company IDs to compare"),
) -> None:
    """Compare hiring complexity across companies."""
    config = load_config()
    store = _store(config)
    table = Table(title="Company comparison")
    for column in ("Company", "Skill intensity", "Cognitive depth", "Rounds", "Complexity"):
        table.add_column(column)
    for company_id in company_ids:
        record = store.get(company_id)
        if record is None:
            console.print(f"[yellow]Unknown company id: {company_id}[/yellow]")
            continue
        company = ComparisonCompany.from_record(record)
        metrics = calculate_comparison_metrics(company)
        table.add_row(
            company.name,
            f"{metrics.skill_intensity:.1f}",
            f"{metrics.cognitive_depth:.1f}",
            str(company.hiring.total_rounds),
            f"{metrics.complexity_index:.1f} ({metrics.complexity_label})",
        )
    console.print(table)


@app.command()
def usage() -> None:
    """Show this month's usage statistics."""
    config = load_config()
    stats = UsageStore(db_path=config.usage.resolved_db_path).get_monthly_stats()
    avg = stats["avg_score"] if stats["avg_score"] is not None else "-"
    console.print(
        Panel(
            f"Runs: {stats['total_runs']} (roadmap {stats['roadmap_runs']}, "
            f"alignment {stats['alignment_runs']})\n"
            f"Tokens: {stats['total_input_tokens']} in / {stats['total_output_tokens']} out\n"
            f"Estimated cost: ${stats['total_cost_usd']:.4f}\n"
            f"Average score: {avg} | Success rate: {stats['success_rate']:.0f}%",
            title=f"Usage {stats['month']}",
        )
    )


if __name__ == "__main__":
    app()
