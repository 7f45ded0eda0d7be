"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    max_retries: int = 1
    timeout: int = 30
    temperature: float = 0.7
    max_tokens: int = 2048


@dataclass(frozen=True)
class RoadmapConfig:
    default_weeks: int = 8
    min_weeks: int = 1
    max_weeks: int = 52
    enrich_narrative: bool = True
    narrative_timeout: float = 30.0

    def accepts(self, weeks: int) -> bool:
        return self.min_weeks <= weeks <= self.max_weeks


@dataclass(frozen=True)
class StoreConfig:
    db_path: str = "~/.placement-prep/companies.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class UsageConfig:
    db_path: str = "~/.placement-prep/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    roadmap: RoadmapConfig = field(default_factory=RoadmapConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        roadmap=RoadmapConfig(**raw.get("roadmap", {})),
        store=StoreConfig(**raw.get("store", {})),
        usage=UsageConfig(**raw.get("usage", {})),
    )
