"""Tests for the typer CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from placement_prep import cli
from placement_prep.config import AppConfig, StoreConfig, UsageConfig
from placement_prep.logging.usage_store import UsageStore
from placement_prep.store.company_store import CompanyStore

runner = CliRunner()


@pytest.fixture
def config(tmp_path, monkeypatch) -> AppConfig:
    app_config = AppConfig(
        store=StoreConfig(db_path=str(tmp_path / "companies.db")),
        usage=UsageConfig(db_path=str(tmp_path / "usage.db")),
    )
    monkeypatch.setattr(cli, "load_config", lambda: app_config)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    return app_config


@pytest.fixture
def stored(config, sample_company) -> AppConfig:
    CompanyStore(db_path=config.store.resolved_db_path).put(sample_company)
    return config


class TestParseRatings:
    def test_pairs(self):
        assert cli.parse_ratings(["DSA=4", "OOP = 7"], None) == {"DSA": 4, "OOP": 7}

    def test_file_then_pairs(self, tmp_path):
        path = tmp_path / "ratings.json"
        path.write_text(json.dumps({"DSA": 2, "OOP": 3}))
        assert cli.parse_ratings(["DSA=8"], path) == {"DSA": 8, "OOP": 3}

    @pytest.mark.parametrize("pair", ["DSA", "DSA=high", "DSA=11"])
    def test_invalid_pairs(self, pair):
        with pytest.raises(cli.typer.BadParameter):
            cli.parse_ratings([pair], None)


class TestCommands:
    def test_companies_empty(self, config):
        result = runner.invoke(cli.app, ["companies"])
        assert result.exit_code == 0
        assert "No companies stored" in result.output

    def test_import_and_list(self, config, tmp_path):
        path = tmp_path / "companies.json"
        path.write_text(json.dumps([{"company_id": 9, "name": "Importco"}]))
        result = runner.invoke(cli.app, ["import-data", str(path)])
        assert result.exit_code == 0
        assert "Imported 1 companies" in result.output

        listing = runner.invoke(cli.app, ["companies"])
        assert "Importco" in listing.output

    def test_import_missing_file(self, config, tmp_path):
        result = runner.invoke(cli.app, ["import-data", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_roadmap_json(self, stored):
        result = runner.invoke(
            cli.app,
            ["roadmap", "1", "--rate", "DSA=4", "--rate", "OOP=4", "--rate", "DBMS=6",
             "--weeks", "4", "--json"],
        )
        assert result.exit_code == 0
        assert '"readiness_score": 73' in result.output
        assert '"source": "fallback"' in result.output

        logs = UsageStore(db_path=stored.usage.resolved_db_path).get_logs()
        assert logs[0].mode == "roadmap"
        assert logs[0].score == 73
        assert logs[0].narrative_source == "fallback"

    def test_roadmap_table(self, stored):
        result = runner.invoke(cli.app, ["roadmap", "1", "--weeks", "3", "--no-ai"])
        assert result.exit_code == 0
        assert "Readiness" in result.output
        assert "Weekly plan" in result.output

    def test_roadmap_unknown_company_is_ready(self, config):
        result = runner.invoke(cli.app, ["roadmap", "404", "--json"])
        assert result.exit_code == 0
        assert '"readiness_tier": "Complete"' in result.output

    def test_roadmap_warns_on_unknown_company(self, config):
        result = runner.invoke(cli.app, ["roadmap", "404", "--no-ai"])
        assert result.exit_code == 0
        assert "Unknown company id: 404" in result.output

    @pytest.mark.parametrize("weeks", ["0", "53"])
    def test_roadmap_rejects_week_budget(self, stored, weeks):
        result = runner.invoke(cli.app, ["roadmap", "1", "--weeks", weeks])
        assert result.exit_code == 1
        assert "Weeks must be between 1 and 52" in result.output

    def test_align_json(self, stored, tmp_path, sample_project):
        path = tmp_path / "project.json"
        path.write_text(sample_project.model_dump_json())
        result = runner.invoke(cli.app, ["align", "1", "--project", str(path), "--json"])
        assert result.exit_code == 0
        assert '"total_score": 59' in result.output

    def test_align_with_fallback_feedback(self, stored, tmp_path, sample_project):
        path = tmp_path / "project.json"
        path.write_text(sample_project.model_dump_json())
        result = runner.invoke(cli.app, ["align", "1", "--project", str(path), "--feedback"])
        assert result.exit_code == 0
        assert "Strategic feedback" in result.output

    def test_align_missing_project(self, stored, tmp_path):
        result = runner.invoke(cli.app, ["align", "1", "--project", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_align_from_text_without_api_key(self, stored, tmp_path):
        path = tmp_path / "portfolio.txt"
        path.write_text("CropWatch: predictive crop yield dashboards for smart farming.")
        result = runner.invoke(cli.app, ["align", "1", "--text", str(path), "--json"])
        assert result.exit_code == 0
        assert "Portfolio Analysis (Fallback)" in result.output
        assert '"theme_match": 20' in result.output

    def test_align_needs_exactly_one_source(self, stored, tmp_path, sample_project):
        assert runner.invoke(cli.app, ["align", "1"]).exit_code == 1

        project = tmp_path / "project.json"
        project.write_text(sample_project.model_dump_json())
        text = tmp_path / "portfolio.txt"
        text.write_text("notes")
        result = runner.invoke(
            cli.app, ["align", "1", "--project", str(project), "--text", str(text)]
        )
        assert result.exit_code == 1
        assert "exactly one of --project or --text" in result.output

    def test_align_warns_on_unknown_company(self, stored, tmp_path, sample_project):
        path = tmp_path / "project.json"
        path.write_text(sample_project.model_dump_json())
        result = runner.invoke(cli.app, ["align", "404", "--project", str(path)])
        assert result.exit_code == 0
        assert "Unknown company id: 404" in result.output

    def test_compare(self, stored):
        result = runner.invoke(cli.app, ["compare", "1", "77"])
        assert result.exit_code == 0
        assert "Acme Agro" in result.output
        assert "Unknown company id: 77" in result.output

    def test_usage(self, stored):
        runner.invoke(cli.app, ["roadmap", "1", "--no-ai"])
        result = runner.invoke(cli.app, ["usage"])
        assert result.exit_code == 0
        assert "Runs: 1" in result.output
