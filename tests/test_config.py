"""Tests for config loading."""

import pytest

from placement_prep.config import AppConfig, LLMConfig, RoadmapConfig, StoreConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-haiku-4-5-20251001"
        assert config.llm.max_retries == 1
        assert config.roadmap.default_weeks == 8
        assert config.roadmap.enrich_narrative is True

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.roadmap.max_weeks == 52

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\n  model: test-model\nroadmap:\n  default_weeks: 12\n")
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.roadmap.default_weeks == 12
        # Defaults for unspecified
        assert config.roadmap.narrative_timeout == 30.0
        assert config.llm.temperature == 0.7

    def test_empty_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_store_resolved_path(self):
        store = StoreConfig(db_path="~/test.db")
        assert "~" not in str(store.resolved_db_path)

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"


class TestRoadmapConfig:
    @pytest.mark.parametrize("weeks", [1, 8, 52])
    def test_accepts_in_range(self, weeks):
        assert RoadmapConfig().accepts(weeks)

    @pytest.mark.parametrize("weeks", [0, -3, 53])
    def test_rejects_out_of_range(self, weeks):
        assert not RoadmapConfig().accepts(weeks)
