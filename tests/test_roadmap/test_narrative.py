"""Tests for narrative prompt building, parsing and fallback."""

import pytest

from placement_prep.roadmap.narrative import (
    FALLBACK_TIPS,
    TOP_GAPS_IN_PROMPT,
    LLMNarrativeGenerator,
    NarrativeContext,
    NarrativeError,
    SYSTEM_PROMPT,
    build_fallback_narrative,
    build_prompt,
    parse_narrative,
)
from placement_prep.roadmap.orchestrator import generate_roadmap


@pytest.fixture
def roadmap(sample_requirements, sample_ratings):
    return generate_roadmap(sample_requirements, sample_ratings, 4)


class TestNarrativeContext:
    def test_top_gaps_limited(self, req):
        requirements = [req(f"S{i}", 5) for i in range(8)]
        roadmap = generate_roadmap(requirements, {}, 8)
        context = NarrativeContext.from_roadmap("Acme", roadmap, 8)
        assert len(context.top_gaps) == TOP_GAPS_IN_PROMPT
        assert context.available_weeks == 8


class TestBuildPrompt:
    def test_contains_context(self, roadmap):
        prompt = build_prompt(NarrativeContext.from_roadmap("Acme", roadmap, 4))
        assert "Company: Acme" in prompt
        assert "Current Readiness: 73%" in prompt
        assert "Available Weeks: 4" in prompt
        assert "DSA: Gap of 3.0 levels (from 4/10 to 5/5)" in prompt

    def test_no_gaps(self):
        context = NarrativeContext(
            company_name="Acme", top_gaps=[], available_weeks=2, readiness_score=100
        )
        assert "None" in build_prompt(context)


class TestParseNarrative:
    def test_full_payload(self):
        insights = parse_narrative(
            {
                "overview": "Plan",
                "weeklyPlan": [
                    {
                        "week": 2,
                        "focus": "Graphs",
                        "topics": ["BFS"],
                        "practiceExercises": ["Solve 5 problems"],
                        "resources": ["CLRS"],
                        "successMetrics": ["Explain Dijkstra"],
                    }
                ],
                "additionalInsights": ["Insight"],
                "motivationalTips": ["Tip"],
            }
        )
        assert insights.source == "llm"
        guide = insights.weekly_guides[0]
        assert guide.week == 2
        assert guide.practice_exercises == ["Solve 5 problems"]
        assert guide.success_metrics == ["Explain Dijkstra"]
        assert insights.motivational_tips == ["Tip"]

    def test_week_defaults_to_position(self):
        insights = parse_narrative({"overview": "Plan", "weeklyPlan": [{}, {"focus": "B"}]})
        assert [g.week for g in insights.weekly_guides] == [1, 2]

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"overview": "Plan"},
            {"weeklyPlan": []},
            {"overview": "Plan", "weeklyPlan": "week 1"},
            [{"overview": "Plan", "weeklyPlan": []}],
        ],
    )
    def test_invalid_payload_raises(self, payload):
        with pytest.raises(NarrativeError):
            parse_narrative(payload)


class TestLLMNarrativeGenerator:
    async def test_passes_prompt_and_settings(self, mock_llm_client, roadmap):
        mock_llm_client.generate_json.return_value = {"overview": "ok", "weeklyPlan": []}
        generator = LLMNarrativeGenerator(mock_llm_client, model="m", temperature=0.2)
        context = NarrativeContext.from_roadmap("Acme", roadmap, 4)

        result = await generator.generate(context)

        assert result.overview == "ok"
        kwargs = mock_llm_client.generate_json.call_args.kwargs
        assert kwargs["system"] == SYSTEM_PROMPT
        assert kwargs["model"] == "m"
        assert kwargs["temperature"] == 0.2
        assert "Company: Acme" in kwargs["prompt"]


class TestFallbackNarrative:
    def test_overview_and_insights(self, roadmap):
        insights = build_fallback_narrative(roadmap, "Acme")
        assert insights.source == "fallback"
        assert "Acme" in insights.overview
        assert "73% ready" in insights.overview
        assert insights.additional_insights[0] == "Total estimated preparation time: 40 hours"
        assert insights.motivational_tips == FALLBACK_TIPS

    def test_one_guide_per_week(self, roadmap):
        insights = build_fallback_narrative(roadmap, "Acme")
        assert [g.week for g in insights.weekly_guides] == [w.week for w in roadmap.weekly_plan]
        first = insights.weekly_guides[0]
        assert first.focus == roadmap.weekly_plan[0].theme
        assert first.topics == ["Arrays", "Trees", "Graphs"]
        assert first.success_metrics[0] == f"Spend {roadmap.weekly_plan[0].skills[0].hours}+ hours on focused learning"

    def test_deterministic(self, roadmap):
        assert build_fallback_narrative(roadmap, "Acme") == build_fallback_narrative(roadmap, "Acme")
