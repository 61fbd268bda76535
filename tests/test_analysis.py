"""
Assessment Analysis Pipeline Tests

The engine sentence is the insight of record; enrichment may only
replace it on success, and the keyword fallback only runs when the
engine itself fails.
"""

from unittest.mock import MagicMock, patch

import pytest

from mindtrack.analysis import InsightSource, analyze_assessment
from mindtrack.enrichment import EnrichmentError, EnrichmentException, NullInsightEnricher
from mindtrack.scoring import RiskLevel, compute_scores
from mindtrack.shared import GENERAL_WELLNESS_NOTE, PROFESSIONAL_SUPPORT_NOTE


@pytest.fixture
def high_risk_responses():
    return {
        "current_experience": "overwhelming",
        "usage_frequency": "regularly",
        "feeling_after": "drained",
        "self_image_influence": "understand_better",
        "engagement_importance": "affected",
    }


class TestEnginePath:

    def test_without_enricher(self, high_risk_responses):
        analysis = analyze_assessment("instagram", high_risk_responses)
        assert analysis.insight_source == InsightSource.ENGINE
        assert analysis.key_insight == analysis.scores.personalized_insight
        assert analysis.scores == compute_scores("instagram", high_risk_responses)
        assert len(analysis.recommendations) == 3
        assert analysis.support_note == PROFESSIONAL_SUPPORT_NOTE

    def test_platform_normalized(self):
        analysis = analyze_assessment(" X ", {})
        assert analysis.platform == "twitter"

    def test_low_risk_gets_general_note(self):
        analysis = analyze_assessment("instagram", {"usage_frequency": "rarely"})
        assert analysis.scores.risk_level == RiskLevel.LOW
        assert analysis.support_note == GENERAL_WELLNESS_NOTE

    def test_null_enricher_keeps_engine_sentence(self, high_risk_responses):
        analysis = analyze_assessment("instagram", high_risk_responses, enricher=NullInsightEnricher())
        assert analysis.insight_source == InsightSource.ENGINE
        assert analysis.key_insight == analysis.scores.personalized_insight


class TestEnrichment:

    def test_successful_enrichment_replaces_insight_only(self, high_risk_responses):
        enricher = MagicMock()
        enricher.enrich.return_value = "AI-written insight."

        analysis = analyze_assessment("instagram", high_risk_responses, enricher=enricher)

        assert analysis.key_insight == "AI-written insight."
        assert analysis.insight_source == InsightSource.AI
        assert analysis.scores == compute_scores("instagram", high_risk_responses)

        context = enricher.enrich.call_args.args[0]
        assert context.platform == "instagram"
        assert context.responses == high_risk_responses

    def test_enrichment_failure_falls_back_to_engine(self, high_risk_responses):
        enricher = MagicMock()
        enricher.enrich.side_effect = EnrichmentException(EnrichmentError.INVALID_OUTPUT, "blank")

        analysis = analyze_assessment("instagram", high_risk_responses, enricher=enricher)

        assert analysis.insight_source == InsightSource.ENGINE
        assert analysis.key_insight == analysis.scores.personalized_insight
        enricher.enrich.assert_called_once()

    def test_unexpected_enricher_error_does_not_propagate(self):
        enricher = MagicMock()
        enricher.enrich.side_effect = RuntimeError("boom")

        analysis = analyze_assessment("facebook", {"comparing_life": "frequently"}, enricher=enricher)
        assert analysis.insight_source == InsightSource.ENGINE


class TestFallbackPath:

    def test_engine_failure_uses_keyword_fallback(self):
        enricher = MagicMock()
        with patch('mindtrack.analysis.analyze.compute_scores', side_effect=RuntimeError("broken")):
            analysis = analyze_assessment(
                "instagram",
                {"a": "overwhelming", "b": "drained"},
                enricher=enricher,
            )

        assert analysis.insight_source == InsightSource.FALLBACK
        assert analysis.scores.risk_level == RiskLevel.HIGH
        assert analysis.scores.overall_score == 4.0
        assert len(analysis.recommendations) == 3
        assert analysis.support_note == PROFESSIONAL_SUPPORT_NOTE
        enricher.enrich.assert_not_called()

    def test_serialization_uses_aliases_for_scores(self):
        data = analyze_assessment("snapchat", {"daily_usage": "more_2hours"}).model_dump(mode="json", by_alias=True)
        assert data["insight_source"] == "engine"
        assert "overallScore" in data["scores"]
        assert data["recommendations"][0]["category"] == "time_limit"
