"""
Assessment Analysis Pipeline
============================
score -> recommend -> (optionally) enrich.

This module:
- Runs the deterministic engine and recommendation rules
- Lets an InsightEnricher replace the key insight, never the scores
- Switches to the keyword fallback only if the engine itself fails

This module MUST NOT:
- Raise because the enrichment call failed
- Persist anything
"""

import logging
from typing import Mapping, Optional

from mindtrack.catalog.questions import normalize_platform
from mindtrack.enrichment.enricher import EnrichmentContext, EnrichmentException, InsightEnricher
from mindtrack.recommendations.fallback import fallback_analysis
from mindtrack.recommendations.generate import generate_recommendations
from mindtrack.scoring.engine import compute_scores
from mindtrack.shared.disclaimer import choose_support_note

from .models import AssessmentAnalysis, InsightSource

logger = logging.getLogger(__name__)


def analyze_assessment(
    platform: str,
    responses: Mapping[str, str],
    enricher: Optional[InsightEnricher] = None,
) -> AssessmentAnalysis:
    """
    Analyze one questionnaire submission.

    Args:
        platform: platform key or alias
        responses: cleaned question id -> option value mapping
        enricher: optional insight enricher; None keeps the engine sentence

    Returns:
        AssessmentAnalysis. insight_source tells which path produced key_insight.
    """
    platform_key = normalize_platform(platform)
    responses = responses or {}

    try:
        scores = compute_scores(platform_key, responses)
        recommendations = generate_recommendations(platform_key, responses, scores)
    except Exception:
        logger.exception(f"Scoring pipeline failed for platform={platform_key}; using fallback analysis")
        fallback = fallback_analysis(platform_key, responses)
        return AssessmentAnalysis(
            platform=platform_key,
            scores=fallback.scores,
            key_insight=fallback.scores.personalized_insight,
            insight_source=InsightSource.FALLBACK,
            recommendations=fallback.recommendations,
            support_note=choose_support_note(fallback.scores.risk_level.value),
        )

    key_insight = scores.personalized_insight
    source = InsightSource.ENGINE

    if enricher is not None:
        context = EnrichmentContext(platform=platform_key, scores=scores, responses=dict(responses))
        try:
            key_insight = enricher.enrich(context)
            source = InsightSource.AI
        except EnrichmentException as e:
            logger.warning(f"Insight enrichment skipped: {e}")
        except Exception:
            logger.exception("Insight enricher raised unexpectedly; keeping engine insight")

    return AssessmentAnalysis(
        platform=platform_key,
        scores=scores,
        key_insight=key_insight,
        insight_source=source,
        recommendations=recommendations,
        support_note=choose_support_note(scores.risk_level.value),
    )
