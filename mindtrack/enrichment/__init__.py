"""
Enrichment Module

Optional AI layer on top of the deterministic engine: key-insight
rewriting and progress trend summaries. Every entry point has a
non-AI fallback.
"""

from .enricher import (
    EnrichmentContext,
    EnrichmentError,
    EnrichmentException,
    InsightEnricher,
    NullInsightEnricher,
    OpenAIInsightEnricher,
    build_default_enricher,
    parse_key_insight,
)
from .trends import (
    AssessmentSnapshot,
    ProgressSnapshot,
    Trend,
    TrendInsight,
    compute_trend,
    generate_trend_insight,
)

__all__ = [
    # Models
    "EnrichmentContext",
    "AssessmentSnapshot",
    "ProgressSnapshot",
    "Trend",
    "TrendInsight",
    # Errors
    "EnrichmentError",
    "EnrichmentException",
    # Enrichers
    "InsightEnricher",
    "NullInsightEnricher",
    "OpenAIInsightEnricher",
    "build_default_enricher",
    # Functions
    "compute_trend",
    "generate_trend_insight",
    "parse_key_insight",
]
