"""Assessment analysis: orchestrates scoring, recommendations and enrichment."""

from .models import AssessmentAnalysis, InsightSource
from .analyze import analyze_assessment

__all__ = [
    "AssessmentAnalysis",
    "InsightSource",
    "analyze_assessment",
]
