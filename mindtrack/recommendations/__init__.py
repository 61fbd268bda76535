"""
Recommendations Module

Rule-based recommendation generator plus the keyword fallback analysis.
"""

from .models import Impact, Recommendation, RecommendationCategory
from .generate import MAX_RECOMMENDATIONS, generate_recommendations
from .fallback import FallbackAnalysis, fallback_analysis

__all__ = [
    # Models
    "Impact",
    "Recommendation",
    "RecommendationCategory",
    "FallbackAnalysis",
    # Functions
    "generate_recommendations",
    "fallback_analysis",
    # Constants
    "MAX_RECOMMENDATIONS",
]
