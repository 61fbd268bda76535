"""
Fallback Analysis

Keyword heuristic used only when the scoring pipeline fails unexpectedly.
It does not consult the weight tables: it scans every answer value for
risk and positive keywords and returns fixed scores per band together
with three generic recommendations.
"""

from typing import List, Mapping, Tuple

from pydantic import BaseModel

from mindtrack.catalog.questions import get_platform_display_name
from mindtrack.scoring.models import RiskLevel, ScoringResult

from .models import Impact, Recommendation, RecommendationCategory

RISK_KEYWORDS: Tuple[str, ...] = (
    "overwhelming", "drained", "anxious", "affected", "significantly", "deeply",
)
POSITIVE_KEYWORDS: Tuple[str, ...] = (
    "positive", "energized", "supports", "connected", "helpful", "inspiring",
)

KEYWORD_RATIO_THRESHOLD = 0.4


class FallbackAnalysis(BaseModel):
    scores: ScoringResult
    recommendations: List[Recommendation]


def _count_matching(values: List[str], keywords: Tuple[str, ...]) -> int:
    return sum(1 for value in values if any(k in value for k in keywords))


def default_recommendations(platform_name: str) -> List[Recommendation]:
    return [
        Recommendation(
            title=f"Set {platform_name} time limits",
            description=f"Consider using app timers to limit daily {platform_name} usage",
            category=RecommendationCategory.TIME_LIMIT,
            impact=Impact.HIGH,
            priority=1,
        ),
        Recommendation(
            title="Practice mindful browsing",
            description="Take breaks between scrolling sessions to check in with yourself",
            category=RecommendationCategory.MINDFUL_BROWSING,
            impact=Impact.MEDIUM,
            priority=2,
        ),
        Recommendation(
            title="Curate your feed",
            description="Unfollow accounts that make you feel negative emotions",
            category=RecommendationCategory.FEED_CURATION,
            impact=Impact.HIGH,
            priority=3,
        ),
    ]


def fallback_analysis(platform: str, responses: Mapping[str, str]) -> FallbackAnalysis:
    """
    Coarse keyword-based analysis.

    Ratios use max(total, 1) as the denominator and strict > 0.4 thresholds:
    risk first (overall 4, high), then positive (overall 8, low), else
    overall 6, moderate.
    """
    values = [str(v) for v in (responses or {}).values() if v]
    total = max(len(values), 1)
    risk_ratio = _count_matching(values, RISK_KEYWORDS) / total
    positive_ratio = _count_matching(values, POSITIVE_KEYWORDS) / total

    if risk_ratio > KEYWORD_RATIO_THRESHOLD:
        risk_level, overall = RiskLevel.HIGH, 4
    elif positive_ratio > KEYWORD_RATIO_THRESHOLD:
        risk_level, overall = RiskLevel.LOW, 8
    else:
        risk_level, overall = RiskLevel.MODERATE, 6

    name = get_platform_display_name(platform)
    focus = "reducing time and managing triggers" if risk_level == RiskLevel.HIGH else "maintaining healthy boundaries"

    scores = ScoringResult(
        overall_score=float(overall),
        mood_score=float(max(3, overall - 1)),
        usage_score=float(max(3, overall - 2)),
        comparison_score=4.0 if risk_level == RiskLevel.HIGH else 6.0,
        risk_level=risk_level,
        confidence_score=0,
        personalized_insight=f"Your {name} usage shows {risk_level.value} risk patterns. Focus on {focus}.",
    )
    return FallbackAnalysis(scores=scores, recommendations=default_recommendations(name))
