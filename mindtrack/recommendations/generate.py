"""
Recommendation Generator v1
===========================
Maps salient raw answers to a ranked list of recommendations.

This module:
- Evaluates independent rules against raw response values
- Uses the scoring result only to escalate time-limit priority
- Sorts by priority (stable) and keeps the first four

This module MUST NOT:
- Raise on missing answers or unknown platforms
- Call external services

Design Principles:
- PURE: same (platform, responses, scoring_result) -> same list
- EMPTY IS VALID: no rule fired means no recommendations
"""

from typing import Callable, List, Mapping, Optional, Tuple

from mindtrack.catalog.questions import get_platform_display_name, normalize_platform
from mindtrack.scoring.models import RiskLevel, ScoringResult

from .models import Impact, Recommendation, RecommendationCategory

MAX_RECOMMENDATIONS = 4

COMPARISON_TRIGGERS = frozenset({"frequently", "almost_always"})


# ============================================================
# RULES
# ============================================================
# Each rule returns a Recommendation or None. Rule order is the tie-break order.

def _time_limit_rule(platform: str, responses: Mapping[str, str], result: ScoringResult) -> Optional[Recommendation]:
    if responses.get("usage_frequency") != "regularly" and responses.get("daily_usage") != "more_2hours":
        return None
    name = get_platform_display_name(platform)
    return Recommendation(
        title=f"Set {name} time limits",
        description=f"Consider using app timers to limit daily {name} usage to 1-2 hours",
        category=RecommendationCategory.TIME_LIMIT,
        impact=Impact.HIGH,
        priority=1 if result.risk_level == RiskLevel.HIGH else 2,
    )


def _mindful_breaks_rule(platform: str, responses: Mapping[str, str], result: ScoringResult) -> Optional[Recommendation]:
    if responses.get("feeling_after") != "drained" and responses.get("emotional_effect") != "drained":
        return None
    return Recommendation(
        title="Practice mindful breaks",
        description="Take 5-minute mindfulness breaks between social media sessions",
        category=RecommendationCategory.MINDFUL_BROWSING,
        impact=Impact.HIGH,
        priority=1,
    )


def _feed_curation_rule(platform: str, responses: Mapping[str, str], result: ScoringResult) -> Optional[Recommendation]:
    if responses.get("comparing_life") not in COMPARISON_TRIGGERS:
        return None
    return Recommendation(
        title="Curate your feed mindfully",
        description="Unfollow accounts that trigger comparison or negative emotions",
        category=RecommendationCategory.FEED_CURATION,
        impact=Impact.HIGH,
        priority=1,
    )


def _engagement_pressure_rule(platform: str, responses: Mapping[str, str], result: ScoringResult) -> Optional[Recommendation]:
    if responses.get("engagement_importance") != "affected" and responses.get("streak_breaks") != "upset":
        return None
    return Recommendation(
        title="Reduce engagement pressure",
        description="Hide like counts and follower numbers to reduce social pressure",
        category=RecommendationCategory.MINDFUL_BROWSING,
        impact=Impact.MEDIUM,
        priority=2,
    )


def _news_exposure_rule(platform: str, responses: Mapping[str, str], result: ScoringResult) -> Optional[Recommendation]:
    if platform != "twitter":
        return None
    if responses.get("online_arguments") != "significantly" and responses.get("trending_topics") != "very_often":
        return None
    return Recommendation(
        title="Limit news and debate exposure",
        description="Schedule specific times for news consumption and avoid political debates",
        category=RecommendationCategory.MINDFUL_BROWSING,
        impact=Impact.HIGH,
        priority=1,
    )


RULES: Tuple[Callable[[str, Mapping[str, str], ScoringResult], Optional[Recommendation]], ...] = (
    _time_limit_rule,
    _mindful_breaks_rule,
    _feed_curation_rule,
    _engagement_pressure_rule,
    _news_exposure_rule,
)


# ============================================================
# GENERATOR
# ============================================================

def generate_recommendations(
    platform: str,
    responses: Mapping[str, str],
    scoring_result: ScoringResult,
) -> List[Recommendation]:
    """
    Build at most four recommendations ordered by ascending priority.

    Args:
        platform: platform key (normalized here; aliases such as "x" accepted)
        responses: question id -> option value
        scoring_result: output of compute_scores for the same inputs

    Returns:
        List of Recommendation, possibly empty
    """
    platform_key = normalize_platform(platform)
    responses = responses or {}

    fired = []
    for rule in RULES:
        recommendation = rule(platform_key, responses, scoring_result)
        if recommendation is not None:
            fired.append(recommendation)

    # sorted() is stable
    return sorted(fired, key=lambda r: r.priority)[:MAX_RECOMMENDATIONS]
