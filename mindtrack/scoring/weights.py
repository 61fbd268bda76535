"""
Platform Scoring Weights

Only the most diagnostic questions of each platform carry weight. Every id
here must exist in mindtrack.catalog.questions for the same platform
(checked by mindtrack.catalog.validate.validate_catalog).
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .models import QuestionWeight


def _w(
    question_id: str,
    weight: float,
    positive: Iterable[str],
    negative: Iterable[str],
    risk: Iterable[str],
) -> QuestionWeight:
    return QuestionWeight(
        id=question_id,
        weight=weight,
        positive_responses=frozenset(positive),
        negative_responses=frozenset(negative),
        risk_responses=frozenset(risk),
    )


PLATFORM_SCORING: Mapping[str, Tuple[QuestionWeight, ...]] = MappingProxyType({
    "instagram": (
        _w("current_experience", 0.25, ["uplifting"], ["overwhelming"], ["balance", "overwhelming"]),
        _w("usage_frequency", 0.20, ["rarely", "occasionally"], ["regularly"], ["regularly"]),
        _w("feeling_after", 0.25, ["energized"], ["drained", "distracted"], ["drained"]),
        _w("self_image_influence", 0.20, ["not_really"], ["understand_better"], ["understand_better"]),
        _w("engagement_importance", 0.10, ["not_important"], ["affected", "track"], ["affected"]),
    ),
    "facebook": (
        _w("feeling_after", 0.25, ["connected"], ["anxious", "distracted"], ["anxious"]),
        _w("comparing_life", 0.25, ["not_at_all"], ["frequently", "almost_always"], ["almost_always"]),
        _w("meaningful_time", 0.20, ["very_often"], ["rarely"], ["rarely"]),
        _w("interactions_influence", 0.15, ["not_really"], ["frequently"], ["frequently"]),
        _w("support_or_distract", 0.15, ["supports"], ["affects_deeply"], ["affects_deeply"]),
    ),
    "snapchat": (
        _w("daily_usage", 0.20, ["less_30min"], ["more_2hours"], ["more_2hours"]),
        _w("streak_breaks", 0.25, ["unaffected"], ["upset", "stressed"], ["upset"]),
        _w("appearing_perfect", 0.20, ["none"], ["lot"], ["lot"]),
        _w("emotional_effect", 0.20, ["happy_connected"], ["drained"], ["drained"]),
        _w("impact_goals", 0.15, ["never"], ["often"], ["often"]),
    ),
    "twitter": (
        _w("experience", 0.20, ["engaging"], ["intense"], ["intense"]),
        _w("feeling_after", 0.25, ["informed"], ["unsettled", "overwhelmed"], ["unsettled"]),
        _w("trending_topics", 0.20, ["rarely"], ["very_often"], ["very_often"]),
        _w("online_arguments", 0.20, ["not_at_all"], ["significantly"], ["significantly"]),
        _w("focus_wellbeing", 0.15, ["helps"], ["affects_significantly"], ["affects_significantly"]),
    ),
})


def get_platform_weights(platform: str) -> Tuple[QuestionWeight, ...]:
    """Weighted questions for a normalized platform key; empty when unknown."""
    return PLATFORM_SCORING.get(platform, ())
