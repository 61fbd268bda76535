"""
Progress Trend Insight

LLM-written summary of a user's recent progress, with a deterministic
trend computed from the wellness series as the fallback.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel

from mindtrack.llm.client import LLMClientException, OpenAIChatClient

logger = logging.getLogger(__name__)

TREND_TEMPERATURE = 0.4
TREND_DEAD_BAND = 0.5

FALLBACK_INSIGHT = (
    "Continue monitoring your digital wellness patterns. "
    "Small, consistent changes can lead to meaningful improvements."
)
MISSING_INSIGHT = (
    "Your digital wellness journey is unique. "
    "Keep focusing on the strategies that work best for you."
)


class Trend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class ProgressSnapshot(BaseModel):
    date: datetime
    overall_wellness: float = 0.0
    screen_time: float = 0.0
    mood_score: float = 0.0


class AssessmentSnapshot(BaseModel):
    platform: str
    overall_score: float = 0.0
    created_at: datetime


class TrendInsight(BaseModel):
    insight: str
    trend: Trend


def compute_trend(progress: Sequence[ProgressSnapshot]) -> Trend:
    """
    Compare mean wellness of the newer half against the older half.

    Differences within +/-0.5 are stable. Fewer than two entries is stable.
    With an odd count the middle entry belongs to neither half.
    """
    if len(progress) < 2:
        return Trend.STABLE

    ordered = sorted(progress, key=lambda p: p.date)
    half = len(ordered) // 2
    older = ordered[:half]
    newer = ordered[len(ordered) - half:]

    delta = (
        sum(p.overall_wellness for p in newer) / len(newer)
        - sum(p.overall_wellness for p in older) / len(older)
    )
    if delta > TREND_DEAD_BAND:
        return Trend.IMPROVING
    if delta < -TREND_DEAD_BAND:
        return Trend.DECLINING
    return Trend.STABLE


def _build_prompt(progress: Sequence[ProgressSnapshot], assessments: Sequence[AssessmentSnapshot]) -> str:
    progress_json = json.dumps([p.model_dump(mode="json") for p in progress])
    assessments_json = json.dumps([a.model_dump(mode="json") for a in assessments])
    return (
        "Analyze this user's mental health and social media usage trends to provide "
        "a personalized insight.\n\n"
        f"Progress data: {progress_json}\n"
        f"Recent assessments: {assessments_json}\n\n"
        "Provide analysis in JSON format:\n"
        "- insight: string (2-3 sentences about their progress and patterns)\n"
        '- trend: "improving", "stable", or "declining"\n\n'
        "Focus on positive reinforcement and actionable observations."
    )


def generate_trend_insight(
    progress: Sequence[ProgressSnapshot],
    recent_assessments: Sequence[AssessmentSnapshot],
    client: Optional[OpenAIChatClient],
) -> TrendInsight:
    """Never raises; any upstream or parsing failure yields the fallback insight."""
    fallback = TrendInsight(insight=FALLBACK_INSIGHT, trend=compute_trend(progress))
    if client is None:
        return fallback

    try:
        raw = client.complete(
            [{"role": "user", "content": _build_prompt(progress, recent_assessments)}],
            temperature=TREND_TEMPERATURE,
            json_mode=True,
        )
        parsed = json.loads(raw or "{}")
    except LLMClientException as e:
        logger.warning(f"Trend insight generation failed: {e}")
        return fallback
    except ValueError:
        logger.warning("Trend insight output was not valid JSON")
        return fallback

    if not isinstance(parsed, dict):
        return fallback

    insight = parsed.get("insight")
    if not isinstance(insight, str) or not insight.strip():
        insight = MISSING_INSIGHT

    try:
        trend = Trend(parsed.get("trend"))
    except ValueError:
        trend = fallback.trend

    return TrendInsight(insight=insight.strip(), trend=trend)
