"""
MindTrack Scoring Engine v1
===========================
Converts a platform questionnaire response set into wellness scores.

This module:
- Scores each weighted question as positive / negative / risk / neutral
- Normalizes by the weight actually observed
- Classifies risk from risk/protective ratios
- Derives mood, usage and comparison scores from the adjusted overall score
- Selects a templated insight sentence

This module MUST NOT:
- Raise on missing, partial or unknown input
- Perform I/O or call external services
- Keep state between invocations

Design Principles:
- PURE: same input -> same output (mood perturbation is hash-derived)
- NEUTRAL DEFAULTS: absence lowers confidence, never correctness
"""

import math
from typing import Dict, Mapping, Sequence, Tuple

from mindtrack.catalog.questions import get_platform_display_name, normalize_platform
from mindtrack.shared.hashing import hash_to_unit_interval

from .insight import build_insight
from .models import QuestionWeight, ResponseTally, RiskLevel, ScoringResult
from .weights import get_platform_weights

ENGINE_VERSION = "scoring_engine_v1"

MIN_SCORE = 1.0
MAX_SCORE = 10.0
NEUTRAL_SCORE = 5.0

POSITIVE_SCORE = 8
NEGATIVE_SCORE = 3
RISK_SCORE = 2

HIGH_RISK_RATIO = 0.4
LOW_RISK_PROTECTIVE_RATIO = 0.6
HIGH_RISK_PENALTY = 2.0
LOW_RISK_BONUS = 1.0

USAGE_RISK_RATIO = 0.3
USAGE_PENALTY = 1.5
USAGE_BONUS = 0.5
COMPARISON_PROTECTIVE_RATIO = 0.5
COMPARISON_SHIFT = 1.0
MOOD_SPREAD = 1.0


# ============================================================
# HELPERS
# ============================================================

def _clamp(value: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero for positive values (0.25 -> 0.3 at 1 digit)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def classify_response(question: QuestionWeight, value: str) -> Tuple[int, bool, bool]:
    """
    Score a single answer.

    Returns (score, is_risk, is_protective). Positive wins over everything;
    a negative answer that is also a risk answer is downgraded to risk.
    """
    if value in question.positive_responses:
        return POSITIVE_SCORE, False, True
    if value in question.negative_responses:
        if value in question.risk_responses:
            return RISK_SCORE, True, False
        return NEGATIVE_SCORE, False, False
    if value in question.risk_responses:
        return RISK_SCORE, True, False
    return NEUTRAL_SCORE, False, False


def tally_responses(weights: Sequence[QuestionWeight], responses: Mapping[str, str]) -> ResponseTally:
    """Single pass over the weighted questions. Unanswered/blank ids are skipped."""
    weighted_sum = 0.0
    weight_total = 0.0
    processed = 0
    risk = 0
    protective = 0

    for question in weights:
        value = responses.get(question.id)
        if not value:
            continue

        score, is_risk, is_protective = classify_response(question, value)
        if is_risk:
            risk += 1
        if is_protective:
            protective += 1

        weighted_sum += score * question.weight
        weight_total += question.weight
        processed += 1

    return ResponseTally(
        weighted_sum=weighted_sum,
        weight_total=weight_total,
        processed_count=processed,
        risk_factors=risk,
        protective_factors=protective,
    )


def answered_responses(weights: Sequence[QuestionWeight], responses: Mapping[str, str]) -> Dict[str, str]:
    """The answers tally_responses scores: weighted ids with a non-blank value."""
    return {q.id: responses[q.id] for q in weights if responses.get(q.id)}


def classify_risk(risk_ratio: float, protective_ratio: float) -> RiskLevel:
    """High is checked first, so a set meeting both thresholds is high."""
    if risk_ratio >= HIGH_RISK_RATIO:
        return RiskLevel.HIGH
    if protective_ratio >= LOW_RISK_PROTECTIVE_RATIO:
        return RiskLevel.LOW
    return RiskLevel.MODERATE


def adjust_overall(base_score: float, risk_level: RiskLevel) -> float:
    if risk_level == RiskLevel.HIGH:
        adjusted = base_score - HIGH_RISK_PENALTY
    elif risk_level == RiskLevel.LOW:
        adjusted = base_score + LOW_RISK_BONUS
    else:
        adjusted = base_score
    return _clamp(adjusted)


def mood_offset(platform: str, responses: Mapping[str, str]) -> float:
    """
    Bounded variation in [-1, +1] separating mood from overall wellness.

    Derived from the canonical hash of the scored answers only, so repeated
    submissions of the same answers always yield the same mood score and
    extra keys or blank values leave it unchanged.
    """
    point = hash_to_unit_interval({"platform": platform, "responses": dict(responses)})
    return (point * 2 - 1) * MOOD_SPREAD


# ============================================================
# ENGINE
# ============================================================

def compute_scores(platform: str, responses: Mapping[str, str]) -> ScoringResult:
    """
    Compute wellness scores for one assessment.

    Args:
        platform: platform key ("instagram", "facebook", "snapchat", "twitter");
                  unknown values yield the neutral result
        responses: question id -> chosen option value; extra keys are ignored

    Returns:
        ScoringResult with all scores in [1, 10] rounded to one decimal place,
        confidence in [0, 100]
    """
    platform_key = normalize_platform(platform)
    weights = get_platform_weights(platform_key)
    responses = responses or {}

    tally = tally_responses(weights, responses)

    if tally.weight_total > 0:
        base_score = tally.weighted_sum / tally.weight_total
    else:
        base_score = NEUTRAL_SCORE

    risk_ratio = tally.risk_ratio
    protective_ratio = tally.protective_ratio
    risk_level = classify_risk(risk_ratio, protective_ratio)

    overall = adjust_overall(base_score, risk_level)

    mood = _clamp(overall + mood_offset(platform_key, answered_responses(weights, responses)))
    usage = _clamp(overall + (-USAGE_PENALTY if risk_ratio > USAGE_RISK_RATIO else USAGE_BONUS))
    comparison = _clamp(
        overall + (COMPARISON_SHIFT if protective_ratio > COMPARISON_PROTECTIVE_RATIO else -COMPARISON_SHIFT)
    )

    if weights:
        confidence = min(100, int(round_half_up(100 * tally.processed_count / len(weights))))
    else:
        confidence = 0

    insight = build_insight(
        platform_name=get_platform_display_name(platform),
        overall_score=overall,
        risk_factors=tally.risk_factors,
        protective_factors=tally.protective_factors,
        processed_count=tally.processed_count,
    )

    return ScoringResult(
        overall_score=round_half_up(overall, 1),
        mood_score=round_half_up(mood, 1),
        usage_score=round_half_up(usage, 1),
        comparison_score=round_half_up(comparison, 1),
        risk_level=risk_level,
        confidence_score=confidence,
        personalized_insight=insight,
    )
