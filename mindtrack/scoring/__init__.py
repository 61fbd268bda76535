"""
Scoring Engine Module

Deterministic, rule-based wellness scoring for platform questionnaires.

Design Principles:
- PURE: no side effects, no I/O, no shared state
- TOTAL: always returns a complete result, never raises on input content
- RULE-BASED: weighted answer classification, NOT a trained model

Version: scoring_engine_v1
"""

from .models import QuestionWeight, ResponseTally, RiskLevel, ScoringResult
from .weights import PLATFORM_SCORING, get_platform_weights
from .engine import (
    ENGINE_VERSION,
    answered_responses,
    classify_response,
    classify_risk,
    compute_scores,
    round_half_up,
    tally_responses,
)

__all__ = [
    # Models
    "QuestionWeight",
    "ResponseTally",
    "RiskLevel",
    "ScoringResult",
    # Tables
    "PLATFORM_SCORING",
    "get_platform_weights",
    # Functions
    "answered_responses",
    "classify_response",
    "classify_risk",
    "compute_scores",
    "round_half_up",
    "tally_responses",
]

__version__ = ENGINE_VERSION
