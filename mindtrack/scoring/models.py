"""
Scoring Engine Models

QuestionWeight: scoring metadata for one weighted question (frozen dataclass).
ScoringResult: immutable engine output, serialized with camelCase aliases.

Version: scoring_engine_v1
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, Field


class RiskLevel(str, Enum):
    """Three-level risk classification. Calculated by rules, NOT by ML."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


@dataclass(frozen=True)
class QuestionWeight:
    """Weight and classified answer sets for a weighted question."""
    id: str
    weight: float
    positive_responses: FrozenSet[str]
    negative_responses: FrozenSet[str]
    risk_responses: FrozenSet[str]

    def __post_init__(self):
        if not 0 < self.weight <= 1:
            raise ValueError(f"weight for {self.id} must be in (0, 1], got {self.weight}")


@dataclass(frozen=True)
class ResponseTally:
    """Intermediate counts from one pass over the weighted questions."""
    weighted_sum: float = 0.0
    weight_total: float = 0.0
    processed_count: int = 0
    risk_factors: int = 0
    protective_factors: int = 0

    @property
    def risk_ratio(self) -> float:
        return self.risk_factors / self.processed_count if self.processed_count else 0.0

    @property
    def protective_ratio(self) -> float:
        return self.protective_factors / self.processed_count if self.processed_count else 0.0


class ScoringResult(BaseModel):
    """
    Complete output of the scoring engine.

    Produced fresh per invocation and never mutated afterwards.
    """
    overall_score: float = Field(alias="overallScore", ge=1, le=10)
    mood_score: float = Field(alias="moodScore", ge=1, le=10)
    usage_score: float = Field(alias="usageScore", ge=1, le=10)
    comparison_score: float = Field(alias="comparisonScore", ge=1, le=10)
    risk_level: RiskLevel = Field(alias="riskLevel")
    confidence_score: int = Field(alias="confidenceScore", ge=0, le=100)
    personalized_insight: str = Field(alias="personalizedInsight", min_length=1)

    class Config:
        frozen = True
        populate_by_name = True
