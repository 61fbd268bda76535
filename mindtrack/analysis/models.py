"""
Assessment Analysis Models
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from mindtrack.recommendations.models import Recommendation
from mindtrack.scoring.models import ScoringResult


class InsightSource(str, Enum):
    ENGINE = "engine"      # templated sentence from the scoring engine
    AI = "ai"              # enriched by the language model
    FALLBACK = "fallback"  # keyword heuristic after a pipeline failure


class AssessmentAnalysis(BaseModel):
    """Combined result of score -> recommend -> enrich for one assessment."""
    platform: str
    scores: ScoringResult
    key_insight: str = Field(min_length=1)
    insight_source: InsightSource
    recommendations: List[Recommendation] = Field(default_factory=list)
    support_note: str

    class Config:
        extra = "forbid"
