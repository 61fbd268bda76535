"""
Recommendation Models

Version: recommendations_v1
"""

from enum import Enum

from pydantic import BaseModel, Field


class RecommendationCategory(str, Enum):
    TIME_LIMIT = "time_limit"
    MINDFUL_BROWSING = "mindful_browsing"
    FEED_CURATION = "feed_curation"
    GRATITUDE = "gratitude"
    SKILL_BUILDING = "skill_building"


class Impact(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recommendation(BaseModel):
    """
    One actionable suggestion.

    Priority 1 is most urgent. Ties keep rule order.
    """
    title: str = Field(min_length=1)
    description: str
    category: RecommendationCategory
    impact: Impact
    actionable: bool = True
    priority: int = Field(ge=1)

    class Config:
        extra = "forbid"
        frozen = True
