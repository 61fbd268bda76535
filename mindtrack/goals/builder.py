"""
Goal Builder

Turns the top recommendations of an analysis into goal drafts.
Targets: 30 (minutes per day) for time limits, 1 (completion) otherwise.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from pydantic import BaseModel

from mindtrack.recommendations.models import Recommendation, RecommendationCategory

DEFAULT_GOAL_LIMIT = 3
GOAL_DURATION = timedelta(days=7)
TIME_LIMIT_TARGET_MINUTES = 30.0
COMPLETION_TARGET = 1.0


class GoalDraft(BaseModel):
    title: str
    description: Optional[str] = None
    category: str
    target_value: float
    due_date: datetime


def target_for_category(category: RecommendationCategory) -> float:
    if category == RecommendationCategory.TIME_LIMIT:
        return TIME_LIMIT_TARGET_MINUTES
    return COMPLETION_TARGET


def build_goal_drafts(
    recommendations: Sequence[Recommendation],
    now: datetime,
    limit: int = DEFAULT_GOAL_LIMIT,
) -> List[GoalDraft]:
    due = now + GOAL_DURATION
    return [
        GoalDraft(
            title=rec.title,
            description=rec.description,
            category=rec.category.value,
            target_value=target_for_category(rec.category),
            due_date=due,
        )
        for rec in list(recommendations)[:max(limit, 0)]
    ]
