"""
Goal Endpoints
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from mindtrack.goals.builder import GOAL_DURATION, GoalDraft, target_for_category
from mindtrack.recommendations.models import RecommendationCategory
from mindtrack.storage import repository

from .deps import close_quietly, get_user_id, require_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/goals",
    tags=["goals"],
)


class GoalCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    category: RecommendationCategory
    target_value: Optional[float] = Field(default=None, alias="targetValue", ge=0)
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")

    class Config:
        populate_by_name = True


class GoalUpdateRequest(BaseModel):
    current_value: Optional[float] = Field(default=None, alias="currentValue", ge=0)
    completed: Optional[bool] = None

    class Config:
        populate_by_name = True


@router.get("")
def list_goals(user_id: str = Depends(get_user_id)):
    conn = require_db()
    try:
        rows = repository.list_goals(conn, user_id)
        conn.close()
        return rows
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching goals")
        raise HTTPException(status_code=500, detail=f"Failed to fetch goals: {str(e)}")


@router.post("")
def create_goal(request: GoalCreateRequest, user_id: str = Depends(get_user_id)):
    """Missing target and due date default the same way as generated goals."""
    draft = GoalDraft(
        title=request.title,
        description=request.description,
        category=request.category.value,
        target_value=(
            request.target_value
            if request.target_value is not None
            else target_for_category(request.category)
        ),
        due_date=request.due_date or datetime.utcnow() + GOAL_DURATION,
    )

    conn = require_db()
    try:
        row = repository.create_goal(conn, user_id, draft)
        conn.commit()
        conn.close()
        return row
    except Exception as e:
        close_quietly(conn, rollback=True)
        logger.exception("Error creating goal")
        raise HTTPException(status_code=500, detail=f"Failed to create goal: {str(e)}")


@router.patch("/{goal_id}")
def update_goal(goal_id: UUID, request: GoalUpdateRequest, user_id: str = Depends(get_user_id)):
    conn = require_db()
    try:
        row = repository.update_goal_progress(
            conn,
            user_id,
            str(goal_id),
            current_value=request.current_value,
            completed=request.completed,
        )
        if row is None:
            raise HTTPException(status_code=404, detail=f"Goal not found: {goal_id}")
        conn.commit()
        conn.close()
        return row
    except HTTPException:
        close_quietly(conn, rollback=True)
        raise
    except Exception as e:
        close_quietly(conn, rollback=True)
        logger.exception("Error updating goal")
        raise HTTPException(status_code=500, detail=f"Failed to update goal: {str(e)}")
