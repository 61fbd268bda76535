"""
Progress Endpoints
"""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from mindtrack.storage import repository

from .deps import close_quietly, get_user_id, require_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/progress",
    tags=["progress"],
)


class ProgressRequest(BaseModel):
    overall_wellness: float = Field(alias="overallWellness", ge=0, le=10)
    screen_time: float = Field(alias="screenTime", ge=0, le=24)  # hours
    mood_score: float = Field(alias="moodScore", ge=0, le=10)
    platform_usage: Dict[str, float] = Field(default_factory=dict, alias="platformUsage")  # platform -> minutes

    class Config:
        populate_by_name = True


@router.get("")
def list_progress(
    days: int = Query(default=7, ge=1, le=365),
    user_id: str = Depends(get_user_id),
):
    conn = require_db()
    try:
        rows = repository.list_progress(conn, user_id, days=days)
        conn.close()
        return rows
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching progress")
        raise HTTPException(status_code=500, detail=f"Failed to fetch progress: {str(e)}")


@router.post("")
def create_progress(request: ProgressRequest, user_id: str = Depends(get_user_id)):
    """Goal counters are snapshotted from user_goals at write time."""
    conn = require_db()
    try:
        counts = repository.count_goals(conn, user_id)
        row = repository.create_progress_entry(
            conn,
            user_id,
            overall_wellness=request.overall_wellness,
            screen_time=request.screen_time,
            mood_score=request.mood_score,
            platform_usage=request.platform_usage,
            goals_completed=counts["completed"],
            total_goals=counts["total"],
        )
        conn.commit()
        conn.close()
        return row
    except Exception as e:
        close_quietly(conn, rollback=True)
        logger.exception("Error creating progress entry")
        raise HTTPException(status_code=500, detail=f"Failed to create progress entry: {str(e)}")
