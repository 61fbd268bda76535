"""
Insight Endpoints
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from mindtrack.enrichment.trends import AssessmentSnapshot, ProgressSnapshot, TrendInsight, generate_trend_insight
from mindtrack.llm.client import OpenAIChatClient
from mindtrack.storage import repository

from .deps import close_quietly, get_llm_client, get_user_id, require_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/insights",
    tags=["insights"],
)

TREND_WINDOW_DAYS = 30
TREND_ASSESSMENT_COUNT = 5


@router.get("")
def list_insights(user_id: str = Depends(get_user_id)):
    conn = require_db()
    try:
        rows = repository.list_insights(conn, user_id)
        conn.close()
        return rows
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching insights")
        raise HTTPException(status_code=500, detail=f"Failed to fetch insights: {str(e)}")


@router.get("/latest")
def latest_insight(user_id: str = Depends(get_user_id)):
    conn = require_db()
    try:
        row = repository.get_latest_insight(conn, user_id)
        conn.close()
        return row
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching latest insight")
        raise HTTPException(status_code=500, detail=f"Failed to fetch latest insight: {str(e)}")


@router.post("/generate", response_model=TrendInsight)
def generate_insight(
    user_id: str = Depends(get_user_id),
    client: Optional[OpenAIChatClient] = Depends(get_llm_client),
):
    """
    Trend insight over the last 30 days of progress and the 5 latest assessments.

    Falls back to a fixed sentence with a computed trend when the model is unavailable.
    """
    conn = require_db()
    try:
        progress_rows = repository.list_progress(conn, user_id, days=TREND_WINDOW_DAYS)
        assessment_rows = repository.list_assessments(conn, user_id, limit=TREND_ASSESSMENT_COUNT)
        conn.close()
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error loading trend inputs")
        raise HTTPException(status_code=500, detail=f"Failed to generate insights: {str(e)}")

    progress = [
        ProgressSnapshot(
            date=row["date"],
            overall_wellness=row.get("overall_wellness") or 0.0,
            screen_time=row.get("screen_time") or 0.0,
            mood_score=row.get("mood_score") or 0.0,
        )
        for row in progress_rows
    ]
    assessments = [
        AssessmentSnapshot(
            platform=row["platform"],
            overall_score=row.get("overall_score") or 0.0,
            created_at=row["created_at"],
        )
        for row in assessment_rows
    ]
    return generate_trend_insight(progress, assessments, client)
