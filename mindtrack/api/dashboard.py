"""
Dashboard Endpoint

One call for the home screen: latest progress, latest assessment per
platform, the 7-day progress history and up to five active goals.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from mindtrack.storage import repository

from .deps import close_quietly, get_user_id, require_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/dashboard",
    tags=["dashboard"],
)

DASHBOARD_HISTORY_DAYS = 7
MAX_ACTIVE_GOALS = 5


def latest_per_platform(assessments: List[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Rows must be ordered newest first; the first row seen per platform wins."""
    latest: Dict[str, Dict[str, Any]] = {}
    for row in assessments:
        latest.setdefault(row["platform"], row)
    return latest


def build_dashboard(
    latest_progress,
    assessments: List[Dict[str, Any]],
    progress_history: List[Dict[str, Any]],
    goals: List[Dict[str, Any]],
) -> Dict[str, Any]:
    active = [g for g in goals if not g.get("is_completed")]
    completed_count = len(goals) - len(active)
    active_goals = active[:MAX_ACTIVE_GOALS]
    return {
        "latest_progress": latest_progress,
        "platform_assessments": latest_per_platform(assessments),
        "progress_history": progress_history,
        "active_goals": active_goals,
        "completed_goals_count": completed_count,
        "total_goals": len(active_goals) + completed_count,
    }


@router.get("")
def get_dashboard(user_id: str = Depends(get_user_id)):
    conn = require_db()
    try:
        result = build_dashboard(
            latest_progress=repository.get_latest_progress(conn, user_id),
            assessments=repository.list_assessments(conn, user_id),
            progress_history=repository.list_progress(conn, user_id, days=DASHBOARD_HISTORY_DAYS),
            goals=repository.list_goals(conn, user_id),
        )
        conn.close()
        return result
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching dashboard data")
        raise HTTPException(status_code=500, detail=f"Failed to fetch dashboard data: {str(e)}")
