"""
MindTrack Repository

Raw SQL reads and writes, one function per query. Functions take an open
connection and never commit; the caller owns the transaction.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from psycopg2.extras import Json

from mindtrack.analysis.models import AssessmentAnalysis
from mindtrack.goals.builder import GoalDraft


def _one(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def _all(cur) -> List[Dict[str, Any]]:
    return [dict(r) for r in cur.fetchall()]


# ============================================
# ASSESSMENTS
# ============================================

def create_assessment(conn, user_id: str, responses: Dict[str, str], analysis: AssessmentAnalysis) -> Dict[str, Any]:
    scores = analysis.scores
    cur = conn.cursor()
    cur.execute("""
        INSERT INTO assessments (
            user_id, platform, responses, overall_score, mood_score,
            usage_score, comparison_score, confidence_score, risk_level
        ) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
        RETURNING *
    """, (
        user_id,
        analysis.platform,
        Json(responses),
        scores.overall_score,
        scores.mood_score,
        scores.usage_score,
        scores.comparison_score,
        scores.confidence_score,
        scores.risk_level.value,
    ))
    row = _one(cur)
    cur.close()
    return row


def list_assessments(conn, user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    cur = conn.cursor()
    if limit is None:
        cur.execute("""
            SELECT * FROM assessments WHERE user_id = %s ORDER BY created_at DESC
        """, (user_id,))
    else:
        cur.execute("""
            SELECT * FROM assessments WHERE user_id = %s ORDER BY created_at DESC LIMIT %s
        """, (user_id, limit))
    rows = _all(cur)
    cur.close()
    return rows


def get_latest_assessment(conn, user_id: str, platform: Optional[str] = None) -> Optional[Dict[str, Any]]:
    cur = conn.cursor()
    if platform:
        cur.execute("""
            SELECT * FROM assessments
            WHERE user_id = %s AND platform = %s
            ORDER BY created_at DESC LIMIT 1
        """, (user_id, platform))
    else:
        cur.execute("""
            SELECT * FROM assessments WHERE user_id = %s ORDER BY created_at DESC LIMIT 1
        """, (user_id,))
    row = _one(cur)
    cur.close()
    return row


# ============================================
# INSIGHTS
# ============================================

def create_insight(conn, user_id: str, assessment_id: str, analysis: AssessmentAnalysis) -> Dict[str, Any]:
    cur = conn.cursor()
    cur.execute("""
        INSERT INTO insights (user_id, assessment_id, key_insight, recommendations, risk_level)
        VALUES (%s, %s, %s, %s, %s)
        RETURNING *
    """, (
        user_id,
        assessment_id,
        analysis.key_insight,
        Json([r.model_dump(mode="json") for r in analysis.recommendations]),
        analysis.scores.risk_level.value,
    ))
    row = _one(cur)
    cur.close()
    return row


def list_insights(conn, user_id: str) -> List[Dict[str, Any]]:
    cur = conn.cursor()
    cur.execute("""
        SELECT * FROM insights WHERE user_id = %s ORDER BY created_at DESC
    """, (user_id,))
    rows = _all(cur)
    cur.close()
    return rows


def get_latest_insight(conn, user_id: str) -> Optional[Dict[str, Any]]:
    cur = conn.cursor()
    cur.execute("""
        SELECT * FROM insights WHERE user_id = %s ORDER BY created_at DESC LIMIT 1
    """, (user_id,))
    row = _one(cur)
    cur.close()
    return row


# ============================================
# GOALS
# ============================================

def create_goal(conn, user_id: str, draft: GoalDraft) -> Dict[str, Any]:
    cur = conn.cursor()
    cur.execute("""
        INSERT INTO user_goals (user_id, title, description, category, target_value, due_date)
        VALUES (%s, %s, %s, %s, %s, %s)
        RETURNING *
    """, (
        user_id,
        draft.title,
        draft.description,
        draft.category,
        draft.target_value,
        draft.due_date,
    ))
    row = _one(cur)
    cur.close()
    return row


def list_goals(conn, user_id: str) -> List[Dict[str, Any]]:
    cur = conn.cursor()
    cur.execute("""
        SELECT * FROM user_goals WHERE user_id = %s ORDER BY created_at DESC
    """, (user_id,))
    rows = _all(cur)
    cur.close()
    return rows


def update_goal_progress(
    conn,
    user_id: str,
    goal_id: str,
    current_value: Optional[float] = None,
    completed: Optional[bool] = None,
) -> Optional[Dict[str, Any]]:
    """
    Update a goal owned by user_id. Returns None when no such goal exists.

    completed=True stamps completed_at; completed=False clears it.
    """
    assignments = []
    params: List[Any] = []

    if current_value is not None:
        assignments.append("current_value = %s")
        params.append(current_value)
    if completed is not None:
        assignments.append("is_completed = %s")
        params.append(completed)
        assignments.append("completed_at = %s")
        params.append(datetime.utcnow() if completed else None)

    cur = conn.cursor()
    if not assignments:
        cur.execute("""
            SELECT * FROM user_goals WHERE id = %s AND user_id = %s
        """, (goal_id, user_id))
    else:
        cur.execute(
            f"UPDATE user_goals SET {', '.join(assignments)} WHERE id = %s AND user_id = %s RETURNING *",
            (*params, goal_id, user_id),
        )
    row = _one(cur)
    cur.close()
    return row


def count_goals(conn, user_id: str) -> Dict[str, int]:
    """Returns {"completed": n, "total": n}."""
    cur = conn.cursor()
    cur.execute("""
        SELECT
            COUNT(*) FILTER (WHERE is_completed) AS completed,
            COUNT(*) AS total
        FROM user_goals WHERE user_id = %s
    """, (user_id,))
    row = _one(cur) or {}
    cur.close()
    return {"completed": int(row.get("completed") or 0), "total": int(row.get("total") or 0)}


# ============================================
# PROGRESS
# ============================================

def create_progress_entry(
    conn,
    user_id: str,
    overall_wellness: float,
    screen_time: float,
    mood_score: float,
    platform_usage: Optional[Dict[str, Any]],
    goals_completed: int,
    total_goals: int,
) -> Dict[str, Any]:
    cur = conn.cursor()
    cur.execute("""
        INSERT INTO progress_entries (
            user_id, date, overall_wellness, screen_time, mood_score,
            platform_usage, goals_completed, total_goals
        ) VALUES (%s, NOW(), %s, %s, %s, %s, %s, %s)
        RETURNING *
    """, (
        user_id,
        overall_wellness,
        screen_time,
        mood_score,
        Json(platform_usage or {}),
        goals_completed,
        total_goals,
    ))
    row = _one(cur)
    cur.close()
    return row


def list_progress(conn, user_id: str, days: int = 7) -> List[Dict[str, Any]]:
    """Entries from the last `days` days, newest first."""
    cur = conn.cursor()
    cur.execute("""
        SELECT * FROM progress_entries
        WHERE user_id = %s AND date >= NOW() - make_interval(days => %s)
        ORDER BY date DESC
    """, (user_id, days))
    rows = _all(cur)
    cur.close()
    return rows


def get_latest_progress(conn, user_id: str) -> Optional[Dict[str, Any]]:
    cur = conn.cursor()
    cur.execute("""
        SELECT * FROM progress_entries WHERE user_id = %s ORDER BY date DESC LIMIT 1
    """, (user_id,))
    row = _one(cur)
    cur.close()
    return row


# ============================================
# CHAT
# ============================================

def create_chat_message(conn, user_id: str, message: str, is_bot: bool) -> Dict[str, Any]:
    cur = conn.cursor()
    cur.execute("""
        INSERT INTO chat_messages (user_id, message, is_bot)
        VALUES (%s, %s, %s)
        RETURNING *
    """, (user_id, message, is_bot))
    row = _one(cur)
    cur.close()
    return row


def list_chat_messages(conn, user_id: str, limit: int = 20) -> List[Dict[str, Any]]:
    """Most recent `limit` messages, newest first."""
    cur = conn.cursor()
    cur.execute("""
        SELECT * FROM chat_messages WHERE user_id = %s ORDER BY created_at DESC LIMIT %s
    """, (user_id, limit))
    rows = _all(cur)
    cur.close()
    return rows
