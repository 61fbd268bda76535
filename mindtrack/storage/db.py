"""
PostgreSQL connection and schema.

Connections use RealDictCursor so every row comes back as a dict.
"""

import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from mindtrack import config

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS assessments (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        user_id VARCHAR(255) NOT NULL,
        platform VARCHAR(50) NOT NULL,
        responses JSONB NOT NULL,
        overall_score DOUBLE PRECISION,
        mood_score DOUBLE PRECISION,
        usage_score DOUBLE PRECISION,
        comparison_score DOUBLE PRECISION,
        confidence_score INTEGER,
        risk_level VARCHAR(20),
        created_at TIMESTAMPTZ DEFAULT NOW()
    );
    CREATE INDEX IF NOT EXISTS idx_assessments_user_created
        ON assessments(user_id, created_at DESC);

    CREATE TABLE IF NOT EXISTS insights (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        user_id VARCHAR(255) NOT NULL,
        assessment_id UUID REFERENCES assessments(id) ON DELETE CASCADE,
        key_insight TEXT NOT NULL,
        recommendations JSONB,
        risk_level VARCHAR(20),
        created_at TIMESTAMPTZ DEFAULT NOW()
    );
    CREATE INDEX IF NOT EXISTS idx_insights_user_created
        ON insights(user_id, created_at DESC);

    CREATE TABLE IF NOT EXISTS user_goals (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        user_id VARCHAR(255) NOT NULL,
        title VARCHAR(255) NOT NULL,
        description TEXT,
        category VARCHAR(50) NOT NULL,
        is_completed BOOLEAN DEFAULT FALSE,
        target_value DOUBLE PRECISION,
        current_value DOUBLE PRECISION DEFAULT 0,
        due_date TIMESTAMPTZ,
        created_at TIMESTAMPTZ DEFAULT NOW(),
        completed_at TIMESTAMPTZ
    );
    CREATE INDEX IF NOT EXISTS idx_user_goals_user_created
        ON user_goals(user_id, created_at DESC);

    CREATE TABLE IF NOT EXISTS progress_entries (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        user_id VARCHAR(255) NOT NULL,
        date TIMESTAMPTZ NOT NULL,
        overall_wellness DOUBLE PRECISION,
        screen_time DOUBLE PRECISION,
        mood_score DOUBLE PRECISION,
        platform_usage JSONB,
        goals_completed INTEGER DEFAULT 0,
        total_goals INTEGER DEFAULT 0,
        created_at TIMESTAMPTZ DEFAULT NOW()
    );
    CREATE INDEX IF NOT EXISTS idx_progress_entries_user_date
        ON progress_entries(user_id, date DESC);

    CREATE TABLE IF NOT EXISTS chat_messages (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        user_id VARCHAR(255) NOT NULL,
        message TEXT NOT NULL,
        is_bot BOOLEAN DEFAULT FALSE,
        created_at TIMESTAMPTZ DEFAULT NOW()
    );
    CREATE INDEX IF NOT EXISTS idx_chat_messages_user_created
        ON chat_messages(user_id, created_at DESC);
"""


def get_db():
    """Get database connection, or None when unavailable."""
    if not config.DATABASE_URL:
        logger.error("DATABASE_URL not configured")
        return None
    try:
        return psycopg2.connect(config.DATABASE_URL, cursor_factory=RealDictCursor)
    except Exception as e:
        logger.error(f"Database connection error: {e}")
        return None


def ensure_tables(conn) -> bool:
    """Create all MindTrack tables and indexes if missing. Idempotent."""
    try:
        cur = conn.cursor()
        cur.execute(SCHEMA_SQL)
        conn.commit()
        cur.close()
        return True
    except Exception as e:
        logger.error(f"Failed to ensure tables: {e}")
        conn.rollback()
        return False
