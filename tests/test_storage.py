"""
Storage Tests

psycopg2 connections are MagicMocks; these tests pin the SQL contract
(tables, parameters, ownership filters) without a live database.
"""

from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from psycopg2.extras import Json

from mindtrack.analysis import analyze_assessment
from mindtrack.goals import GoalDraft
from mindtrack.storage import SCHEMA_SQL, ensure_tables, get_db, repository


@pytest.fixture
def conn():
    connection = MagicMock()
    cursor = MagicMock()
    connection.cursor.return_value = cursor
    return connection


@pytest.fixture
def analysis():
    return analyze_assessment("instagram", {"usage_frequency": "regularly", "feeling_after": "drained"})


def _sql(cursor):
    return cursor.execute.call_args.args[0]


def _params(cursor):
    return cursor.execute.call_args.args[1]


class TestSchema:

    @pytest.mark.parametrize("table", [
        "assessments", "insights", "user_goals", "progress_entries", "chat_messages",
    ])
    def test_all_tables_created_idempotently(self, table):
        assert f"CREATE TABLE IF NOT EXISTS {table}" in SCHEMA_SQL

    def test_ensure_tables_commits(self, conn):
        assert ensure_tables(conn) is True
        conn.cursor.return_value.execute.assert_called_once_with(SCHEMA_SQL)
        conn.commit.assert_called_once()

    def test_ensure_tables_rolls_back_on_error(self, conn):
        conn.cursor.return_value.execute.side_effect = Exception("permission denied")
        assert ensure_tables(conn) is False
        conn.rollback.assert_called_once()


class TestGetDb:

    def test_no_url(self):
        with patch('mindtrack.config.DATABASE_URL', None):
            assert get_db() is None

    def test_connect_error(self):
        with patch('mindtrack.config.DATABASE_URL', "postgresql://x"), \
                patch('mindtrack.storage.db.psycopg2.connect', side_effect=Exception("refused")):
            assert get_db() is None

    def test_connects_with_dict_cursor(self):
        with patch('mindtrack.config.DATABASE_URL', "postgresql://x"), \
                patch('mindtrack.storage.db.psycopg2.connect') as mock_connect:
            assert get_db() is mock_connect.return_value
        assert "cursor_factory" in mock_connect.call_args.kwargs


class TestAssessments:

    def test_create_assessment(self, conn, analysis):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "a-1", "platform": "instagram"}

        row = repository.create_assessment(conn, "user-1", {"usage_frequency": "regularly"}, analysis)

        assert row == {"id": "a-1", "platform": "instagram"}
        assert "INSERT INTO assessments" in _sql(cursor)
        params = _params(cursor)
        assert params[0] == "user-1"
        assert params[1] == "instagram"
        assert isinstance(params[2], Json)
        assert params[3] == analysis.scores.overall_score
        assert params[-1] == "high"
        conn.commit.assert_not_called()

    def test_latest_with_platform(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = None

        assert repository.get_latest_assessment(conn, "user-1", "twitter") is None
        assert _params(cursor) == ("user-1", "twitter")
        assert "LIMIT 1" in _sql(cursor)

    def test_latest_without_platform(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "a-2"}
        assert repository.get_latest_assessment(conn, "user-1") == {"id": "a-2"}
        assert _params(cursor) == ("user-1",)

    def test_list_with_limit(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchall.return_value = [{"id": "a"}, {"id": "b"}]
        assert repository.list_assessments(conn, "user-1", limit=5) == [{"id": "a"}, {"id": "b"}]
        assert _params(cursor) == ("user-1", 5)


class TestInsights:

    def test_create_insight_serializes_recommendations(self, conn, analysis):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "i-1"}

        repository.create_insight(conn, "user-1", "a-1", analysis)

        params = _params(cursor)
        assert params[:3] == ("user-1", "a-1", analysis.key_insight)
        assert isinstance(params[3], Json)
        assert params[3].adapted[0]["category"] == "time_limit"
        assert params[4] == "high"


class TestGoals:

    def test_create_goal(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "g-1"}
        due = datetime(2026, 3, 8)
        draft = GoalDraft(title="Limit", description="D", category="time_limit", target_value=30, due_date=due)

        assert repository.create_goal(conn, "user-1", draft) == {"id": "g-1"}
        assert _params(cursor) == ("user-1", "Limit", "D", "time_limit", 30, due)

    def test_update_scoped_to_owner(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "g-1", "current_value": 10}

        repository.update_goal_progress(conn, "user-1", "g-1", current_value=10)

        sql = _sql(cursor)
        assert sql.startswith("UPDATE user_goals SET current_value = %s")
        assert "WHERE id = %s AND user_id = %s" in sql
        assert _params(cursor) == (10, "g-1", "user-1")

    def test_complete_stamps_completed_at(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "g-1"}

        repository.update_goal_progress(conn, "user-1", "g-1", completed=True)

        assert "is_completed = %s" in _sql(cursor)
        assert "completed_at = %s" in _sql(cursor)
        params = _params(cursor)
        assert params[0] is True
        assert isinstance(params[1], datetime)

    def test_uncomplete_clears_completed_at(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "g-1"}
        repository.update_goal_progress(conn, "user-1", "g-1", completed=False)
        assert _params(cursor)[:2] == (False, None)

    def test_no_changes_reads_goal(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = None
        assert repository.update_goal_progress(conn, "user-1", "missing") is None
        assert _sql(cursor).strip().startswith("SELECT")

    def test_count_goals(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"completed": 2, "total": 5}
        assert repository.count_goals(conn, "user-1") == {"completed": 2, "total": 5}


class TestProgressAndChat:

    def test_list_progress_window(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchall.return_value = []
        repository.list_progress(conn, "user-1", days=30)
        assert _params(cursor) == ("user-1", 30)
        assert "ORDER BY date DESC" in _sql(cursor)

    def test_create_progress_entry(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "p-1"}
        repository.create_progress_entry(conn, "user-1", 7.5, 2.0, 6.0, {"instagram": 45}, 1, 3)
        params = _params(cursor)
        assert params[:4] == ("user-1", 7.5, 2.0, 6.0)
        assert isinstance(params[4], Json)
        assert params[5:] == (1, 3)

    def test_chat_messages(self, conn):
        cursor = conn.cursor.return_value
        cursor.fetchone.return_value = {"id": "c-1"}
        repository.create_chat_message(conn, "user-1", "hi", is_bot=False)
        assert _params(cursor) == ("user-1", "hi", False)

        cursor.fetchall.return_value = [{"id": "c-2"}, {"id": "c-1"}]
        assert repository.list_chat_messages(conn, "user-1", limit=2) == [{"id": "c-2"}, {"id": "c-1"}]
        assert _params(cursor) == ("user-1", 2)
