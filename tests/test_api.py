"""
HTTP API Tests

FastAPI TestClient against the real app. The database is a MagicMock
patched in at mindtrack.api.deps.get_db; AI collaborators are replaced
through dependency overrides.
"""

from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from mindtrack.api.dashboard import build_dashboard, latest_per_platform
from mindtrack.api.deps import get_insight_enricher, get_llm_client
from mindtrack.chat.companion import STRESS_REPLY
from mindtrack.enrichment import NullInsightEnricher
from mindtrack.enrichment.trends import FALLBACK_INSIGHT
from mindtrack.server import app

USER = {"X-User-Id": "user-1"}

GOAL_ID = "5f0c6c2e-8a4b-4c1d-9e3f-2b7a1d6e4c90"

ALL_NEGATIVE = {
    "current_experience": "overwhelming",
    "usage_frequency": "regularly",
    "feeling_after": "drained",
    "self_image_influence": "understand_better",
    "engagement_importance": "affected",
}


@pytest.fixture
def client():
    app.dependency_overrides[get_insight_enricher] = lambda: NullInsightEnricher()
    app.dependency_overrides[get_llm_client] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def conn():
    connection = MagicMock()
    connection.cursor.return_value = MagicMock()
    with patch('mindtrack.api.deps.get_db', return_value=connection):
        yield connection


@pytest.fixture
def cursor(conn):
    return conn.cursor.return_value


# ============================================================================
# HEALTH AND CATALOG
# ============================================================================

class TestHealthAndCatalog:

    def test_app_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["engine_version"] == "scoring_engine_v1"

    def test_catalog_health(self, client):
        data = client.get("/api/v1/catalog/health").json()
        assert data["status"] == "ok"
        assert data["issues"] == []

    def test_list_platforms(self, client):
        data = client.get("/api/v1/catalog/platforms").json()
        assert [p["platform"] for p in data] == ["instagram", "facebook", "snapchat", "twitter"]
        twitter = data[3]
        assert twitter["display_name"] == "Twitter/X"
        assert twitter["question_count"] == 10
        assert twitter["weighted_question_count"] == 5

    def test_get_questionnaire(self, client):
        data = client.get("/api/v1/catalog/instagram").json()
        assert data["question_count"] == 9
        assert len(data["questions"][0]["options"]) == 4

    def test_alias_resolves(self, client):
        assert client.get("/api/v1/catalog/X").json()["platform"] == "twitter"

    def test_unknown_platform_404(self, client):
        assert client.get("/api/v1/catalog/tiktok").status_code == 404


# ============================================================================
# ASSESSMENTS
# ============================================================================

class TestScoreEndpoint:

    def test_stateless_score(self, client):
        response = client.post("/api/v1/assessments/score", json={
            "platform": "instagram",
            "responses": ALL_NEGATIVE,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["scores"]["overallScore"] == 1.0
        assert data["scores"]["riskLevel"] == "high"
        assert data["insight_source"] == "engine"
        assert [r["priority"] for r in data["recommendations"]] == [1, 1, 2]

    def test_unknown_platform_is_neutral(self, client):
        data = client.post("/api/v1/assessments/score", json={"platform": "tiktok", "responses": {}}).json()
        assert data["scores"]["overallScore"] == 5.0
        assert data["scores"]["confidenceScore"] == 0

    def test_messy_responses_are_cleaned(self, client):
        data = client.post("/api/v1/assessments/score", json={
            "platform": "instagram",
            "responses": {"usage_frequency": " regularly ", "feeling_after": None, "x": [1, 2]},
        }).json()
        assert data["scores"]["confidenceScore"] == 20

    def test_blank_platform_is_422(self, client):
        assert client.post("/api/v1/assessments/score", json={"platform": "  "}).status_code == 422


class TestCreateAssessment:

    def test_requires_user_header(self, client):
        response = client.post("/api/v1/assessments", json={"platform": "instagram", "responses": {}})
        assert response.status_code == 401

    def test_unsupported_platform(self, client, conn):
        response = client.post("/api/v1/assessments", json={"platform": "myspace"}, headers=USER)
        assert response.status_code == 400

    def test_database_unavailable(self, client):
        with patch('mindtrack.api.deps.get_db', return_value=None):
            response = client.post(
                "/api/v1/assessments",
                json={"platform": "instagram", "responses": ALL_NEGATIVE},
                headers=USER,
            )
        assert response.status_code == 500
        assert response.json()["detail"] == "Database connection failed"

    def test_persists_assessment_insight_and_goals(self, client, conn, cursor):
        cursor.fetchone.side_effect = [
            {"id": "a-1", "platform": "instagram"},
            {"id": "i-1", "assessment_id": "a-1"},
            {"id": "g-1"},
            {"id": "g-2"},
            {"id": "g-3"},
        ]

        response = client.post(
            "/api/v1/assessments",
            json={"platform": "Instagram", "responses": ALL_NEGATIVE},
            headers=USER,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["assessment"]["id"] == "a-1"
        assert data["insight"]["id"] == "i-1"
        assert [g["id"] for g in data["goals"]] == ["g-1", "g-2", "g-3"]
        assert data["analysis"]["scores"]["riskLevel"] == "high"
        conn.commit.assert_called_once()
        conn.close.assert_called()

    def test_write_failure_rolls_back(self, client, conn, cursor):
        cursor.execute.side_effect = Exception("disk full")
        response = client.post(
            "/api/v1/assessments",
            json={"platform": "instagram", "responses": ALL_NEGATIVE},
            headers=USER,
        )
        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to create assessment")
        conn.rollback.assert_called_once()

    def test_list_and_latest(self, client, conn, cursor):
        cursor.fetchall.return_value = [{"id": "a-2"}, {"id": "a-1"}]
        assert client.get("/api/v1/assessments", headers=USER).json() == [{"id": "a-2"}, {"id": "a-1"}]

        cursor.fetchone.return_value = None
        response = client.get("/api/v1/assessments/latest?platform=x", headers=USER)
        assert response.status_code == 200
        assert response.json() is None
        assert cursor.execute.call_args.args[1] == ("user-1", "twitter")


# ============================================================================
# GOALS, PROGRESS, DASHBOARD
# ============================================================================

class TestGoals:

    def test_create_goal_defaults(self, client, conn, cursor):
        cursor.fetchone.return_value = {"id": "g-1"}
        response = client.post("/api/v1/goals", json={"title": "Screen-free dinner", "category": "time_limit"}, headers=USER)
        assert response.status_code == 200
        params = cursor.execute.call_args.args[1]
        assert params[:5] == ("user-1", "Screen-free dinner", None, "time_limit", 30.0)
        conn.commit.assert_called_once()

    def test_invalid_category(self, client, conn):
        response = client.post("/api/v1/goals", json={"title": "x", "category": "sleep"}, headers=USER)
        assert response.status_code == 422

    def test_patch_missing_goal_404(self, client, conn, cursor):
        cursor.fetchone.return_value = None
        response = client.patch(f"/api/v1/goals/{GOAL_ID}", json={"currentValue": 5}, headers=USER)
        assert response.status_code == 404
        conn.commit.assert_not_called()

    def test_patch_malformed_goal_id_is_rejected_before_query(self, client, conn, cursor):
        response = client.patch("/api/v1/goals/not-a-uuid", json={"currentValue": 5}, headers=USER)
        assert response.status_code == 422
        cursor.execute.assert_not_called()

    def test_patch_goal(self, client, conn, cursor):
        cursor.fetchone.return_value = {"id": GOAL_ID, "is_completed": True}
        response = client.patch(f"/api/v1/goals/{GOAL_ID}", json={"completed": True}, headers=USER)
        assert response.status_code == 200
        assert response.json()["is_completed"] is True
        params = cursor.execute.call_args.args[1]
        assert params[-2:] == (GOAL_ID, "user-1")
        conn.commit.assert_called_once()


class TestProgress:

    def test_create_progress_snapshots_goal_counts(self, client, conn, cursor):
        cursor.fetchone.side_effect = [{"completed": 1, "total": 3}, {"id": "p-1"}]
        response = client.post("/api/v1/progress", json={
            "overallWellness": 7.5,
            "screenTime": 2.5,
            "moodScore": 6,
            "platformUsage": {"instagram": 45},
        }, headers=USER)
        assert response.status_code == 200
        assert response.json() == {"id": "p-1"}
        params = cursor.execute.call_args.args[1]
        assert params[-2:] == (1, 3)

    def test_progress_validation(self, client, conn):
        response = client.post("/api/v1/progress", json={
            "overallWellness": 11, "screenTime": 1, "moodScore": 5,
        }, headers=USER)
        assert response.status_code == 422

    def test_list_progress_days(self, client, conn, cursor):
        cursor.fetchall.return_value = []
        assert client.get("/api/v1/progress?days=14", headers=USER).json() == []
        assert cursor.execute.call_args.args[1] == ("user-1", 14)


class TestDashboard:

    def test_latest_per_platform(self):
        rows = [
            {"id": "3", "platform": "instagram"},
            {"id": "2", "platform": "twitter"},
            {"id": "1", "platform": "instagram"},
        ]
        assert {k: v["id"] for k, v in latest_per_platform(rows).items()} == {"instagram": "3", "twitter": "2"}

    def test_build_dashboard_counts(self):
        goals = [{"id": str(i), "is_completed": i < 2} for i in range(9)]
        data = build_dashboard(None, [], [], goals)
        assert len(data["active_goals"]) == 5
        assert data["completed_goals_count"] == 2
        assert data["total_goals"] == 7

    def test_endpoint(self, client, conn, cursor):
        cursor.fetchone.return_value = {"id": "p-1"}
        cursor.fetchall.side_effect = [
            [{"id": "a-1", "platform": "snapchat"}],
            [],
            [{"id": "g-1", "is_completed": False}],
        ]
        data = client.get("/api/v1/dashboard", headers=USER).json()
        assert data["latest_progress"] == {"id": "p-1"}
        assert data["platform_assessments"]["snapchat"]["id"] == "a-1"
        assert data["total_goals"] == 1


# ============================================================================
# INSIGHTS AND CHAT
# ============================================================================

class TestInsights:

    def test_latest_insight_null(self, client, conn, cursor):
        cursor.fetchone.return_value = None
        response = client.get("/api/v1/insights/latest", headers=USER)
        assert response.status_code == 200
        assert response.json() is None

    def test_generate_without_model(self, client, conn, cursor):
        cursor.fetchall.side_effect = [
            [
                {"date": datetime(2026, 1, 4), "overall_wellness": 8.0, "screen_time": 1.0, "mood_score": 7.0},
                {"date": datetime(2026, 1, 1), "overall_wellness": 5.0, "screen_time": 3.0, "mood_score": None},
            ],
            [{"platform": "instagram", "overall_score": 6.0, "created_at": datetime(2026, 1, 2)}],
        ]
        data = client.post("/api/v1/insights/generate", headers=USER).json()
        assert data == {"insight": FALLBACK_INSIGHT, "trend": "improving"}


class TestChat:

    def test_history_is_chronological(self, client, conn, cursor):
        cursor.fetchall.return_value = [{"id": "2"}, {"id": "1"}]
        data = client.get("/api/v1/chat/history?limit=2", headers=USER).json()
        assert [m["id"] for m in data] == ["1", "2"]

    def test_send_message_fallback_reply(self, client, conn, cursor):
        cursor.fetchall.return_value = []
        cursor.fetchone.return_value = {"id": "c"}

        response = client.post("/api/v1/chat", json={"message": "  I feel anxious  "}, headers=USER)

        assert response.status_code == 200
        assert response.json() == {"response": STRESS_REPLY}
        inserted = [
            c.args[1] for c in cursor.execute.call_args_list
            if "INSERT INTO chat_messages" in c.args[0]
        ]
        assert inserted == [("user-1", "I feel anxious", False), ("user-1", STRESS_REPLY, True)]
        conn.commit.assert_called_once()

    def test_blank_message_422(self, client, conn):
        assert client.post("/api/v1/chat", json={"message": "   "}, headers=USER).status_code == 422
