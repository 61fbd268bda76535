"""
Goal Builder Tests
"""

from datetime import datetime, timedelta

from mindtrack.goals import build_goal_drafts, target_for_category
from mindtrack.recommendations import Impact, Recommendation, RecommendationCategory


def _rec(category, title="T", priority=1):
    return Recommendation(
        title=title,
        description="D",
        category=category,
        impact=Impact.HIGH,
        priority=priority,
    )


NOW = datetime(2026, 3, 1, 12, 0, 0)


class TestBuildGoalDrafts:

    def test_targets_and_due_date(self):
        drafts = build_goal_drafts([
            _rec(RecommendationCategory.TIME_LIMIT, "Limit"),
            _rec(RecommendationCategory.FEED_CURATION, "Curate"),
        ], now=NOW)

        assert [d.title for d in drafts] == ["Limit", "Curate"]
        assert drafts[0].target_value == 30
        assert drafts[1].target_value == 1
        assert drafts[0].category == "time_limit"
        assert all(d.due_date == NOW + timedelta(days=7) for d in drafts)

    def test_limited_to_three(self):
        recs = [_rec(RecommendationCategory.MINDFUL_BROWSING, f"R{i}") for i in range(4)]
        drafts = build_goal_drafts(recs, now=NOW)
        assert [d.title for d in drafts] == ["R0", "R1", "R2"]

    def test_custom_limit(self):
        recs = [_rec(RecommendationCategory.GRATITUDE) for _ in range(4)]
        assert len(build_goal_drafts(recs, now=NOW, limit=1)) == 1
        assert build_goal_drafts(recs, now=NOW, limit=0) == []

    def test_empty(self):
        assert build_goal_drafts([], now=NOW) == []

    def test_target_for_category(self):
        assert target_for_category(RecommendationCategory.TIME_LIMIT) == 30
        for category in RecommendationCategory:
            if category != RecommendationCategory.TIME_LIMIT:
                assert target_for_category(category) == 1
