"""Goal drafts derived from recommendations."""

from .builder import GoalDraft, build_goal_drafts, target_for_category

__all__ = ["GoalDraft", "build_goal_drafts", "target_for_category"]
