"""
Question Catalog Module

Static per-platform questionnaires (9-10 questions, four options each).
Purely declarative; the scoring engine's weighted questions must all exist here.
"""

from .models import AnswerOption, Question, PlatformQuestionnaire, PlatformSummary, CatalogIssue
from .questions import (
    QUESTION_CATALOG,
    PLATFORM_DISPLAY_NAMES,
    get_platform_display_name,
    get_question,
    get_questions,
    is_supported_platform,
    normalize_platform,
    supported_platforms,
)
from .validate import clean_responses, validate_catalog

__all__ = [
    # Models
    "AnswerOption",
    "Question",
    "PlatformQuestionnaire",
    "PlatformSummary",
    "CatalogIssue",
    # Data
    "QUESTION_CATALOG",
    "PLATFORM_DISPLAY_NAMES",
    # Functions
    "get_platform_display_name",
    "get_question",
    "get_questions",
    "is_supported_platform",
    "normalize_platform",
    "supported_platforms",
    "clean_responses",
    "validate_catalog",
]
