"""
Question Catalog Models

Pydantic models for questionnaire definitions. Instances are frozen:
the catalog is configuration, never mutated at runtime.
"""

from typing import List, Tuple
from pydantic import BaseModel, Field


class AnswerOption(BaseModel):
    """A single labeled answer choice."""
    value: str = Field(description="Machine value submitted with the response set")
    label: str = Field(description="Human-readable label shown in the form")

    class Config:
        frozen = True
        extra = "forbid"


class Question(BaseModel):
    """A questionnaire item with exactly four options."""
    id: str
    prompt: str
    options: Tuple[AnswerOption, ...]

    class Config:
        frozen = True
        extra = "forbid"

    def option_values(self) -> List[str]:
        return [o.value for o in self.options]


class PlatformQuestionnaire(BaseModel):
    """API view of one platform's questionnaire."""
    platform: str
    display_name: str
    question_count: int
    questions: List[Question]


class PlatformSummary(BaseModel):
    platform: str
    display_name: str
    question_count: int
    weighted_question_count: int


class CatalogIssue(BaseModel):
    """One integrity problem found by validate_catalog()."""
    platform: str
    question_id: str
    code: str
    detail: str
