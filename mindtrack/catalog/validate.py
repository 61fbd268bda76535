"""
Catalog Validation

Two jobs:
1. validate_catalog(): integrity check of questionnaires against the
   scoring weights (run at startup and by the catalog health endpoint)
2. clean_responses(): boundary coercion of raw JSON answers into the
   strict question-id -> option-value mapping the scoring engine expects
"""

from typing import Any, Dict, List, Mapping, Optional

from mindtrack.scoring.weights import PLATFORM_SCORING

from .models import CatalogIssue
from .questions import QUESTION_CATALOG

OPTIONS_PER_QUESTION = 4

_SCALAR_TYPES = (str, int, float, bool)


def validate_catalog(
    catalog: Optional[Mapping] = None,
    scoring: Optional[Mapping] = None,
) -> List[CatalogIssue]:
    """
    Return every integrity problem found; an empty list means the catalog is sound.

    Checks:
    - each question has exactly four options with unique values
    - question ids are unique within a platform
    - every weighted id exists in the same platform's catalog
    - every classified answer value is a real option of that question
    """
    catalog = QUESTION_CATALOG if catalog is None else catalog
    scoring = PLATFORM_SCORING if scoring is None else scoring
    issues: List[CatalogIssue] = []

    for platform, questions in catalog.items():
        seen_ids = set()
        for question in questions:
            if question.id in seen_ids:
                issues.append(CatalogIssue(
                    platform=platform,
                    question_id=question.id,
                    code="DUPLICATE_QUESTION_ID",
                    detail=f"Question id '{question.id}' appears more than once",
                ))
            seen_ids.add(question.id)

            values = question.option_values()
            if len(values) != OPTIONS_PER_QUESTION:
                issues.append(CatalogIssue(
                    platform=platform,
                    question_id=question.id,
                    code="OPTION_COUNT",
                    detail=f"Expected {OPTIONS_PER_QUESTION} options, found {len(values)}",
                ))
            if len(set(values)) != len(values):
                issues.append(CatalogIssue(
                    platform=platform,
                    question_id=question.id,
                    code="DUPLICATE_OPTION_VALUE",
                    detail="Option values must be unique",
                ))

    for platform, weights in scoring.items():
        by_id = {q.id: q for q in catalog.get(platform, ())}
        for weight in weights:
            question = by_id.get(weight.id)
            if question is None:
                issues.append(CatalogIssue(
                    platform=platform,
                    question_id=weight.id,
                    code="UNKNOWN_WEIGHTED_QUESTION",
                    detail=f"Weighted question '{weight.id}' is not in the {platform} catalog",
                ))
                continue
            classified = weight.positive_responses | weight.negative_responses | weight.risk_responses
            unknown = sorted(classified - set(question.option_values()))
            if unknown:
                issues.append(CatalogIssue(
                    platform=platform,
                    question_id=weight.id,
                    code="UNKNOWN_OPTION_VALUE",
                    detail=f"Classified values not offered by the question: {unknown}",
                ))

    return issues


def clean_responses(raw: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Coerce arbitrary JSON answers into Dict[str, str].

    - None, blank strings and non-scalar values (lists, dicts) are dropped
    - scalars are stringified and stripped
    - unknown keys are kept; the engine ignores them
    """
    cleaned: Dict[str, str] = {}
    if not raw:
        return cleaned

    for key, value in raw.items():
        if value is None or not isinstance(value, _SCALAR_TYPES):
            continue
        text = str(value).strip()
        if text:
            cleaned[str(key)] = text
    return cleaned
