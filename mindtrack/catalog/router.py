"""
Question Catalog Endpoints

Public (no user header): the assessment form loads its questions here.
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, HTTPException

from mindtrack.scoring.weights import get_platform_weights

from .models import PlatformQuestionnaire, PlatformSummary
from .questions import (
    get_platform_display_name,
    get_questions,
    is_supported_platform,
    normalize_platform,
    supported_platforms,
)
from .validate import validate_catalog

router = APIRouter(
    prefix="/api/v1/catalog",
    tags=["catalog"],
)


@router.get("/health")
def catalog_health():
    """Catalog integrity status."""
    issues = validate_catalog()
    return {
        "status": "ok" if not issues else "degraded",
        "module": "question_catalog",
        "platforms": list(supported_platforms()),
        "issues": [i.model_dump() for i in issues],
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.get("/platforms", response_model=List[PlatformSummary])
def list_platforms():
    return [
        PlatformSummary(
            platform=platform,
            display_name=get_platform_display_name(platform),
            question_count=len(get_questions(platform)),
            weighted_question_count=len(get_platform_weights(platform)),
        )
        for platform in supported_platforms()
    ]


@router.get("/{platform}", response_model=PlatformQuestionnaire)
def get_platform_questionnaire(platform: str):
    if not is_supported_platform(platform):
        raise HTTPException(status_code=404, detail=f"Unsupported platform: {platform}")

    key = normalize_platform(platform)
    questions = list(get_questions(key))
    return PlatformQuestionnaire(
        platform=key,
        display_name=get_platform_display_name(key),
        question_count=len(questions),
        questions=questions,
    )
