"""
Assessment Endpoints

POST /api/v1/assessments/score  - stateless analysis, no AI, no persistence
POST /api/v1/assessments        - analyze, persist, create goals
GET  /api/v1/assessments        - history, newest first
GET  /api/v1/assessments/latest - latest, optionally per platform
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, field_validator

from mindtrack.analysis.analyze import analyze_assessment
from mindtrack.analysis.models import AssessmentAnalysis
from mindtrack.catalog.questions import is_supported_platform, normalize_platform
from mindtrack.catalog.validate import clean_responses
from mindtrack.enrichment.enricher import InsightEnricher
from mindtrack.goals.builder import build_goal_drafts
from mindtrack.storage import repository

from .deps import close_quietly, get_insight_enricher, get_user_id, require_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/assessments",
    tags=["assessments"],
)


class AssessmentRequest(BaseModel):
    platform: str = Field(min_length=1)
    responses: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("platform")
    @classmethod
    def platform_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("platform must not be blank")
        return v.strip()


@router.get("/health")
def assessments_health():
    return {
        "status": "ok",
        "module": "assessments",
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.post("/score", response_model=AssessmentAnalysis)
def score_assessment(request: AssessmentRequest):
    """
    Run the deterministic pipeline only.

    Unknown platforms return the neutral result (overall 5, confidence 0).
    """
    try:
        return analyze_assessment(request.platform, clean_responses(request.responses))
    except Exception as e:
        logger.exception("Scoring failed")
        raise HTTPException(status_code=500, detail=f"Scoring error: {str(e)}")


@router.post("")
def create_assessment(
    request: AssessmentRequest,
    user_id: str = Depends(get_user_id),
    enricher: InsightEnricher = Depends(get_insight_enricher),
):
    if not is_supported_platform(request.platform):
        raise HTTPException(status_code=400, detail=f"Unsupported platform: {request.platform}")

    responses = clean_responses(request.responses)
    analysis = analyze_assessment(normalize_platform(request.platform), responses, enricher=enricher)

    conn = require_db()
    try:
        assessment = repository.create_assessment(conn, user_id, responses, analysis)
        insight = repository.create_insight(conn, user_id, assessment["id"], analysis)
        goals = [
            repository.create_goal(conn, user_id, draft)
            for draft in build_goal_drafts(analysis.recommendations, now=datetime.utcnow())
        ]
        conn.commit()
        conn.close()

        return {
            "assessment": assessment,
            "insight": insight,
            "goals": goals,
            "analysis": analysis.model_dump(mode="json", by_alias=True),
        }

    except HTTPException:
        close_quietly(conn, rollback=True)
        raise
    except Exception as e:
        close_quietly(conn, rollback=True)
        logger.exception("Error creating assessment")
        raise HTTPException(status_code=500, detail=f"Failed to create assessment: {str(e)}")


@router.get("")
def list_assessments(user_id: str = Depends(get_user_id)):
    conn = require_db()
    try:
        rows = repository.list_assessments(conn, user_id)
        conn.close()
        return rows
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching assessments")
        raise HTTPException(status_code=500, detail=f"Failed to fetch assessments: {str(e)}")


@router.get("/latest")
def latest_assessment(
    platform: Optional[str] = Query(default=None, description="Restrict to one platform"),
    user_id: str = Depends(get_user_id),
):
    """Latest assessment or null."""
    conn = require_db()
    try:
        row = repository.get_latest_assessment(
            conn, user_id, normalize_platform(platform) if platform else None
        )
        conn.close()
        return row
    except Exception as e:
        close_quietly(conn)
        logger.exception("Error fetching latest assessment")
        raise HTTPException(status_code=500, detail=f"Failed to fetch latest assessment: {str(e)}")
