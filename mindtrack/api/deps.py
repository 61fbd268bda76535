"""
Shared request dependencies.

The caller's identity comes from the X-User-Id header set by the upstream
auth proxy; this service does not authenticate on its own.
"""

from typing import Optional

from fastapi import Header, HTTPException

from mindtrack.enrichment.enricher import InsightEnricher, build_default_enricher
from mindtrack.llm.client import OpenAIChatClient, build_default_client
from mindtrack.storage.db import get_db


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


def get_llm_client() -> Optional[OpenAIChatClient]:
    return build_default_client()


def get_insight_enricher() -> InsightEnricher:
    return build_default_enricher()


def require_db():
    """Open a connection or fail the request with 500."""
    conn = get_db()
    if not conn:
        raise HTTPException(status_code=500, detail="Database connection failed")
    return conn


def close_quietly(conn, rollback: bool = False) -> None:
    try:
        if rollback:
            conn.rollback()
        conn.close()
    except Exception:
        pass
