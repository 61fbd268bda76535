"""
MindTrack API Application

Run locally:
  uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindtrack import __version__, config
from mindtrack.api import ROUTERS
from mindtrack.catalog.validate import validate_catalog
from mindtrack.scoring import ENGINE_VERSION
from mindtrack.storage.db import ensure_tables, get_db

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def init_db() -> bool:
    """Create tables on startup. A missing database is logged, not fatal."""
    conn = get_db()
    if not conn:
        logger.warning("Database unavailable at startup; tables not ensured")
        return False
    try:
        return ensure_tables(conn)
    finally:
        conn.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    issues = validate_catalog()
    for issue in issues:
        logger.error(f"Catalog issue [{issue.platform}/{issue.question_id}] {issue.code}: {issue.detail}")
    init_db()
    yield


# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="MindTrack API",
    description="Social media wellness self-assessment",
    version=__version__,
    lifespan=lifespan,
)

# ============================================
# CORS Configuration
# ============================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)

for router in ROUTERS:
    app.include_router(router)


@app.get("/health")
def health():
    return {"status": "healthy", "version": __version__, "engine_version": ENGINE_VERSION}
