"""
MindTrack HTTP API

One router per resource, all under /api/v1.
"""

from mindtrack.catalog.router import router as catalog_router

from .assessments import router as assessments_router
from .chat import router as chat_router
from .dashboard import router as dashboard_router
from .goals import router as goals_router
from .insights import router as insights_router
from .progress import router as progress_router

ROUTERS = (
    catalog_router,
    assessments_router,
    insights_router,
    goals_router,
    progress_router,
    dashboard_router,
    chat_router,
)

__all__ = ["ROUTERS"]
