"""
MindTrack API Server Entry Point

  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

from mindtrack.server import app

__all__ = ["app"]


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
