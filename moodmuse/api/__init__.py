"""
API module for the MoodMuse REST API.
"""
from .routes import router
from .app import create_app
from .schemas import (
    MoodRequest,
    RecommendResponse,
    SongResponse,
    HealthResponse
)

__all__ = [
    "router",
    "create_app",
    "MoodRequest",
    "RecommendResponse",
    "SongResponse",
    "HealthResponse"
]
