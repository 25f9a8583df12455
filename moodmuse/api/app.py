"""
FastAPI application factory for MoodMuse.
"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import router
from .dependencies import get_app_state
from ..config.settings import AppConfig


DESCRIPTION = """
**Mood based song recommendations**

Tell MoodMuse how you feel and, optionally, which language you want to
listen in. It answers with a handful of songs from its catalog plus links to
find them on YouTube and Spotify.

## Quick Start

1. Check API health: `GET /api/health`
2. See available moods and languages: `GET /api/moods`
3. Get recommendations: `POST /api/mood` with `{"mood": "happy", "language": "Hindi"}`
4. Search the catalog: `GET /api/search?q=...`

When a specific language has no songs for the mood (or a similar mood), the
response is empty with `no_match: true`; songs from other languages are never
substituted.
"""


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Application config used for CORS and metadata (defaults if None)

    Returns:
        Configured FastAPI instance
    """
    config = config or AppConfig()

    app = FastAPI(
        title="MoodMuse",
        description=DESCRIPTION,
        version=config.versioning.api_version,
        license_info={
            "name": "MIT",
        }
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        """Build the catalog before accepting requests; failures abort startup."""
        get_app_state()

    return app
