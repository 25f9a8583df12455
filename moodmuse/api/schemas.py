"""
Pydantic schemas for the MoodMuse REST API.
"""
from typing import Optional, List, Dict
from pydantic import BaseModel, Field


class MoodRequest(BaseModel):
    """Request body for the mood endpoint."""
    mood: Optional[str] = Field(
        default=None,
        description="Free-text mood, e.g. 'happy' or 'sad'"
    )
    language: Optional[str] = Field(
        default=None,
        description="Language name, or 'Any Language' to search all languages"
    )
    count: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of songs to return (defaults to the configured count, capped at the configured maximum)"
    )


class FeaturesResponse(BaseModel):
    """Numeric audio features of a song."""
    valence: float
    energy: float
    danceability: float
    acousticness: float
    tempo: float
    loudness: float


class SongResponse(BaseModel):
    """Individual song in a response."""
    title: str = Field(description="Song title")
    artist: str = Field(description="Song artist")
    mood: str = Field(description="Normalized mood tag")
    language: str = Field(description="Detected language")
    genre: str = Field(description="Genre")
    tags: List[str] = Field(description="Up to five descriptive tags")
    external_id: str = Field(description="Platform track id (may be synthesized)")
    features: FeaturesResponse
    youtube_url: str = Field(description="Video search link built from title and artist")
    spotify_search_url: str = Field(description="Spotify search link built from title and artist")


class RecommendResponse(BaseModel):
    """Response body for the mood endpoint."""
    status: str = "ok"
    ai_text: str = Field(description="Short mood-specific message")
    mood: str = Field(description="Mood as requested")
    language: str = Field(description="Language as requested, or 'Any Language'")
    total_found: int = Field(ge=0, description="Number of songs returned")
    total_in_database: int = Field(ge=0, description="Catalog size")
    no_match: bool = Field(description="True when the requested language has no matching songs")
    recommendations: List[SongResponse]


class MoodsResponse(BaseModel):
    """Available moods and languages."""
    status: str = "ok"
    moods: List[str]
    languages: List[str]
    total_songs: int


class StatsResponse(BaseModel):
    """Catalog statistics."""
    status: str = "ok"
    total_songs: int
    moods: Dict[str, int]
    languages: Dict[str, int]


class SearchResponse(BaseModel):
    """Search results."""
    status: str = "ok"
    query: str
    results: List[SongResponse]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="API status")
    version: str = Field(description="API version")
    catalog_loaded: bool = Field(description="Whether the song catalog is loaded")
    total_songs: int = Field(description="Number of songs in the catalog")


class ErrorResponse(BaseModel):
    """Error response format."""
    detail: str = Field(description="Error message")
