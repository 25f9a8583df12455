"""
Data schemas for the MoodMuse system.

This module contains dataclasses that define the structure of data
used throughout the system, from classified songs to validation results.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional, List, Tuple

from .links import build_search_url, build_spotify_search_url
from ..config.settings import YOUTUBE_SEARCH_TEMPLATE

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_GENRE = "Unknown"


@dataclass(frozen=True)
class AudioFeatures:
    """Numeric features attached to a song"""
    valence: float = 0.5        # Positivity
    energy: float = 0.5         # Arousal
    danceability: float = 0.5
    acousticness: float = 0.5
    tempo: float = 120.0
    loudness: float = -6.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Song:
    """
    A classified song.

    Attributes:
        title: Track title
        artist: Track artist
        mood: Normalized mood tag
        language: Normalized language tag
        genre: Genre string from the dataset
        tags: Up to five descriptive tags
        external_id: Opaque platform identifier (may be synthesized)
        features: Numeric audio features
        seeds: Seed keywords parsed from the dataset row
    """
    title: str
    artist: str
    mood: str
    language: str
    genre: str = UNKNOWN_GENRE
    tags: Tuple[str, ...] = ()
    external_id: str = ""
    features: AudioFeatures = field(default_factory=AudioFeatures)
    seeds: Tuple[str, ...] = ()

    @property
    def identity(self) -> Tuple[str, str]:
        """(title, artist) pair used to de-duplicate results."""
        return (self.title, self.artist)

    @property
    def is_placeholder(self) -> bool:
        """True when the row had no usable title or artist."""
        return (
            not self.title or not self.artist
            or self.title == UNKNOWN_TITLE
            or self.artist == UNKNOWN_ARTIST
        )

    def search_url(self, template: Optional[str] = None) -> str:
        return build_search_url(self.title, self.artist, template or YOUTUBE_SEARCH_TEMPLATE)

    def to_dict(self, search_url_template: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert the song to a JSON-ready dictionary.

        Search URLs are derived on every call and never stored on the song.
        """
        return {
            'title': self.title,
            'artist': self.artist,
            'mood': self.mood,
            'language': self.language,
            'genre': self.genre,
            'tags': list(self.tags),
            'external_id': self.external_id,
            'features': self.features.to_dict(),
            'youtube_url': self.search_url(search_url_template),
            'spotify_search_url': build_spotify_search_url(self.title, self.artist)
        }


@dataclass
class ValidationResult:
    """Result of data validation operations"""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
    metadata: Optional[Dict[str, Any]] = None

    def add_error(self, error: str) -> None:
        """Add an error to the validation result"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning to the validation result"""
        self.warnings.append(warning)

    def has_errors(self) -> bool:
        """Check if validation has any errors"""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if validation has any warnings"""
        return len(self.warnings) > 0
