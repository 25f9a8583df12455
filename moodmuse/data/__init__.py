"""
Data module for MoodMuse.

Song schemas, dataset validation and deep-link helpers. The catalog and the
CSV loader live in ``moodmuse.data.catalog`` and ``moodmuse.data.loader``.
"""

from .schemas import Song, AudioFeatures, ValidationResult
from .validator import DataValidator
from .links import build_search_url, build_spotify_search_url

__all__ = [
    'Song',
    'AudioFeatures',
    'ValidationResult',
    'DataValidator',
    'build_search_url',
    'build_spotify_search_url'
]
