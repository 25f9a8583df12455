"""
Recommendation schemas for the MoodMuse system.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..data.schemas import Song
from ..errors import EmptyQueryError

ANY_LANGUAGE = "any"
ANY_LANGUAGE_ALIASES = {"", "any", "any language"}
DEFAULT_COUNT = 6


class MatchTier(Enum):
    """Cascade stage that produced the candidate set."""
    EXACT = "exact"
    SIMILAR_MOOD = "similar_mood"
    NO_MATCH = "no_match"
    MOOD_ANY_LANGUAGE = "mood_any_language"
    CATALOG = "catalog"


def normalize_mood(mood: str) -> str:
    return (mood or "").strip().casefold()


def normalize_language(language: Optional[str]) -> str:
    """Trim and case-fold a language, mapping absent values to ANY_LANGUAGE."""
    normalized = (language or "").strip().casefold()
    if normalized in ANY_LANGUAGE_ALIASES:
        return ANY_LANGUAGE
    return normalized


@dataclass
class RecommendationRequest:
    """Request for song recommendations based on mood and language."""
    mood: str
    language: Optional[str] = None
    count: int = DEFAULT_COUNT

    def __post_init__(self):
        if self.mood is None or not str(self.mood).strip():
            raise EmptyQueryError("Mood is required")
        if self.count <= 0:
            raise ValueError("Count must be positive")


@dataclass
class CandidateSet:
    """Songs eligible for selection and the tier that produced them."""
    songs: List[Song]
    tier: MatchTier


@dataclass
class RecommendationResponse:
    """Response containing song recommendations."""
    songs: List[Song]
    mood: str
    language: str
    tier: MatchTier
    total_candidates: int
    processing_time_ms: float = 0.0

    def __post_init__(self):
        if self.processing_time_ms < 0:
            raise ValueError("Processing time cannot be negative")
        if self.total_candidates < 0:
            raise ValueError("Total candidates cannot be negative")
        if len(self.songs) > self.total_candidates:
            raise ValueError("Number of recommendations cannot exceed total candidates")

    @property
    def no_match(self) -> bool:
        """True when a specific language was requested and nothing matched."""
        return self.tier is MatchTier.NO_MATCH
