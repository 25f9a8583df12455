"""
Response composition for MoodMuse.

Pairs engine output with a short mood-specific line of text and shapes the
result envelope returned to callers.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .schemas import ANY_LANGUAGE, RecommendationResponse, normalize_mood
from .selector import RandomSelector

MOOD_TEXTS: Dict[str, Tuple[str, ...]] = {
    "happy": (
        "Feeling happy? Enjoy these uplifting tunes!",
        "A joyful vibe just for you!",
        "Spread the happiness with these songs!",
    ),
    "sad": (
        "Need some comfort? These songs understand...",
        "It's okay to feel sad. Let the music heal.",
        "Melancholy melodies for your mood",
    ),
    "relaxed": (
        "Time to unwind with these chill tunes!",
        "Perfect relaxation soundtrack",
        "Calm vibes for your peaceful moment",
    ),
    "energetic": (
        "Get ready to move! High-energy picks!",
        "Power up with these energetic beats!",
        "Feel the energy with these tracks!",
    ),
    "romantic": (
        "Love is in the air with these romantic tunes!",
        "Perfect songs for your special moments",
        "Heartfelt melodies for romance",
    ),
    "angry": (
        "Channel that energy with these powerful tracks!",
        "Turn frustration into motivation!",
        "Strong beats for strong feelings",
    ),
}

DEFAULT_TEXTS: Tuple[str, ...] = (
    "Here are some recommendations for your mood!",
    "Curated picks just for you!",
    "Your personalized music selection",
)

ANY_LANGUAGE_LABEL = "Any Language"


@dataclass
class ComposedRecommendation:
    """Result envelope handed to the HTTP and CLI layers."""
    ai_text: str
    mood: str
    language: str
    total_found: int
    total_in_database: int
    no_match: bool
    songs: List[Dict[str, Any]]


class ResponseComposer:
    """Adds flavor text and derived links to engine responses."""

    def __init__(self, selector: Optional[RandomSelector] = None,
                 search_url_template: Optional[str] = None):
        self.selector = selector or RandomSelector()
        self.search_url_template = search_url_template

    def flavor_text(self, mood: str) -> str:
        texts = MOOD_TEXTS.get(normalize_mood(mood), DEFAULT_TEXTS)
        return self.selector.choice(texts)

    def compose(self, response: RecommendationResponse, catalog_size: int,
                mood: Optional[str] = None, language: Optional[str] = None) -> ComposedRecommendation:
        """Build the result envelope.

        Args:
            response: Engine response
            catalog_size: Number of songs in the catalog
            mood: Mood as typed by the caller (defaults to the normalized mood)
            language: Language as typed by the caller

        Returns:
            ComposedRecommendation ready for serialization
        """
        if response.language == ANY_LANGUAGE:
            language = ANY_LANGUAGE_LABEL
        elif language is None:
            language = response.language
        return ComposedRecommendation(
            ai_text=self.flavor_text(response.mood),
            mood=mood if mood is not None else response.mood,
            language=language,
            total_found=len(response.songs),
            total_in_database=catalog_size,
            no_match=response.no_match,
            songs=[song.to_dict(self.search_url_template) for song in response.songs]
        )
