"""
Mood classification module for MoodMuse.
Provides MoodClassifier class for tagging songs with a mood and descriptive tags.
"""
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Sequence, Tuple
import logging

MOOD_VOCABULARY: Tuple[str, ...] = ("happy", "sad", "energetic", "relaxed", "romantic", "angry")

# Checked in order; the first set containing any seed wins
MOOD_SEEDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("happy", ("happy", "fun", "joyful", "uplifting")),
    ("sad", ("sad", "melancholy", "emotional", "heartbreak")),
    ("energetic", ("energetic", "aggressive", "intense", "powerful")),
    ("relaxed", ("relaxed", "calm", "chill", "peaceful")),
    ("romantic", ("romantic", "sexy", "love", "intimate")),
    ("angry", ("angry", "aggressive", "rebellious")),
)

DERIVED_TAGS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("aggressive", ("intense", "powerful")),
    ("fun", ("upbeat", "joyful")),
    ("energetic", ("high-energy", "dynamic")),
    ("sexy", ("sensual", "romantic")),
)

DEFAULT_THRESHOLDS: Dict[str, float] = {
    "happy_valence": 0.7,
    "happy_arousal": 0.6,
    "sad_valence": 0.4,
    "sad_arousal": 0.5,
    "energetic_arousal": 0.7,
    "relaxed_arousal": 0.4,
    "romantic_valence_low": 0.5,
    "romantic_valence_high": 0.7,
}

NEUTRAL_SCORE = 0.5
DEFAULT_MOOD = "energetic"
MAX_TAGS = 5


@dataclass(frozen=True)
class MoodClassification:
    """Result of mood classification."""
    mood: str
    source: str  # "keyword" or "numeric"
    valence: float
    arousal: float


class MoodClassifier:
    """Classifies songs into mood categories from seed keywords and valence/arousal scores."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the mood classifier with configuration.

        Args:
            config: Configuration dictionary with optional 'mood_thresholds' and 'max_tags'
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or {}
        self.thresholds = dict(DEFAULT_THRESHOLDS)
        self.thresholds.update(self.config.get('mood_thresholds') or {})
        self.max_tags = self.config.get('max_tags', MAX_TAGS)

    def classify(self, seeds: Sequence[str], valence: Optional[float] = None,
                 arousal: Optional[float] = None) -> MoodClassification:
        """Classify a song's mood.

        Seed keywords take precedence; the numeric rules only run when no
        seed matches. Missing scores count as neutral (0.5).

        Args:
            seeds: Seed keywords for the song
            valence: Valence score, or None when absent
            arousal: Arousal score, or None when absent

        Returns:
            MoodClassification with the mood tag and the deciding rule
        """
        valence = NEUTRAL_SCORE if valence is None else valence
        arousal = NEUTRAL_SCORE if arousal is None else arousal

        mood = self.mood_from_seeds(seeds)
        if mood is not None:
            return MoodClassification(mood, "keyword", valence, arousal)
        return MoodClassification(self.mood_from_scores(valence, arousal), "numeric", valence, arousal)

    def mood_from_seeds(self, seeds: Sequence[str]) -> Optional[str]:
        seed_words = {seed.lower() for seed in seeds}
        for mood, keywords in MOOD_SEEDS:
            if any(keyword in seed_words for keyword in keywords):
                return mood
        return None

    def mood_from_scores(self, valence: float, arousal: float) -> str:
        t = self.thresholds
        if valence > t['happy_valence'] and arousal > t['happy_arousal']:
            return "happy"
        if valence < t['sad_valence'] and arousal < t['sad_arousal']:
            return "sad"
        if arousal > t['energetic_arousal']:
            return "energetic"
        if arousal < t['relaxed_arousal']:
            return "relaxed"
        if t['romantic_valence_low'] < valence < t['romantic_valence_high']:
            return "romantic"
        return DEFAULT_MOOD

    def generate_tags(self, seeds: Sequence[str]) -> List[str]:
        """Build the tag list for a song.

        Seeds come first, followed by tags derived from specific seeds.
        The result never exceeds ``max_tags`` entries.
        """
        tags = list(seeds[:self.max_tags])
        seed_words = {seed.lower() for seed in seeds}
        for keyword, extras in DERIVED_TAGS:
            if keyword not in seed_words:
                continue
            for extra in extras:
                if extra not in tags:
                    tags.append(extra)
        return tags[:self.max_tags]
