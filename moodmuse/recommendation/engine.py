"""
Recommendation engine for MoodMuse.
"""
import time
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..data.catalog import Catalog
from ..data.schemas import Song
from .selector import RandomSelector
from .schemas import (
    ANY_LANGUAGE,
    DEFAULT_COUNT,
    CandidateSet,
    MatchTier,
    RecommendationRequest,
    RecommendationResponse,
    normalize_language,
    normalize_mood
)

SIMILAR_MOODS: Dict[str, Tuple[str, ...]] = {
    "happy": ("energetic", "joyful", "upbeat", "celebratory"),
    "energetic": ("happy", "party", "powerful", "driving"),
    "romantic": ("intimate", "passionate", "loving", "dreamy"),
    "sad": ("melancholy", "emotional", "heartbroken", "reflective"),
    "angry": ("intense", "aggressive", "rebellious", "furious"),
    "relaxed": ("calm", "peaceful", "chill", "mellow"),
}


class _CandidatePool:
    """Accumulates songs while keeping (title, artist) pairs unique."""

    def __init__(self):
        self.songs: List[Song] = []
        self._seen: Set[Tuple[str, str]] = set()

    def add(self, songs: Iterable[Song]) -> int:
        added = 0
        for song in songs:
            if song.identity in self._seen:
                continue
            self._seen.add(song.identity)
            self.songs.append(song)
            added += 1
        return added

    def __len__(self) -> int:
        return len(self.songs)


class RecommendationEngine:
    """Runs the mood/language cascade over the catalog and picks a random subset."""

    def __init__(self,
                 catalog: Catalog,
                 selector: Optional[RandomSelector] = None,
                 similar_moods: Optional[Dict[str, Sequence[str]]] = None,
                 expansion_factor: int = 2):
        """Initialize the recommendation engine.

        Args:
            catalog: Catalog of classified songs
            selector: Random selector used for the final pick (optional)
            similar_moods: Mood adjacency table (optional)
            expansion_factor: Similar-mood collection stops at this many times the count
        """
        self.catalog = catalog
        self.selector = selector or RandomSelector()
        self.similar_moods = SIMILAR_MOODS if similar_moods is None else similar_moods
        self.expansion_factor = expansion_factor
        self.logger = logging.getLogger(__name__)

    def recommend(self, mood: str, language: Optional[str] = None,
                  count: int = DEFAULT_COUNT) -> List[Song]:
        """Recommend songs for a mood and optional language.

        Args:
            mood: Free-text mood
            language: Language name, or None / "any" for all languages
            count: Maximum number of songs to return

        Returns:
            Up to ``count`` distinct songs in random order; empty when a
            specific language has no match

        Raises:
            ValueError: If count is not positive
        """
        if count <= 0:
            raise ValueError("Count must be positive")
        candidates = self.find_candidates(mood, language, count)
        return self.selector.select(candidates.songs, count)

    def respond(self, request: RecommendationRequest) -> RecommendationResponse:
        """Serve a request and report which tier answered it.

        Args:
            request: RecommendationRequest with mood, language and count

        Returns:
            RecommendationResponse with the selected songs and timing
        """
        start_time = time.perf_counter()
        mood = normalize_mood(request.mood)
        language = normalize_language(request.language)
        self.logger.info(
            f"Searching for mood={mood!r} language={language!r} "
            f"across {len(self.catalog)} songs"
        )
        candidates = self.find_candidates(mood, language, request.count)
        songs = self.selector.select(candidates.songs, request.count)
        if candidates.tier is MatchTier.NO_MATCH:
            self.logger.info(f"No songs for mood={mood!r} in language={language!r}")
        else:
            self.logger.info(
                f"Selected {len(songs)} of {len(candidates.songs)} candidates "
                f"(tier={candidates.tier.value}, languages={sorted({s.language for s in songs})})"
            )
        return RecommendationResponse(
            songs=songs,
            mood=mood,
            language=language,
            tier=candidates.tier,
            total_candidates=len(candidates.songs),
            processing_time_ms=(time.perf_counter() - start_time) * 1000
        )

    def find_candidates(self, mood: str, language: Optional[str],
                        count: int = DEFAULT_COUNT) -> CandidateSet:
        """Run the filter cascade without any randomness.

        Tiers run only while the candidate set is empty:

        1. exact mood and language (or any language)
        2. similar moods in the requested language
        3. nothing, when a specific language was requested
        4. the mood in any language, then the whole catalog

        Args:
            mood: Requested mood
            language: Requested language
            count: Requested result size, bounds the similar-mood expansion

        Returns:
            CandidateSet with de-duplicated songs and the deciding tier
        """
        mood = normalize_mood(mood)
        language = normalize_language(language)
        any_language = language == ANY_LANGUAGE

        pool = _CandidatePool()
        pool.add(self._matching(mood, language))
        if pool:
            return CandidateSet(pool.songs, MatchTier.EXACT)

        if not any_language:
            if self.logger.isEnabledFor(logging.DEBUG):
                in_language = self.catalog.filter(lambda s: s.language.casefold() == language)
                self.logger.debug(
                    f"No exact matches; {len(in_language)} songs in {language!r}, "
                    f"{len(self.catalog.by_mood(mood))} with mood {mood!r}"
                )
            limit = self.expansion_factor * count
            for similar_mood in self.similar_moods.get(mood, ()):
                pool.add(self._matching(normalize_mood(similar_mood), language))
                if len(pool) >= limit:
                    break
            if pool:
                return CandidateSet(pool.songs, MatchTier.SIMILAR_MOOD)
            return CandidateSet([], MatchTier.NO_MATCH)

        pool.add(self.catalog.by_mood(mood))
        if pool:
            return CandidateSet(pool.songs, MatchTier.MOOD_ANY_LANGUAGE)

        pool.add(self.catalog)
        return CandidateSet(pool.songs, MatchTier.CATALOG)

    def _matching(self, mood: str, language: str) -> List[Song]:
        if language == ANY_LANGUAGE:
            return self.catalog.by_mood(mood)
        return self.catalog.by_mood_and_language(mood, language)
