"""
In-memory song catalog for MoodMuse.

The catalog is built once from the dataset and never mutated afterwards.
"""
import logging
from collections import Counter
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .schemas import Song
from ..errors import MalformedRecordError
from ..models.row_classifier import RowClassifier

PROGRESS_INTERVAL = 10000


class Catalog:
    """
    Immutable ordered collection of classified songs.

    Provides read-only query primitives used by the recommendation engine
    and the API.
    """

    def __init__(self, songs: Iterable[Song] = ()):
        self._songs: Tuple[Song, ...] = tuple(songs)
        self.skipped_rows = 0

    @classmethod
    def build(cls,
              records: Iterable[Mapping[str, Any]],
              classifier: Optional[RowClassifier] = None,
              logger: Optional[logging.Logger] = None) -> 'Catalog':
        """Build a catalog with a single classification pass.

        Rows without a usable title or artist and rows that cannot be
        classified are skipped.

        Args:
            records: Raw dataset records
            classifier: RowClassifier to apply (optional)
            logger: Logger for progress reporting (optional)

        Returns:
            The populated Catalog
        """
        classifier = classifier or RowClassifier()
        log = logger or logging.getLogger(__name__)
        songs: List[Song] = []
        skipped = 0
        for index, record in enumerate(records):
            try:
                song = classifier.classify(record)
            except MalformedRecordError as e:
                log.debug(f"Skipping row {index}: {e}")
                skipped += 1
                continue
            if song.is_placeholder:
                skipped += 1
                continue
            songs.append(song)
            if len(songs) % PROGRESS_INTERVAL == 0:
                log.info(f"Loaded {len(songs)} songs...")

        catalog = cls(songs)
        catalog.skipped_rows = skipped
        return catalog

    @property
    def songs(self) -> Tuple[Song, ...]:
        return self._songs

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __bool__(self) -> bool:
        return bool(self._songs)

    def filter(self, predicate: Callable[[Song], bool]) -> List[Song]:
        return [song for song in self._songs if predicate(song)]

    def by_mood(self, mood: str) -> List[Song]:
        mood = mood.strip().casefold()
        return self.filter(lambda song: song.mood.casefold() == mood)

    def by_mood_and_language(self, mood: str, language: str) -> List[Song]:
        mood = mood.strip().casefold()
        language = language.strip().casefold()
        return self.filter(
            lambda song: song.mood.casefold() == mood and song.language.casefold() == language
        )

    def moods(self) -> List[str]:
        return sorted({song.mood for song in self._songs})

    def languages(self) -> List[str]:
        return sorted({song.language for song in self._songs})

    def mood_counts(self) -> Dict[str, int]:
        return dict(Counter(song.mood for song in self._songs))

    def language_counts(self) -> Dict[str, int]:
        return dict(Counter(song.language for song in self._songs))

    def language_samples(self, per_language: int = 3) -> Dict[str, List[Song]]:
        """First few songs seen for each language, in catalog order."""
        samples: Dict[str, List[Song]] = {}
        for song in self._songs:
            bucket = samples.setdefault(song.language, [])
            if len(bucket) < per_language:
                bucket.append(song)
        return samples

    def search(self, query: str, limit: int = 20) -> List[Song]:
        """Case-insensitive substring search over title, artist, language and mood.

        Args:
            query: Free-text query
            limit: Maximum number of results

        Returns:
            Matching songs in catalog order
        """
        needle = query.strip().casefold()
        if not needle or limit <= 0:
            return []
        results = []
        for song in self._songs:
            if (needle in song.title.casefold()
                    or needle in song.artist.casefold()
                    or needle in song.language.casefold()
                    or needle in song.mood.casefold()):
                results.append(song)
                if len(results) >= limit:
                    break
        return results
