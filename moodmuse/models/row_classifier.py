"""
Row classification for MoodMuse.

Turns one raw dataset record into a normalized Song. Classification of the
mood, language and tags depends only on the record itself.
"""
import ast
import logging
import math
import re
import uuid
from typing import Any, Iterable, List, Mapping, Optional

from ..data.schemas import Song, AudioFeatures, UNKNOWN_TITLE, UNKNOWN_ARTIST, UNKNOWN_GENRE
from ..errors import MalformedRecordError
from .language_detector import LanguageDetector
from .mood_classifier import MoodClassifier

logger = logging.getLogger(__name__)

_SEED_DELIMITERS = re.compile(r"[,;|]")
_QUOTES = "'\""

FEATURE_DEFAULTS = AudioFeatures()


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _text(value: Any) -> str:
    if _is_missing(value):
        return ""
    return str(value).strip()


def _literal_tokens(items: Iterable[Any]) -> List[str]:
    tokens = (str(item).strip() for item in items if not _is_missing(item))
    return [token for token in tokens if token]


def _clean_tokens(items: Iterable[Any]) -> List[str]:
    tokens = []
    for item in items:
        if _is_missing(item):
            continue
        token = str(item).strip()
        if token[:1] in _QUOTES and token[:1] != token[-1:]:
            raise ValueError(f"unterminated quote in {token!r}")
        token = token.strip(_QUOTES).strip()
        if token:
            tokens.append(token)
    return tokens


def _parse_seed_text(text: str) -> List[str]:
    opened, closed = text.startswith("["), text.endswith("]")
    if opened != closed:
        raise ValueError("unbalanced brackets")
    if opened:
        body = text[1:-1]
        if "[" in body or "]" in body:
            raise ValueError("nested brackets")
        try:
            value = ast.literal_eval(text)
        except (ValueError, SyntaxError):
            value = None
        if isinstance(value, (list, tuple)):
            return _literal_tokens(value)
        # Bare words such as [sad, dark] are not Python literals
        text = body
    return _clean_tokens(_SEED_DELIMITERS.split(text))


def parse_seeds(raw: Any) -> List[str]:
    """Parse the seeds field of a dataset row.

    Accepts bracketed lists (``"['sad', 'dark']"``, ``"[sad, dark]"``) and
    plain delimited strings (``"sad, dark"``). Malformed input yields an
    empty list instead of raising.

    Args:
        raw: Raw seeds value from the dataset

    Returns:
        List of trimmed, non-empty seed tokens
    """
    if _is_missing(raw):
        return []
    if isinstance(raw, (list, tuple)):
        return _literal_tokens(raw)
    text = str(raw).strip()
    if not text:
        return []
    try:
        return _parse_seed_text(text)
    except ValueError as e:
        logger.debug(f"Ignoring malformed seeds {text!r}: {e}")
        return []


def parse_float(raw: Any) -> Optional[float]:
    """Parse a numeric field, returning None when it is missing or invalid."""
    if _is_missing(raw):
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def synthesize_external_id() -> str:
    """Random stand-in for a missing platform id. Not guaranteed unique."""
    return uuid.uuid4().hex[:22]


class RowClassifier:
    """Converts raw dataset records into Song objects."""

    def __init__(self,
                 mood_classifier: Optional[MoodClassifier] = None,
                 language_detector: Optional[LanguageDetector] = None):
        """Initialize the row classifier.

        Args:
            mood_classifier: Classifier for moods and tags (optional)
            language_detector: Detector for languages (optional)
        """
        self.mood_classifier = mood_classifier or MoodClassifier()
        self.language_detector = language_detector or LanguageDetector()

    def classify(self, record: Mapping[str, Any]) -> Song:
        """Classify one dataset record.

        Missing fields fall back to defaults; a record without a title or
        artist produces a placeholder song that the Catalog skips.

        Args:
            record: Mapping with the dataset's named fields (track, artist,
                genre, seeds, valence_tags, arousal_tags, spotify_id)

        Returns:
            The classified Song

        Raises:
            MalformedRecordError: If the record is not a mapping
        """
        if not isinstance(record, Mapping):
            raise MalformedRecordError(
                f"Expected a mapping record, got {type(record).__name__}"
            )

        title = _text(record.get('track'))
        artist = _text(record.get('artist'))
        genre = _text(record.get('genre'))
        seeds = parse_seeds(record.get('seeds'))
        valence = parse_float(record.get('valence_tags'))
        arousal = parse_float(record.get('arousal_tags'))

        mood = self.mood_classifier.classify(seeds, valence, arousal)
        language = self.language_detector.detect(title, artist, genre)

        return Song(
            title=title or UNKNOWN_TITLE,
            artist=artist or UNKNOWN_ARTIST,
            mood=mood.mood,
            language=language.language,
            genre=genre or UNKNOWN_GENRE,
            tags=tuple(self.mood_classifier.generate_tags(seeds)),
            external_id=_text(record.get('spotify_id')) or synthesize_external_id(),
            features=self._features(record, valence, arousal),
            seeds=tuple(seeds)
        )

    @staticmethod
    def _features(record: Mapping[str, Any], valence: Optional[float],
                  arousal: Optional[float]) -> AudioFeatures:
        def numeric(key: str, default: float) -> float:
            value = parse_float(record.get(key))
            return default if value is None else value

        return AudioFeatures(
            valence=FEATURE_DEFAULTS.valence if valence is None else valence,
            energy=FEATURE_DEFAULTS.energy if arousal is None else arousal,
            danceability=numeric('danceability', FEATURE_DEFAULTS.danceability),
            acousticness=numeric('acousticness', FEATURE_DEFAULTS.acousticness),
            tempo=numeric('tempo', FEATURE_DEFAULTS.tempo),
            loudness=numeric('loudness', FEATURE_DEFAULTS.loudness)
        )


_default_classifier: Optional[RowClassifier] = None


def classify(record: Mapping[str, Any]) -> Song:
    """Classify a record with a default RowClassifier."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = RowClassifier()
    return _default_classifier.classify(record)
