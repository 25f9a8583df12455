"""
Language detection for dataset rows.

Detection runs through ordered tiers and the first match wins:
known artists, genre keywords, writing script, English word heuristics,
then the English default. Lookup tables are ordered tuples so that
tie-breaks follow declaration order.
"""
import re
from dataclasses import dataclass
from typing import Optional, Pattern, Sequence, Tuple

ENGLISH = "English"

ARTIST_LANGUAGES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Hindi", (
        "a.r. rahman", "arijit singh", "shreya ghoshal", "sunidhi chauhan",
        "kishore kumar", "lata mangeshkar", "raftaar", "badshah", "diljit",
        "neha kakkar", "tony kakkar", "jassie gill", "guru randhawa", "vishal",
        "aastha", "shankar", "sonu nigam", "kumar sanu", "alka yagnik",
    )),
    ("Korean", (
        "bts", "blackpink", "exo", "twice", "red velvet", "iu", "bigbang",
        "seventeen", "nct", "got7", "monsta x", "stray kids", "itzy", "ateez",
    )),
    ("Japanese", (
        "yoasobi", "kenshi yonezu", "hikaru utada", "aimer", "lisa",
        "official hige dandism", "vaundy", "eve", "ado", "kenshi",
        "radwimps", "babymetal", "one ok rock",
    )),
    ("Spanish", (
        "bad bunny", "j balvin", "shakira", "maluma", "ozuna", "daddy yankee",
        "anuel aa", "karol g", "rosalía", "enrique iglesias", "ricky martin",
        "luis fonsi", "j lo", "jennifer lopez", "marc anthony",
    )),
    ("French", (
        "stromae", "indila", "maître gims", "zaz", "christophe maé",
        "jain", "angele", "soprano", "black m",
    )),
    ("German", (
        "rammstein", "tokio hotel", "nena", "helene fischer", "mark forster",
    )),
    ("Italian", (
        "andrea bocelli", "laura pausini", "eros ramazzotti", "tiziano ferro",
    )),
)

GENRE_LANGUAGES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Hindi", ("bollywood", "hindustani", "indian pop", "desi hip hop", "punjabi", "tamil", "telugu")),
    ("Korean", ("k-pop", "korean pop", "k-rap", "korean hip hop")),
    ("Japanese", ("j-pop", "japanese pop", "anime", "j-rock", "japanese rock")),
    ("Spanish", ("latin", "reggaeton", "salsa", "bachata", "flamenco", "mexican", "tango")),
    ("French", ("french pop", "chanson française", "french hip hop")),
    ("German", ("german pop", "schlager", "german rock")),
    ("Italian", ("italian pop", "opera italiana", "italian rock")),
)

SCRIPT_LANGUAGES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("Korean", re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7a3]")),
    ("Japanese", re.compile(r"[\u4e00-\u9faf\u3041-\u3096\u30a1-\u30fa]")),
    ("Hindi", re.compile(r"[\u0900-\u097f]")),
    ("Arabic", re.compile(r"[\u0600-\u06ff]")),
    ("Russian", re.compile(r"[\u0400-\u04ff]")),
    # Ideographs past the Japanese range above
    ("Chinese", re.compile(r"[\u4e00-\u9fff]")),
    ("Thai", re.compile(r"[\u0e00-\u0e7f]")),
    ("Greek", re.compile(r"[\u0370-\u03ff]")),
)

COMMON_ENGLISH_WORDS: Tuple[str, ...] = (
    "the", "and", "you", "love", "baby", "night", "day", "time", "heart",
    "eyes", "hands", "world", "life", "dream", "fire", "water", "sky",
    "girl", "boy", "man", "woman", "city", "street", "home", "house",
)

_ENGLISH_WORD_PATTERNS = tuple(
    re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE) for word in COMMON_ENGLISH_WORDS
)
_ASCII_TITLE = re.compile(r"^[a-zA-Z0-9\s\-'!.?,&]+$")


@dataclass(frozen=True)
class LanguageDetection:
    """Detected language and the tier that produced it."""
    language: str
    source: str


def _match_substring(text: str, table: Sequence[Tuple[str, Tuple[str, ...]]]) -> Optional[str]:
    if not text:
        return None
    for language, needles in table:
        for needle in needles:
            if needle in text:
                return language
    return None


class LanguageDetector:
    """Classifies a song's language from its title, artist and genre."""

    def __init__(self,
                 artist_languages=ARTIST_LANGUAGES,
                 genre_languages=GENRE_LANGUAGES,
                 script_languages=SCRIPT_LANGUAGES):
        self.artist_languages = artist_languages
        self.genre_languages = genre_languages
        self.script_languages = script_languages

    def detect(self, title: str, artist: str, genre: str) -> LanguageDetection:
        """Detect the language of a song.

        Args:
            title: Song title
            artist: Song artist
            genre: Genre string

        Returns:
            LanguageDetection with the language and the deciding tier
        """
        title = (title or "").strip().lower()
        artist = (artist or "").strip().lower()
        genre = (genre or "").strip().lower()

        language = _match_substring(artist, self.artist_languages)
        if language:
            return LanguageDetection(language, "artist")

        language = _match_substring(genre, self.genre_languages)
        if language:
            return LanguageDetection(language, "genre")

        for language, pattern in self.script_languages:
            if pattern.search(title) or pattern.search(artist):
                return LanguageDetection(language, "script")

        if self.english_word_count(title) >= 1:
            return LanguageDetection(ENGLISH, "english_words")

        if title and _ASCII_TITLE.match(title):
            return LanguageDetection(ENGLISH, "ascii_title")

        return LanguageDetection(ENGLISH, "default")

    @staticmethod
    def english_word_count(title: str) -> int:
        return sum(1 for pattern in _ENGLISH_WORD_PATTERNS if pattern.search(title))


_default_detector = LanguageDetector()


def detect_language(title: str, artist: str, genre: str) -> str:
    """Shortcut returning only the detected language name."""
    return _default_detector.detect(title, artist, genre).language
