"""Tests for language detection."""

import pytest

from moodmuse.models.language_detector import LanguageDetector, detect_language


@pytest.fixture
def detector() -> LanguageDetector:
    return LanguageDetector()


class TestArtistTier:
    def test_known_korean_artist(self, detector) -> None:
        result = detector.detect("Dynamite", "BTS", "pop")
        assert result.language == "Korean"
        assert result.source == "artist"

    def test_substring_and_case_insensitive(self, detector) -> None:
        assert detector.detect("Hips Don't Lie", "SHAKIRA feat. Wyclef", "").language == "Spanish"

    def test_artist_beats_script(self, detector) -> None:
        # Hangul title, but the artist is on the Spanish list
        result = detector.detect("사랑해", "Shakira", "")
        assert result.language == "Spanish"
        assert result.source == "artist"

    def test_artist_beats_genre(self, detector) -> None:
        assert detector.detect("Song", "Rammstein", "k-pop").language == "German"

    def test_declaration_order_breaks_ties(self, detector) -> None:
        # "iu" is listed under Korean, "lisa" under Japanese; Korean comes first
        assert detector.detect("Duet", "Lisa & IU", "").language == "Korean"


class TestGenreTier:
    def test_genre_keyword(self, detector) -> None:
        result = detector.detect("Song", "Mono Lake", "K-Pop")
        assert result.language == "Korean"
        assert result.source == "genre"

    def test_reggaeton_is_spanish(self, detector) -> None:
        assert detector.detect("Song", "Mono Lake", "reggaeton").language == "Spanish"

    def test_genre_beats_script(self, detector) -> None:
        assert detector.detect("Привет", "Mono Lake", "bollywood").language == "Hindi"


class TestScriptTier:
    @pytest.mark.parametrize("title,language", [
        ("안녕하세요", "Korean"),
        ("こんにちは", "Japanese"),
        ("東京", "Japanese"),
        ("नमस्ते", "Hindi"),
        ("مرحبا", "Arabic"),
        ("Привет", "Russian"),
        ("สวัสดี", "Thai"),
        ("γεια σου", "Greek"),
    ])
    def test_script_in_title(self, detector, title, language) -> None:
        result = detector.detect(title, "Mono Lake", "")
        assert result.language == language
        assert result.source == "script"

    def test_script_in_artist(self, detector) -> None:
        assert detector.detect("Track 1", "Кино", "").language == "Russian"


class TestEnglishFallback:
    def test_common_words(self, detector) -> None:
        result = detector.detect("The Night We Met", "Lord Huron", "indie")
        assert result.language == "English"
        assert result.source == "english_words"

    def test_whole_words_only(self, detector) -> None:
        assert detector.english_word_count("theory") == 0
        assert detector.english_word_count("the theory") == 1

    def test_ascii_title(self, detector) -> None:
        result = detector.detect("Xylo", "Mono Lake", "")
        assert result.language == "English"
        assert result.source == "ascii_title"

    def test_default(self, detector) -> None:
        result = detector.detect("Café Olé", "Mono Lake", "")
        assert result.language == "English"
        assert result.source == "default"

    def test_missing_everything(self, detector) -> None:
        result = detector.detect(None, None, None)
        assert result.language == "English"
        assert result.source == "default"


def test_shortcut_returns_language_name() -> None:
    assert detect_language("Tum Hi Ho", "Arijit Singh", "") == "Hindi"
