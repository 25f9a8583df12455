"""Tests for dataset row classification."""

import math

import pytest

from moodmuse.data.schemas import UNKNOWN_ARTIST, UNKNOWN_GENRE, UNKNOWN_TITLE, AudioFeatures
from moodmuse.errors import MalformedRecordError
from moodmuse.models.mood_classifier import MoodClassifier
from moodmuse.models.row_classifier import RowClassifier, classify, parse_float, parse_seeds


def muse_row(**overrides):
    row = {
        'track': "Dynamite",
        'artist': "BTS",
        'genre': "k-pop",
        'seeds': "['happy']",
        'valence_tags': "0.8",
        'arousal_tags': "0.7",
        'spotify_id': "0t1kP63rueHleOhQkYSXFY",
    }
    row.update(overrides)
    return row


class TestParseSeeds:
    @pytest.mark.parametrize("raw,expected", [
        ("['sad', 'dark']", ["sad", "dark"]),
        ('["sad", "dark"]', ["sad", "dark"]),
        ("[sad, dark]", ["sad", "dark"]),
        ("sad, dark", ["sad", "dark"]),
        ("sad; dark | calm", ["sad", "dark", "calm"]),
        ("['happy', ]", ["happy"]),
        ("  happy  ", ["happy"]),
        ("[]", []),
        ("", []),
    ])
    def test_accepted_forms(self, raw, expected) -> None:
        assert parse_seeds(raw) == expected

    @pytest.mark.parametrize("raw", ["[happy", "happy]", "[[happy]]", "['happy, sad]"])
    def test_malformed_input_yields_empty(self, raw) -> None:
        assert parse_seeds(raw) == []

    def test_missing_values(self) -> None:
        assert parse_seeds(None) == []
        assert parse_seeds(float("nan")) == []

    def test_list_input(self) -> None:
        assert parse_seeds(["happy", " ", "sad"]) == ["happy", "sad"]

    def test_literal_element_with_leading_apostrophe(self) -> None:
        assert parse_seeds("[\"'90s\", 'happy']") == ["'90s", "happy"]


class TestParseFloat:
    def test_valid_numbers(self) -> None:
        assert parse_float("0.7") == 0.7
        assert parse_float(" 0 ") == 0.0
        assert parse_float(1) == 1.0

    @pytest.mark.parametrize("raw", [None, "", "abc", "nan", "inf", float("nan")])
    def test_invalid_numbers(self, raw) -> None:
        assert parse_float(raw) is None


class TestRowClassifier:
    def test_complete_row(self) -> None:
        song = RowClassifier().classify(muse_row())
        assert song.title == "Dynamite"
        assert song.artist == "BTS"
        assert song.mood == "happy"
        assert song.language == "Korean"
        assert song.genre == "k-pop"
        assert song.tags == ("happy",)
        assert song.external_id == "0t1kP63rueHleOhQkYSXFY"
        assert song.features.valence == 0.8
        assert song.features.energy == 0.7

    def test_classification_is_deterministic(self) -> None:
        classifier = RowClassifier()
        first = classifier.classify(muse_row(spotify_id=""))
        second = classifier.classify(muse_row(spotify_id=""))
        assert (first.mood, first.language, first.tags) == (second.mood, second.language, second.tags)

    def test_malformed_seeds_fall_back_to_scores(self) -> None:
        song = RowClassifier().classify(muse_row(seeds="[happy", valence_tags="0.2", arousal_tags="0.3"))
        assert song.seeds == ()
        assert song.tags == ()
        assert song.mood == "sad"

    def test_unparseable_scores_use_defaults(self) -> None:
        song = RowClassifier().classify(muse_row(seeds="", valence_tags="n/a", arousal_tags=""))
        assert song.features.valence == 0.5
        assert song.features.energy == 0.5
        assert song.mood == "energetic"

    def test_empty_record(self) -> None:
        song = RowClassifier().classify({})
        assert song.title == UNKNOWN_TITLE
        assert song.artist == UNKNOWN_ARTIST
        assert song.genre == UNKNOWN_GENRE
        assert song.mood == "energetic"
        assert song.language == "English"
        assert song.tags == ()
        assert len(song.external_id) == 22
        assert song.features == AudioFeatures()
        assert song.is_placeholder

    def test_missing_spotify_id_is_synthesized(self) -> None:
        song = RowClassifier().classify(muse_row(spotify_id=None))
        assert len(song.external_id) == 22

    def test_nan_cells_are_missing(self) -> None:
        song = RowClassifier().classify(muse_row(genre=math.nan, seeds=math.nan))
        assert song.genre == UNKNOWN_GENRE
        assert song.seeds == ()

    def test_optional_feature_columns(self) -> None:
        song = RowClassifier().classify(muse_row(tempo="98.5", danceability="0.9", loudness="bad"))
        assert song.features.tempo == 98.5
        assert song.features.danceability == 0.9
        assert song.features.loudness == -6.0

    def test_artist_decides_language_over_script(self) -> None:
        song = RowClassifier().classify(muse_row(track="사랑해", artist="Shakira", genre=""))
        assert song.language == "Spanish"

    def test_apostrophe_seed_keeps_keyword_mood(self) -> None:
        song = RowClassifier().classify(muse_row(seeds="[\"'90s\", 'happy']", valence_tags="0.2", arousal_tags="0.3"))
        assert song.seeds == ("'90s", "happy")
        assert song.mood == "happy"

    def test_tag_limit_comes_from_mood_classifier(self) -> None:
        classifier = RowClassifier(MoodClassifier({'max_tags': 2}))
        song = classifier.classify(muse_row(seeds="['happy', 'fun', 'bright']"))
        assert song.tags == ("happy", "fun")

    def test_non_mapping_record(self) -> None:
        with pytest.raises(MalformedRecordError):
            RowClassifier().classify(["Dynamite", "BTS"])

    def test_module_level_shortcut(self) -> None:
        assert classify(muse_row()).mood == "happy"
