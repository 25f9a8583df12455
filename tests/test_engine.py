"""Tests for the recommendation cascade."""

import pytest

from moodmuse.data.catalog import Catalog
from moodmuse.errors import EmptyQueryError
from moodmuse.recommendation.engine import RecommendationEngine
from moodmuse.recommendation.schemas import (
    ANY_LANGUAGE,
    MatchTier,
    RecommendationRequest,
    normalize_language
)
from moodmuse.recommendation.selector import RandomSelector


class TestExactTier:
    def test_single_match_is_returned(self, make_song) -> None:
        song = make_song("Sunny Day", "The Beams", "happy", "English")
        engine = RecommendationEngine(Catalog([song]))
        assert engine.recommend("happy", "English", 6) == [song]

    def test_inputs_are_normalized(self, seeded_engine) -> None:
        songs = seeded_engine.recommend("  HAPPY ", "english", 6)
        assert {s.title for s in songs} == {"Sunny Day", "Good Times"}

    def test_results_match_mood_and_language(self, seeded_engine) -> None:
        for song in seeded_engine.recommend("happy", "Korean", 6):
            assert (song.mood, song.language) == ("happy", "Korean")


class TestLanguageRestriction:
    def test_no_match_never_substitutes_other_languages(self, make_song) -> None:
        songs = [make_song(f"Dard {i}", "Arijit Singh", "sad", "Hindi") for i in range(10)]
        songs.append(make_song("Sunny Day", "The Beams", "happy", "English"))
        engine = RecommendationEngine(Catalog(songs))

        assert engine.recommend("happy", "Hindi", 6) == []
        assert engine.find_candidates("happy", "Hindi", 6).tier is MatchTier.NO_MATCH

    def test_similar_mood_in_same_language(self, seeded_engine) -> None:
        candidates = seeded_engine.find_candidates("happy", "Spanish", 6)
        assert candidates.tier is MatchTier.SIMILAR_MOOD
        assert [s.title for s in candidates.songs] == ["Despacito"]

    def test_similar_mood_expansion_stops_at_limit(self, make_song) -> None:
        songs = [make_song(f"Fast {i}", "Band", "energetic", "Korean") for i in range(3)]
        songs += [make_song(f"Slow {i}", "Band", "relaxed", "Korean") for i in range(2)]
        engine = RecommendationEngine(
            Catalog(songs),
            similar_moods={"happy": ("energetic", "relaxed")},
            expansion_factor=2
        )
        candidates = engine.find_candidates("happy", "Korean", 1)
        assert {s.mood for s in candidates.songs} == {"energetic"}

    def test_unknown_mood_in_specific_language(self, seeded_engine) -> None:
        assert seeded_engine.recommend("nostalgic", "English", 6) == []


class TestAnyLanguage:
    def test_spans_languages(self, make_song) -> None:
        songs = [
            make_song("Run", "A", "energetic", "English"),
            make_song("Fire", "BTS", "energetic", "Korean"),
            make_song("Despacito", "Luis Fonsi", "energetic", "Spanish"),
            make_song("Rain", "B", "sad", "English"),
        ]
        engine = RecommendationEngine(Catalog(songs))
        result = engine.recommend("energetic", "any", 6)
        assert {s.identity for s in result} == {s.identity for s in songs[:3]}

    @pytest.mark.parametrize("language", [None, "", "any", "Any Language", " ANY "])
    def test_aliases(self, language) -> None:
        assert normalize_language(language) == ANY_LANGUAGE

    def test_unknown_mood_falls_back_to_catalog(self, seeded_engine, mixed_catalog) -> None:
        candidates = seeded_engine.find_candidates("nostalgic", None, 6)
        assert candidates.tier is MatchTier.CATALOG
        assert len(candidates.songs) == len(mixed_catalog)
        assert len(seeded_engine.recommend("nostalgic", None, 6)) == 6

    def test_mood_tier(self, seeded_engine) -> None:
        assert seeded_engine.find_candidates("sad", "any").tier is MatchTier.EXACT


class TestSelection:
    def test_duplicates_are_removed(self, make_song) -> None:
        songs = [make_song("Same", "Artist", "happy", "English", genre=g) for g in ("pop", "rock", "jazz")]
        songs.append(make_song("Other", "Artist", "happy", "English"))
        engine = RecommendationEngine(Catalog(songs))
        result = engine.recommend("happy", "English", 10)
        assert len(result) == 2
        assert len({s.identity for s in result}) == 2

    @pytest.mark.parametrize("count", [1, 2, 5, 50])
    def test_length_never_exceeds_count(self, seeded_engine, count) -> None:
        for language in (None, "English", "Hindi", "Korean"):
            assert len(seeded_engine.recommend("happy", language, count)) <= count

    def test_seeded_selection_is_reproducible(self, mixed_catalog) -> None:
        first = RecommendationEngine(mixed_catalog, RandomSelector(seed=42)).recommend("nostalgic", None, 4)
        second = RecommendationEngine(mixed_catalog, RandomSelector(seed=42)).recommend("nostalgic", None, 4)
        assert first == second

    def test_count_must_be_positive(self, seeded_engine) -> None:
        with pytest.raises(ValueError):
            seeded_engine.recommend("happy", None, 0)


class TestRespond:
    def test_response_reports_tier(self, seeded_engine) -> None:
        response = seeded_engine.respond(RecommendationRequest(mood="Happy", language="English", count=1))
        assert response.mood == "happy"
        assert response.language == "english"
        assert response.tier is MatchTier.EXACT
        assert response.total_candidates == 2
        assert len(response.songs) == 1
        assert not response.no_match

    def test_no_match_response(self, seeded_engine) -> None:
        response = seeded_engine.respond(RecommendationRequest(mood="happy", language="Hindi"))
        assert response.songs == []
        assert response.no_match

    @pytest.mark.parametrize("mood", ["", "   ", None])
    def test_blank_mood_rejected(self, mood) -> None:
        with pytest.raises(EmptyQueryError):
            RecommendationRequest(mood=mood)

    def test_non_positive_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            RecommendationRequest(mood="happy", count=0)
