"""Tests for mood classification and tag generation."""

import pytest

from moodmuse.models.mood_classifier import DEFAULT_MOOD, MoodClassifier


@pytest.fixture
def classifier() -> MoodClassifier:
    return MoodClassifier()


class TestKeywordRules:
    def test_first_matching_mood_wins(self, classifier) -> None:
        # "sad" is checked before "energetic"
        result = classifier.classify(["sad", "energetic"], 0.9, 0.9)
        assert result.mood == "sad"
        assert result.source == "keyword"

    def test_keywords_are_case_insensitive(self, classifier) -> None:
        assert classifier.classify(["HAPPY"]).mood == "happy"

    def test_aggressive_resolves_to_energetic(self, classifier) -> None:
        assert classifier.classify(["aggressive"]).mood == "energetic"

    @pytest.mark.parametrize("seed,mood", [
        ("uplifting", "happy"),
        ("heartbreak", "sad"),
        ("powerful", "energetic"),
        ("chill", "relaxed"),
        ("love", "romantic"),
        ("rebellious", "angry"),
    ])
    def test_seed_sets(self, classifier, seed, mood) -> None:
        assert classifier.classify([seed]).mood == mood

    def test_keywords_override_scores(self, classifier) -> None:
        assert classifier.classify(["calm"], 0.9, 0.95).mood == "relaxed"


class TestNumericRules:
    @pytest.mark.parametrize("valence,arousal,mood", [
        (0.8, 0.7, "happy"),
        (0.3, 0.4, "sad"),
        (0.5, 0.8, "energetic"),
        (0.5, 0.3, "relaxed"),
        (0.6, 0.5, "romantic"),
        (0.9, 0.5, DEFAULT_MOOD),
    ])
    def test_threshold_rules(self, classifier, valence, arousal, mood) -> None:
        result = classifier.classify([], valence, arousal)
        assert result.mood == mood
        assert result.source == "numeric"

    def test_missing_scores_are_neutral(self, classifier) -> None:
        result = classifier.classify(["unrelated"], None, None)
        assert result.valence == 0.5
        assert result.arousal == 0.5
        assert result.mood == DEFAULT_MOOD

    def test_zero_is_a_real_score(self, classifier) -> None:
        result = classifier.classify([], 0.0, 0.0)
        assert result.valence == 0.0
        assert result.mood == "sad"

    def test_configured_thresholds(self) -> None:
        classifier = MoodClassifier({'mood_thresholds': {'happy_valence': 0.5}})
        assert classifier.classify([], 0.6, 0.7).mood == "happy"
        assert classifier.thresholds['sad_valence'] == 0.4


class TestTags:
    def test_seeds_come_first(self, classifier) -> None:
        assert classifier.generate_tags(["dark", "moody"]) == ["dark", "moody"]

    def test_derived_tags_appended(self, classifier) -> None:
        assert classifier.generate_tags(["aggressive"]) == ["aggressive", "intense", "powerful"]

    def test_derived_tags_follow_table_order(self, classifier) -> None:
        assert classifier.generate_tags(["sexy", "fun"]) == ["sexy", "fun", "upbeat", "joyful", "sensual"]

    def test_no_duplicate_derived_tags(self, classifier) -> None:
        assert classifier.generate_tags(["aggressive", "intense"]) == ["aggressive", "intense", "powerful"]

    def test_truncated_to_max_tags(self, classifier) -> None:
        seeds = ["a", "b", "c", "d", "e", "f", "g"]
        assert classifier.generate_tags(seeds) == ["a", "b", "c", "d", "e"]

    def test_seeds_beyond_limit_still_derive(self) -> None:
        classifier = MoodClassifier({'max_tags': 3})
        assert classifier.generate_tags(["x", "energetic"]) == ["x", "energetic", "high-energy"]

    def test_empty_seeds(self, classifier) -> None:
        assert classifier.generate_tags([]) == []
