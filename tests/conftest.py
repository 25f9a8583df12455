"""Shared fixtures for the MoodMuse test suite."""

import pandas as pd
import pytest

from moodmuse.data.catalog import Catalog
from moodmuse.data.schemas import Song
from moodmuse.recommendation.engine import RecommendationEngine
from moodmuse.recommendation.selector import RandomSelector


def _song(title: str, artist: str, mood: str = "happy", language: str = "English", **kwargs) -> Song:
    return Song(title=title, artist=artist, mood=mood, language=language, **kwargs)


@pytest.fixture
def make_song():
    """Factory for Song objects with sensible defaults."""
    return _song


@pytest.fixture
def mixed_catalog() -> Catalog:
    """Small catalog spanning several moods and languages."""
    return Catalog([
        _song("Sunny Day", "The Beams", "happy", "English"),
        _song("Good Times", "The Beams", "happy", "English"),
        _song("Rain Again", "Grey Sky", "sad", "English"),
        _song("Tum Hi Ho", "Arijit Singh", "romantic", "Hindi"),
        _song("Channa Mereya", "Arijit Singh", "sad", "Hindi"),
        _song("Dynamite", "BTS", "happy", "Korean"),
        _song("Fire", "BTS", "energetic", "Korean"),
        _song("Despacito", "Luis Fonsi", "energetic", "Spanish"),
        _song("Calm Waters", "Lake Drift", "relaxed", "English"),
    ])


@pytest.fixture
def seeded_engine(mixed_catalog):
    return RecommendationEngine(mixed_catalog, RandomSelector(seed=7))


MUSE_ROWS = [
    {'track': "Dynamite", 'artist': "BTS", 'genre': "k-pop", 'seeds': "['happy', 'fun']",
     'valence_tags': "0.8", 'arousal_tags': "0.7", 'spotify_id': "0t1kP63rueHleOhQkYSXFY"},
    {'track': "Tum Hi Ho", 'artist': "Arijit Singh", 'genre': "bollywood", 'seeds': "['romantic', 'love']",
     'valence_tags': "0.6", 'arousal_tags': "0.4", 'spotify_id': "56zZ48jdyY2oDXHVnwg5Di"},
    {'track': "Someone Like You", 'artist': "Adele", 'genre': "pop", 'seeds': "['sad', 'heartbreak']",
     'valence_tags': "0.2", 'arousal_tags': "0.3", 'spotify_id': ""},
    {'track': "Happy", 'artist': "Pharrell Williams", 'genre': "pop", 'seeds': "[happy",
     'valence_tags': "0.9", 'arousal_tags': "0.8", 'spotify_id': "60nZcImufyMA1MKQY3dcCH"},
    {'track': "", 'artist': "Nameless", 'genre': "", 'seeds': "",
     'valence_tags': "", 'arousal_tags': "", 'spotify_id': ""},
]


@pytest.fixture
def dataset_csv(tmp_path):
    """Small muse-style CSV written to a temporary directory."""
    path = tmp_path / "muse_v3.csv"
    pd.DataFrame(MUSE_ROWS).to_csv(path, index=False)
    return path
