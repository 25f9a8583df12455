"""
Deep-link construction for external music platforms.

Links are always derived from title and artist; nothing here talks to the
platforms themselves.
"""
from urllib.parse import quote

from ..config.settings import YOUTUBE_SEARCH_TEMPLATE

SPOTIFY_SEARCH_TEMPLATE = "https://open.spotify.com/search/{query}"

# Same reserved set as JavaScript's encodeURIComponent
_SAFE_CHARS = "!~*'()"


def encode_query(text: str) -> str:
    return quote(text, safe=_SAFE_CHARS)


def build_search_url(title: str, artist: str, template: str = YOUTUBE_SEARCH_TEMPLATE) -> str:
    """Build a video search URL for a song.

    Args:
        title: Song title
        artist: Song artist
        template: URL template containing a ``{query}`` placeholder

    Returns:
        The template with the URL-encoded query substituted
    """
    query = encode_query(f"{title} {artist} official music video")
    return template.format(query=query)


def build_spotify_search_url(title: str, artist: str) -> str:
    return SPOTIFY_SEARCH_TEMPLATE.format(query=encode_query(f"{title} {artist}"))
