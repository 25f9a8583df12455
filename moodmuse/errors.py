"""
Error types for MoodMuse.
"""


class MoodMuseError(Exception):
    """Base class for MoodMuse errors."""
    pass


class MalformedRecordError(MoodMuseError):
    """Raised when a single dataset row cannot be classified."""
    pass


class EmptyQueryError(MoodMuseError, ValueError):
    """Raised when a recommendation is requested without a mood."""
    pass


class DatasetUnavailableError(MoodMuseError):
    """Raised when the song dataset cannot be located, read or yields no songs."""
    pass
