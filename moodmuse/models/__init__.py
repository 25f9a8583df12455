"""
Classification models for MoodMuse.

Handles mood classification, language detection and row classification.
"""

from .mood_classifier import MoodClassifier, MoodClassification, MOOD_VOCABULARY
from .language_detector import LanguageDetector, LanguageDetection, detect_language
from .row_classifier import RowClassifier, classify, parse_seeds, parse_float

__all__ = [
    'MoodClassifier',
    'MoodClassification',
    'MOOD_VOCABULARY',
    'LanguageDetector',
    'LanguageDetection',
    'detect_language',
    'RowClassifier',
    'classify',
    'parse_seeds',
    'parse_float'
]
