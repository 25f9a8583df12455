"""
Recommendation module for MoodMuse.

This module provides mood and language based song recommendation,
including the filter cascade, random selection and response composition.
"""

from .engine import RecommendationEngine, SIMILAR_MOODS
from .selector import RandomSelector
from .composer import ResponseComposer, ComposedRecommendation
from .schemas import (
    ANY_LANGUAGE,
    MatchTier,
    CandidateSet,
    RecommendationRequest,
    RecommendationResponse
)

__all__ = [
    'RecommendationEngine',
    'SIMILAR_MOODS',
    'RandomSelector',
    'ResponseComposer',
    'ComposedRecommendation',
    'ANY_LANGUAGE',
    'MatchTier',
    'CandidateSet',
    'RecommendationRequest',
    'RecommendationResponse'
]
