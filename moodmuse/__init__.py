"""
MoodMuse: mood and language based song recommendations.
"""

__version__ = "1.0.0"
