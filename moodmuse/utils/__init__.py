"""
Utility modules for MoodMuse.

Provides structured logging.
"""

from .logging import StructuredLogger, LogContext, get_logger

__all__ = ['StructuredLogger', 'LogContext', 'get_logger']
