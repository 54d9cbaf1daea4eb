"""
WordShift Core Module
======================

Data models and error types for the game session.  The session itself
lives in :mod:`wordshift.core.engine`.
"""

from wordshift.core.errors import CipherGameError, StateError, ValidationError
from wordshift.core.models import (
    Comparison,
    GuessStatistics,
    SessionOff,
    SessionOn,
    SessionState,
)

__all__ = [
    "CipherGameError",
    "Comparison",
    "GuessStatistics",
    "SessionOff",
    "SessionOn",
    "SessionState",
    "StateError",
    "ValidationError",
]
