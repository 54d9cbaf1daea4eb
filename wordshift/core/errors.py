"""
CipherGame Errors
==================

Closed error hierarchy for the game session. Both kinds are recoverable:
the session is left exactly as it was before the failing call.
"""

from __future__ import annotations


class CipherGameError(Exception):
    """Base class for every error raised by a :class:`CipherGame`."""

    kind: str = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CipherGameError):
    """Input failed a static precondition (e.g. word too short)."""

    kind = "validation"


class StateError(CipherGameError):
    """Operation called in the wrong lifecycle state."""

    kind = "state"
