"""
CipherGame Data Models
=======================

Pydantic models for the Caesar-shift game session: the outcome of a
guess, the running guess statistics, and the two session states.

The session state is a tagged union of :class:`SessionOff` and
:class:`SessionOn`; only the ON variant carries a ciphertext, so a stored
word without an active session cannot be represented.
"""

from __future__ import annotations

import enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Comparison(str, enum.Enum):
    """Result of comparing a guess against the secret shift."""

    CORRECT = "correct"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"

    @classmethod
    def compare(cls, guess: int, shift: int) -> Comparison:
        """Classify *guess* against the secret *shift*."""
        if guess == shift:
            return cls.CORRECT
        if guess < shift:
            return cls.TOO_LOW
        return cls.TOO_HIGH

    def message(self, guess: int) -> str:
        """Player-facing sentence for this outcome."""
        if self is Comparison.CORRECT:
            return f"Correct! {guess} is the shift value."
        if self is Comparison.TOO_LOW:
            return f"{guess} is too low. Guess again."
        return f"{guess} is too high. Guess again."


# ===================================================================== #
#  Guess Statistics
# ===================================================================== #


def _truncated_mean(total: int, count: int) -> int:
    """Integer mean rounded toward zero, as C-style integer division does."""
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


class GuessStatistics(BaseModel):
    """Running statistics over every guess made in the current session.

    Attributes:
        count: Total number of guesses.
        total: Sum of all guessed values.
        average: ``total / count`` truncated toward zero (0 with no guesses).
        high_count: Guesses above the shift.
        low_count: Guesses below the shift.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0)
    total: int = 0
    average: int = 0
    high_count: int = Field(default=0, ge=0)
    low_count: int = Field(default=0, ge=0)

    @property
    def exact_count(self) -> int:
        """Number of guesses that matched the shift."""
        return self.count - self.high_count - self.low_count

    def record(self, guess: int, shift: int) -> GuessStatistics:
        """Return new statistics with *guess* folded in."""
        count = self.count + 1
        total = self.total + guess
        outcome = Comparison.compare(guess, shift)
        return GuessStatistics(
            count=count,
            total=total,
            average=_truncated_mean(total, count),
            high_count=self.high_count + int(outcome is Comparison.TOO_HIGH),
            low_count=self.low_count + int(outcome is Comparison.TOO_LOW),
        )


# ===================================================================== #
#  Session State
# ===================================================================== #


class SessionOff(BaseModel):
    """No word is pending; a new word may be encoded."""

    model_config = ConfigDict(frozen=True)

    status: Literal["off"] = "off"

    @property
    def active(self) -> bool:
        return False


class SessionOn(BaseModel):
    """A ciphertext is stored and awaits decoding.

    Attributes:
        shift_value: Shift used to produce *encoded_word*.
        encoded_word: The stored ciphertext.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["on"] = "on"
    shift_value: int = Field(..., ge=1)
    encoded_word: str

    @property
    def active(self) -> bool:
        return True


SessionState = Union[SessionOff, SessionOn]
