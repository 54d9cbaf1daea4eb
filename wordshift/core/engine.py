"""
CipherGame Engine
==================

The game session: encode one word with a secret Caesar shift, let the
player guess the shift, keep guess statistics, and decode the word again.

Lifecycle::

    OFF --encode(word)--> ON --decode()--> OFF
     ^                    |
     +------reset()-------+

A fresh shift is drawn on construction and on every reset, including the
reset that follows a successful decode.  Every operation either completes
its transition or raises before touching any state.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol

from shared.config import GameConfig
from shared.logger import WordShiftLogger

from wordshift.ciphers.caesar import shift_text
from wordshift.core.errors import StateError, ValidationError
from wordshift.core.models import (
    Comparison,
    GuessStatistics,
    SessionOff,
    SessionOn,
    SessionState,
)


class RandomSource(Protocol):
    """Anything with ``random.Random.randint`` semantics."""

    def randint(self, a: int, b: int) -> int: ...


_default_rng = random.Random()


class CipherGame:
    """Single-word Caesar-shift guessing session.

    Usage::

        game = CipherGame(rng=random.Random(7))
        ciphertext = game.encode("Hello")
        game.guess(4)                # Comparison.TOO_LOW, ...
        game.statistics().count      # 1
        game.decode()                # 'Hello', session is OFF again

    Args:
        word: Optional word to encode immediately.
        rng: Random source used to draw the shift. Defaults to a
            process-wide :class:`random.Random`.
        config: Game bounds; defaults to a 4-character minimum word and a
            shift range of 1-9.
        logger: Logger for lifecycle events. Secrets (the word and the
            shift) are never logged.

    Raises:
        ValidationError: If *word* is given and is too short.
    """

    def __init__(
        self,
        word: Optional[str] = None,
        *,
        rng: Optional[RandomSource] = None,
        config: Optional[GameConfig] = None,
        logger: Optional[WordShiftLogger] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.logger = logger or WordShiftLogger("engine")
        self._rng: RandomSource = rng if rng is not None else _default_rng

        self._shift: int = 0
        self._state: SessionState = SessionOff()
        self._stats = GuessStatistics()
        self.reset()

        if word is not None:
            self.encode(word)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> SessionState:
        """Current session state (:class:`SessionOff` or :class:`SessionOn`)."""
        return self._state

    @property
    def active(self) -> bool:
        """``True`` while a ciphertext is waiting to be decoded."""
        return self._state.active

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    def encode(self, word: str) -> str:
        """Encode *word* with the session shift and store the ciphertext.

        Any characters are accepted; only ASCII letters are shifted.

        Raises:
            StateError: If a word is already stored.
            ValidationError: If *word* is shorter than the configured minimum.
        """
        with self.logger.operation("encode"):
            if isinstance(self._state, SessionOn):
                self.logger.info("Rejected encode: a word is already stored")
                raise StateError("Please reset to store a new word.")

            minimum = self.config.min_word_length
            if len(word) < minimum:
                self.logger.info(
                    "Rejected encode: word too short", length=len(word)
                )
                raise ValidationError(
                    f"Value entered must be at least {minimum} characters long."
                )

            encoded = shift_text(word, self._shift)
            self._state = SessionOn(shift_value=self._shift, encoded_word=encoded)
            self.logger.debug("Session ON", length=len(word))
            return encoded

    def decode(self) -> str:
        """Return the original word and reset the session.

        Raises:
            StateError: If no word is stored.
        """
        with self.logger.operation("decode"):
            state = self._require_on("decode")
            plaintext = shift_text(state.encoded_word, -state.shift_value)
            self.reset()
            return plaintext

    def guess(self, value: int) -> Comparison:
        """Record a guess of the shift and compare it to the real one.

        Any integer is accepted; the statistics are updated before the
        comparison is returned.

        Raises:
            StateError: If no word is stored.
            ValidationError: If *value* is not an integer.
        """
        with self.logger.operation("guess"):
            state = self._require_on("guess")
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"Guess must be an integer, got {type(value).__name__}."
                )

            self._stats = self._stats.record(value, state.shift_value)
            outcome = Comparison.compare(value, state.shift_value)
            self.logger.debug(
                "Guess recorded", outcome=outcome.value, count=self._stats.count
            )
            return outcome

    def statistics(self) -> GuessStatistics:
        """Current guess statistics; valid in any state."""
        return self._stats

    def reset(self) -> None:
        """Draw a new shift, zero the statistics and return to OFF."""
        self._shift = self._rng.randint(self.config.shift_min, self.config.shift_max)
        self._stats = GuessStatistics()
        self._state = SessionOff()
        self.logger.debug("Session OFF")

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _require_on(self, operation: str) -> SessionOn:
        if not isinstance(self._state, SessionOn):
            self.logger.info("Rejected %s: no word stored", operation)
            raise StateError("You must encrypt a word first.")
        return self._state

    def __repr__(self) -> str:
        return (
            f"CipherGame(status={self._state.status!r}, "
            f"guesses={self._stats.count})"
        )
