"""Shared fixtures for WordShift tests."""
import pytest

from shared.logger import WordShiftLogger
from wordshift.core.engine import CipherGame


class FixedRandom:
    """Random source that hands out a fixed sequence of shifts.

    The last value repeats once the sequence is exhausted.
    """

    def __init__(self, *values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom sources."""
    return FixedRandom


@pytest.fixture
def quiet_logger():
    """Engine logger with no console handler."""
    return WordShiftLogger("engine.test", console_output=False)


@pytest.fixture
def make_game(fixed_rng, quiet_logger):
    """Build a CipherGame whose shifts come from *shifts* in order."""
    def _make(*shifts, word=None):
        return CipherGame(word, rng=fixed_rng(*shifts), logger=quiet_logger)
    return _make
