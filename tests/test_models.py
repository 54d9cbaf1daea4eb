"""Tests for CipherGame data models."""
import pydantic
import pytest

from wordshift.core.models import Comparison, GuessStatistics, SessionOff, SessionOn


class TestComparison:
    def test_compare(self):
        assert Comparison.compare(3, 3) is Comparison.CORRECT
        assert Comparison.compare(2, 3) is Comparison.TOO_LOW
        assert Comparison.compare(4, 3) is Comparison.TOO_HIGH

    def test_messages(self):
        assert Comparison.CORRECT.message(5) == "Correct! 5 is the shift value."
        assert Comparison.TOO_LOW.message(2) == "2 is too low. Guess again."
        assert Comparison.TOO_HIGH.message(9) == "9 is too high. Guess again."


class TestGuessStatistics:
    def test_empty(self):
        stats = GuessStatistics()
        assert stats.count == 0
        assert stats.average == 0
        assert stats.exact_count == 0

    def test_record_is_pure(self):
        stats = GuessStatistics()
        updated = stats.record(4, 6)
        assert stats.count == 0
        assert updated.count == 1
        assert updated.low_count == 1

    def test_average_truncates(self):
        stats = GuessStatistics().record(1, 5).record(2, 5)
        assert stats.total == 3
        assert stats.average == 1

    def test_negative_average_truncates_toward_zero(self):
        stats = GuessStatistics().record(-3, 5).record(-4, 5)
        assert stats.total == -7
        assert stats.average == -3

    def test_frozen(self):
        stats = GuessStatistics()
        with pytest.raises(pydantic.ValidationError):
            stats.count = 3


class TestSessionState:
    def test_off_has_no_payload(self):
        state = SessionOff()
        assert state.active is False
        assert state.model_dump() == {"status": "off"}

    def test_on_carries_shift_and_word(self):
        state = SessionOn(shift_value=3, encoded_word="grjv")
        assert state.active is True
        assert state.model_dump() == {
            "status": "on", "shift_value": 3, "encoded_word": "grjv",
        }

    def test_on_rejects_zero_shift(self):
        with pytest.raises(pydantic.ValidationError):
            SessionOn(shift_value=0, encoded_word="abcd")
