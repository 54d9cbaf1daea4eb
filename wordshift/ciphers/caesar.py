"""
Caesar Shift
=============

Rotates ASCII letters within their own case block and leaves every other
code point untouched.

For a code ``c`` in a letter block starting at ``base``::

    shift(c, k) = base + (c - base + k) mod 26

Python's ``%`` is floored, so the result is always in ``[0, 26)`` even for
negative ``k``; shifting by ``k`` and then by ``-k`` returns the original
code for every input.

References:
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America. Ch. 1.
"""

from __future__ import annotations

from wordshift.core.errors import ValidationError

ALPHABET_SIZE = 26

LOWER_MIN = ord("a")  # 97
LOWER_MAX = ord("z")  # 122
UPPER_MIN = ord("A")  # 65
UPPER_MAX = ord("Z")  # 90


def shift_char(code: int, shift: int) -> int:
    """Shift a single code point by *shift* positions.

    Args:
        code: Character code (``ord`` value).
        shift: Signed rotation; positive encodes, negative decodes.

    Returns:
        The rotated code for ASCII letters, *code* unchanged otherwise.
    """
    if LOWER_MIN <= code <= LOWER_MAX:
        return LOWER_MIN + (code - LOWER_MIN + shift) % ALPHABET_SIZE
    if UPPER_MIN <= code <= UPPER_MAX:
        return UPPER_MIN + (code - UPPER_MIN + shift) % ALPHABET_SIZE
    return code


def shift_text(text: str, shift: int) -> str:
    """Apply :func:`shift_char` to every character of *text*."""
    return "".join(chr(shift_char(ord(ch), shift)) for ch in text)


class CaesarShifter:
    """Encode / decode text with a fixed Caesar shift.

    Usage::

        shifter = CaesarShifter(3)
        shifter.encode("dogs")   # 'grjv'
        shifter.decode("grjv")   # 'dogs'
    """

    def __init__(self, shift: int) -> None:
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise ValidationError(
                f"Shift must be an integer, got {type(shift).__name__}."
            )
        self.shift = shift

    def encode(self, text: str) -> str:
        return shift_text(text, self.shift)

    def decode(self, text: str) -> str:
        return shift_text(text, -self.shift)

    def __repr__(self) -> str:
        return f"CaesarShifter(shift={self.shift})"
