"""
WordShift Ciphers
==================

Substitution routines used by the game session.
"""

from wordshift.ciphers.caesar import CaesarShifter, shift_char, shift_text

__all__ = [
    "CaesarShifter",
    "shift_char",
    "shift_text",
]
