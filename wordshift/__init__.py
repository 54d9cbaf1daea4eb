"""
WordShift -- Caesar Shift Guessing Game
========================================

An educational toy built around a single Caesar-shifted word: encode a
word with a secret shift, let the player guess the shift, track guess
statistics, and decode the word again.

Modules:
    - wordshift.core.engine: CipherGame session state machine
    - wordshift.core.models: Pydantic data models
    - wordshift.core.errors: ValidationError / StateError
    - wordshift.ciphers.caesar: Character-shift algorithm
    - wordshift.output.console: Rich rendering of game results
    - wordshift.cli: Click-based command-line interface

References:
    - Kahn, D. (1996). The Codebreakers. Scribner. Ch. 2 (Caesar cipher).
"""

__version__ = "1.0.0"
__tool_name__ = "wordshift"
