"""
WordShift Output Module
========================

Console rendering of game results.
"""

from wordshift.output.console import WordShiftConsoleOutput

__all__ = ["WordShiftConsoleOutput"]
