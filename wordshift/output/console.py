"""
WordShift Console Output
=========================

Rich-based renderers for the guessing game: ciphertext and plaintext
panels, colour-coded guess outcomes, and the guess statistics table.
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from shared.console import WordShiftConsole
from wordshift.core.errors import CipherGameError
from wordshift.core.models import Comparison, GuessStatistics


_OUTCOME_COLOURS: dict[str, str] = {
    "correct": "bold bright_green",
    "too_low": "bold bright_cyan",
    "too_high": "bold yellow",
}


class WordShiftConsoleOutput:
    """Console output formatters for CipherGame results.

    Usage::

        output = WordShiftConsoleOutput(WordShiftConsole())
        output.display_encoded(game.encode("Hello"))
        output.display_guess(3, game.guess(3))
        output.display_statistics(game.statistics())
    """

    def __init__(self, console: Optional[WordShiftConsole] = None) -> None:
        self.console = console or WordShiftConsole()
        self._rich = self.console.rich

    def display_encoded(self, ciphertext: str) -> None:
        text = Text(ciphertext, style="bold bright_magenta")
        self._rich.print(Panel(text, title="Encrypted word", border_style="magenta"))

    def display_decoded(self, plaintext: str) -> None:
        text = Text(plaintext, style="bold bright_green")
        self._rich.print(Panel(text, title="Decrypted word", border_style="green"))

    def display_guess(self, value: int, outcome: Comparison) -> None:
        style = _OUTCOME_COLOURS.get(outcome.value, "white")
        line = Text(f"Guess [{value}]: ", style="bold")
        line.append(outcome.message(value), style=style)
        self._rich.print(line)

    def display_statistics(self, stats: GuessStatistics) -> None:
        """Render the guess statistics as a two-column table."""
        self.console.table(
            "Guess Statistics",
            ["Statistic", "Value"],
            [
                ("Number of guesses", stats.count),
                ("Average guess value", stats.average),
                ("Number of high guesses", stats.high_count),
                ("Number of low guesses", stats.low_count),
            ],
            styles=["bold", "bright_white"],
        )

    def display_error(self, exc: CipherGameError) -> None:
        self.console.error(escape(exc.message))
