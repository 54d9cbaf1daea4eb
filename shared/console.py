"""
WordShift Console Interface
============================

Rich-powered console abstraction giving every WordShift command the same
banner, section headers, coloured status messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_WORDSHIFT_THEME = Theme(
    {
        "wordshift.banner": "bold bright_cyan",
        "wordshift.section": "bold bright_magenta",
        "wordshift.success": "bold green",
        "wordshift.warning": "bold yellow",
        "wordshift.error": "bold red",
        "wordshift.info": "bold bright_blue",
        "wordshift.dim": "dim white",
        "wordshift.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
 __        __            _ ____  _     _  __ _
 \ \      / /__  _ __ __| / ___|| |__ (_)/ _| |_
  \ \ /\ / / _ \| '__/ _` \___ \| '_ \| | |_| __|
   \ V  V / (_) | | | (_| |___) | | | | |  _| |_
    \_/\_/ \___/|_|  \__,_|____/|_| |_|_|_|  \__|
[/bright_cyan]"""

_TAGLINE = "Caesar Shift Guessing Game"


class WordShiftConsole:
    """Unified console interface for WordShift commands.

    Usage::

        con = WordShiftConsole()
        con.banner()
        con.section("Round 1")
        con.success("Correct!")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress banner and info messages. Results, prompts and
                    errors are still shown.
            record: Enable Rich recording for later export.
        """
        self._quiet = quiet
        self._console = Console(
            theme=_WORDSHIFT_THEME,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    @property
    def quiet(self) -> bool:
        return self._quiet

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the WordShift banner unless the console is quiet."""
        if self._quiet:
            return
        subtitle = (
            f"[wordshift.highlight]{_TAGLINE}[/wordshift.highlight]\n"
            f"[wordshift.dim]Version: {version}[/wordshift.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(
            f"  {title}  ",
            style="wordshift.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[wordshift.success][✔][/wordshift.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[wordshift.warning][⚠] WARNING:[/wordshift.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[wordshift.error][✘] ERROR:[/wordshift.error] {message}"
        )

    def info(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(
            f"[wordshift.info][ℹ][/wordshift.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def divider(self, style: str = "dim") -> None:
        """Print a thin horizontal rule."""
        self._console.rule(style=style)
