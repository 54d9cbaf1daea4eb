"""
WordShift CLI
==============

Click-based command-line interface for the Caesar-shift guessing game.

Usage::

    python -m wordshift play
    python -m wordshift demo --seed 42
    python -m wordshift encode "Hello, World!" --shift 3
    python -m wordshift decode "Khoor, Zruog!" --shift 3

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import random
from typing import Optional

import click
from rich.markup import escape

from shared.config import WordShiftConfig
from shared.console import WordShiftConsole
from shared.logger import WordShiftLogger

from wordshift import __version__
from wordshift.ciphers.caesar import CaesarShifter
from wordshift.core.engine import CipherGame
from wordshift.core.errors import CipherGameError
from wordshift.core.models import Comparison
from wordshift.output.console import WordShiftConsoleOutput

_QUIT_INPUTS = {"", "q", "quit"}


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a WordShift configuration file (TOML).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.version_option(__version__, prog_name="wordshift")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    quiet: bool,
    log_level: Optional[str],
) -> None:
    """WordShift -- encode a word, guess the Caesar shift, decode it."""
    ctx.ensure_object(dict)

    try:
        ws_config = WordShiftConfig.load(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    settings = ws_config.global_settings
    if log_level:
        settings.log_level = log_level.upper()
    quiet = quiet or settings.quiet

    console = WordShiftConsole(quiet=quiet)
    ctx.obj["config"] = ws_config
    ctx.obj["console"] = console
    ctx.obj["display"] = WordShiftConsoleOutput(console)
    ctx.obj["logger"] = WordShiftLogger.from_config("cli", settings)


def _new_game(ctx: click.Context, seed: Optional[int] = None) -> CipherGame:
    """Build a session from the context's config and logger."""
    game_config = ctx.obj["config"].game
    if seed is None:
        seed = game_config.seed
    rng = random.Random(seed) if seed is not None else None
    return CipherGame(rng=rng, config=game_config, logger=ctx.obj["logger"])


# ===================================================================== #
#  Interactive game
# ===================================================================== #

@cli.command()
@click.option("--seed", type=int, default=None, help="Seed for the shift generator.")
@click.pass_context
def play(ctx: click.Context, seed: Optional[int]) -> None:
    """Play the guessing game interactively.

    Enter a word of at least four characters, then guess the shift.
    Leave a guess blank (or type q) to give up and reveal the word.
    """
    console: WordShiftConsole = ctx.obj["console"]
    display: WordShiftConsoleOutput = ctx.obj["display"]
    game = _new_game(ctx, seed)
    config = ctx.obj["config"]

    console.banner(version=__version__)
    console.info(
        f"The shift is a whole number from {config.game.shift_min} "
        f"to {config.game.shift_max}."
    )

    while True:
        word = click.prompt("Word to encrypt")
        try:
            display.display_encoded(game.encode(word))
        except CipherGameError as exc:
            display.display_error(exc)
            continue

        _guess_loop(game, console, display)
        display.display_statistics(game.statistics())
        display.display_decoded(game.decode())

        if not click.confirm("Play again?", default=False):
            break


def _guess_loop(
    game: CipherGame,
    console: WordShiftConsole,
    display: WordShiftConsoleOutput,
) -> None:
    while True:
        raw = click.prompt(
            "Your guess (blank to give up)", default="", show_default=False
        ).strip()
        if raw.lower() in _QUIT_INPUTS:
            console.warning("You gave up. The word is revealed below.")
            return
        try:
            value = int(raw)
        except ValueError:
            console.error(escape(f"{raw!r} is not a whole number."))
            continue

        outcome = game.guess(value)
        display.display_guess(value, outcome)
        if outcome is Comparison.CORRECT:
            return


# ===================================================================== #
#  Scripted demo
# ===================================================================== #

@cli.command()
@click.option("--seed", type=int, default=None, help="Seed for the shift generator.")
@click.pass_context
def demo(ctx: click.Context, seed: Optional[int]) -> None:
    """Run a scripted session exercising every game operation.

    Shows the rejected calls (short word, decode before encode), then
    plays two full rounds guessing every shift from the configured range.
    """
    console: WordShiftConsole = ctx.obj["console"]
    display: WordShiftConsoleOutput = ctx.obj["display"]
    logger: WordShiftLogger = ctx.obj["logger"]

    console.banner(version=__version__)
    rng = random.Random(seed if seed is not None else ctx.obj["config"].game.seed)

    with logger.timed("demo"):
        console.section("Round 1")
        game = CipherGame(rng=rng, config=ctx.obj["config"].game, logger=logger)
        try:
            game.encode("Tes")
        except CipherGameError as exc:
            display.display_error(exc)
        try:
            game.decode()
        except CipherGameError as exc:
            display.display_error(exc)
        game.reset()
        display.display_encoded(game.encode("Test 1"))
        _guess_every_shift(game, display)
        display.display_statistics(game.statistics())
        display.display_decoded(game.decode())

        console.blank()
        console.divider()
        console.section("Round 2")
        game = CipherGame(
            "Hello, World!", rng=rng, config=ctx.obj["config"].game, logger=logger
        )
        display.display_encoded(game.state.encoded_word)
        _guess_every_shift(game, display)
        display.display_statistics(game.statistics())
        display.display_decoded(game.decode())

    console.success("Demo complete.")


def _guess_every_shift(game: CipherGame, display: WordShiftConsoleOutput) -> None:
    for value in range(game.config.shift_min, game.config.shift_max + 1):
        display.display_guess(value, game.guess(value))


# ===================================================================== #
#  One-shot transforms
# ===================================================================== #

@cli.command()
@click.argument("text")
@click.option("--shift", "-s", type=int, default=None, help="Shift to apply (default from config).")
@click.pass_context
def encode(ctx: click.Context, text: str, shift: Optional[int]) -> None:
    """Caesar-shift TEXT forward and print the result."""
    _transform(ctx, text, shift, decode=False)


@cli.command()
@click.argument("text")
@click.option("--shift", "-s", type=int, default=None, help="Shift to undo (default from config).")
@click.pass_context
def decode(ctx: click.Context, text: str, shift: Optional[int]) -> None:
    """Caesar-shift TEXT backward and print the result."""
    _transform(ctx, text, shift, decode=True)


def _transform(ctx: click.Context, text: str, shift: Optional[int], *, decode: bool) -> None:
    if shift is None:
        shift = ctx.obj["config"].game.default_shift
    try:
        shifter = CaesarShifter(shift)
    except CipherGameError as exc:
        ctx.obj["display"].display_error(exc)
        ctx.exit(1)
    click.echo(shifter.decode(text) if decode else shifter.encode(text))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the WordShift CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
