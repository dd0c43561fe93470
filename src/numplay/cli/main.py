"""Command-line interface for numplay."""

import sys
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.text import Text

from numplay import __version__ as NUMPLAY_VERSION
from numplay.core.config.settings import settings
from numplay.core.errors import EndOfInput, ParseError, TermOverflowError
from numplay.core.logging.setup import bind_context, configure_logging
from numplay.guessing.audit import RoundAudit
from numplay.guessing.round import GuessingRound
from numplay.guessing.state import GuessRange
from numplay.io.console import ConsoleLineSink
from numplay.io.lines import StreamLineSource
from numplay.io.random_source import SeededRandomSource
from numplay.sequence.engine import OverflowPolicy, SequenceEngine
from numplay.sequence.prompt import InvalidIndexPolicy, format_term, read_index

log = structlog.get_logger()


def _error_console() -> Console:
    return Console(stderr=True, highlight=False)


def _setup(log_level: Optional[str]) -> None:
    configure_logging(level=log_level or settings.log_level)
    bind_context(env=settings.env)


def _log_level_option():
    return typer.Option(None, "--log-level", help="Override NUMPLAY_LOG_LEVEL (logs go to stderr)")


def fib(
    on_invalid: Optional[InvalidIndexPolicy] = typer.Option(
        None,
        "--on-invalid",
        help="What to do with a malformed index: exit (code 2) or retry",
        case_sensitive=False,
    ),
    overflow: Optional[OverflowPolicy] = typer.Option(
        None,
        "--overflow",
        help="Overflow policy for terms wider than --bits: raise or wrap",
        case_sensitive=False,
    ),
    bits: Optional[int] = typer.Option(None, "--bits", min=1, help="Unsigned value width of terms"),
    log_level: Optional[str] = _log_level_option(),
) -> None:
    """Read an index from stdin and print the matching Fibonacci-style term."""
    _setup(log_level)

    policy = on_invalid or settings.invalid_index_policy
    engine = SequenceEngine(
        bits=bits or settings.sequence_bits,
        overflow=overflow or settings.overflow_policy,
    )
    sink = ConsoleLineSink()
    errors = _error_console()

    try:
        index = read_index(StreamLineSource(sys.stdin), sink, policy=policy)
    except ParseError as e:
        errors.print(Text(f"Please type a number! ({e.reason})", style="red"))
        raise typer.Exit(2)
    except EndOfInput:
        errors.print(Text("No input received.", style="red"))
        raise typer.Exit(1)

    try:
        value = engine.nth_term(index)
    except TermOverflowError as e:
        errors.print(Text(str(e), style="red"))
        raise typer.Exit(1)

    log.info("cli.fib.computed", index=index, bits=engine.bits, overflow=engine.overflow.value)
    sink.write_line(format_term(index, value))


def guess(
    low: Optional[int] = typer.Option(None, "--low", help="Inclusive lower bound (default NUMPLAY_GUESS_LOW)"),
    high: Optional[int] = typer.Option(None, "--high", help="Inclusive upper bound (default NUMPLAY_GUESS_HIGH)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed (default NUMPLAY_DEFAULT_SEED)"),
    log_level: Optional[str] = _log_level_option(),
) -> None:
    """Play one round of guess-the-number on stdin/stdout."""
    _setup(log_level)

    lo = settings.guess_low if low is None else low
    hi = settings.guess_high if high is None else high
    try:
        bounds = GuessRange(low=lo, high=hi)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'--low' / '--high'")

    rng = SeededRandomSource(seed=seed if seed is not None else settings.default_seed)
    game = GuessingRound(observers=[RoundAudit()])

    try:
        result = game.run(bounds, rng, StreamLineSource(sys.stdin), ConsoleLineSink())
    except EndOfInput:
        _error_console().print(Text("Input ended before the number was guessed.", style="red"))
        raise typer.Exit(1)

    log.info("cli.guess.finished", round_id=result.round_id, attempts=result.attempts)


def version() -> None:
    """Show the numplay version."""
    Console().print(f"numplay {NUMPLAY_VERSION}")


def create_app() -> typer.Typer:
    """
    Application factory.

    The single place where the typer app is created and its commands registered.
    """
    app = typer.Typer(
        name="numplay",
        help="Fibonacci-style terms and a number guessing game",
        no_args_is_help=True,
        add_completion=False,
    )
    app.command("fib")(fib)
    app.command("guess")(guess)
    app.command("version")(version)
    return app


# Console script entrypoint
app = create_app()


def main() -> None:
    app()
