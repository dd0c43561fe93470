"""Tests for the CLI module."""

from typer.testing import CliRunner

from numplay import __version__ as NUMPLAY_VERSION
from numplay.cli.main import app

runner = CliRunner()


def test_fib_prints_term() -> None:
    result = runner.invoke(app, ["fib"], input="9\n")

    assert result.exit_code == 0
    assert "Please enter a number to find the nth Fibonacci number" in result.stdout
    assert "The fibonacci value of 9th position is 55" in result.stdout


def test_fib_zero_returns_one() -> None:
    result = runner.invoke(app, ["fib"], input="0\n")

    assert result.exit_code == 0
    assert "The fibonacci value of 0th position is 1" in result.stdout


def test_fib_malformed_index_exits_with_parse_error() -> None:
    result = runner.invoke(app, ["fib"], input="abc\n")

    assert result.exit_code == 2
    assert "Please type a number!" in result.output
    assert "The fibonacci value" not in result.output


def test_fib_retry_policy() -> None:
    result = runner.invoke(app, ["fib", "--on-invalid", "retry"], input="abc\n5\n")

    assert result.exit_code == 0
    assert "Please type a number!" in result.stdout
    assert "The fibonacci value of 5th position is 8" in result.stdout


def test_fib_overflow_policies() -> None:
    raised = runner.invoke(app, ["fib"], input="47\n")
    assert raised.exit_code == 1
    assert "overflows 32-bit" in raised.output

    wrapped = runner.invoke(app, ["fib", "--overflow", "wrap"], input="47\n")
    assert wrapped.exit_code == 0
    assert "is 512559680" in wrapped.stdout

    wide = runner.invoke(app, ["fib", "--bits", "64"], input="47\n")
    assert wide.exit_code == 0
    assert "is 4807526976" in wide.stdout


def test_fib_without_input() -> None:
    result = runner.invoke(app, ["fib"], input="")

    assert result.exit_code == 1
    assert "No input received." in result.output


def test_guess_single_value_range() -> None:
    result = runner.invoke(app, ["guess", "--low", "7", "--high", "7"], input="nope\n7\n")

    assert result.exit_code == 0
    assert "Guess the number!" in result.stdout
    assert "Please input your guess. It must be between 7 - 7" in result.stdout
    assert "You guessed: 7" in result.stdout
    assert "You win! You took 1 attempts!" in result.stdout


def test_guess_seeded_sweep() -> None:
    sweep = "\n".join(str(v) for v in range(1, 11)) + "\n"
    result = runner.invoke(app, ["guess", "--low", "1", "--high", "10", "--seed", "5"], input=sweep)

    assert result.exit_code == 0
    assert "You win!" in result.stdout


def test_guess_input_ends_early() -> None:
    result = runner.invoke(app, ["guess", "--low", "1", "--high", "10", "--seed", "5"], input="")

    assert result.exit_code == 1
    assert "Input ended before the number was guessed." in result.output
    assert "You win!" not in result.output


def test_guess_inverted_range_is_usage_error() -> None:
    result = runner.invoke(app, ["guess", "--low", "10", "--high", "1"])

    assert result.exit_code == 2


def test_version_command() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert NUMPLAY_VERSION in result.stdout


def test_fib_oversized_index_is_a_parse_error() -> None:
    result = runner.invoke(app, ["fib"], input="9" * 5000 + "\n")

    assert result.exit_code == 2
    assert "Please type a number!" in result.output
    assert "Traceback" not in result.output


def test_guess_input_ending_does_not_log_a_traceback() -> None:
    result = runner.invoke(app, ["guess", "--low", "1", "--high", "10", "--seed", "5"], input="abc\n")

    assert result.exit_code == 1
    assert "Input ended before the number was guessed." in result.output
    assert "Traceback" not in result.output
    assert "round.crashed" not in result.output
    assert '"level":"warning"' not in result.output
