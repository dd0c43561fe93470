from __future__ import annotations

import logging
import sys
from typing import Any

import orjson
import structlog


def _json_serializer(obj: Any, default: Any) -> str:
    """
    JSON serializer for structured logs.

    Uses orjson for deterministic output.
    """
    return orjson.dumps(obj, default=default).decode("utf-8")


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so swapped streams (test runners) are honored
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(*, level: str = "WARNING") -> None:
    """
    Configure structured logging for the whole process.

    Logs go to stderr: stdout belongs to the interactive game text.
    Safe to call more than once (the CLI calls it per command).
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    processors: list[Any] = [
        # Merge context variables (round_id, component, etc.)
        structlog.contextvars.merge_contextvars,

        # Standard metadata
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),

        # Exception handling
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.dict_tracebacks,

        # Final JSON output
        structlog.processors.JSONRenderer(serializer=_json_serializer),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=_stderr_logger,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )

    # Ensure stdlib logging flows to the same stream
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def bind_context(**values: Any) -> None:
    """
    Bind contextual information to all future log entries.

    Example:
        bind_context(round_id="20261017T101500Z_ab12cd34", component="guessing_round")
    """
    structlog.contextvars.bind_contextvars(**values)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """
    Clear all bound logging context.
    """
    structlog.contextvars.clear_contextvars()
