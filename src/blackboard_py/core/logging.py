"""Structured logging configuration for blackboard-py.

Log lines go to stderr so that rendered boards on stdout stay clean.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, debug: bool = False, json_logs: bool = False) -> None:
    """Configure structured logging for the command line tools.

    Args:
        debug: Enable debug level logging.
        json_logs: Output logs as JSON instead of colored console lines.
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def bind_session(**values: object) -> None:
    """Bind values to every log line emitted for the rest of the session.

    Args:
        **values: Key/value pairs to add to the logging context.
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_session() -> None:
    """Drop all values bound with :func:`bind_session`."""
    structlog.contextvars.clear_contextvars()
