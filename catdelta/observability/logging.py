"""Structured logging for catdelta, built on structlog.

Until :func:`setup_logging` is called (by the command line or an embedding
application), records are handed to the stdlib ``logging`` module under
the ``catdelta.*`` logger names, so an unconfigured process prints nothing
below warning and never writes to stdout.  Diff output goes to stdout, so
:func:`setup_logging` always writes records to stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error")


def reset_logging() -> None:
    """Restore the library default: JSON records routed through stdlib logging."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def setup_logging(level: str = "info", json_output: bool = True) -> None:
    """Configure structlog at *level*.

    JSON lines are the default; ``json_output=False`` switches to the
    key/value console renderer used for interactive runs.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger bound to *component* (e.g. ``"delta.catalog"``)."""
    return structlog.get_logger(f"catdelta.{component}", component=component)  # type: ignore[return-value]


if not structlog.is_configured():
    reset_logging()
