"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog


def setup_logging(level: str = "warning", stream: TextIO | None = None) -> None:
    """Configure structlog for JSON output, one event per line.

    Events go to ``stream`` (stderr when omitted).  stdout is left to the CLI
    report so the two can be piped separately.  Unknown levels fall back to
    warning.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    if stream is None:
        stream = sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]


@contextmanager
def comparison_context(left_name: str, right_name: str) -> Iterator[None]:
    """Tag every log event emitted inside the block with the compared sides."""
    with structlog.contextvars.bound_contextvars(left=left_name, right=right_name):
        yield
