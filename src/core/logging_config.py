"""Structured logging configuration.

All jetkit modules log snake_case events with keyword fields. Events are
rendered as JSON lines on stderr so command output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_CONFIGURED = False


def get_logger(name: str) -> Any:
    """Return a module logger, configuring structlog on first use.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger emitting JSON events at INFO and above.
    """
    global _CONFIGURED
    if not _CONFIGURED:
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(sort_keys=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
            logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        )
        _CONFIGURED = True
    return structlog.get_logger().bind(logger=name)
