"""Structured logging for marina-ledger.

Log events go to stderr through stdlib logging, rendered by structlog.
The default level is WARNING so the interactive screen stays clean;
the CLI lowers it with ``-v``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure structlog and the root stdlib handler.

    Safe to call more than once; the latest *level* wins.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
