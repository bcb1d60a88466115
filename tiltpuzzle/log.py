"""structlog loggers backed by stdlib logging.

Events go through the ``tiltpuzzle`` stdlib logger, so nothing is printed
until an application calls ``configure_logging`` (or configures
``logging`` itself); library callers see only WARNING and above on
stderr, via stdlib's last-resort handler.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="%H:%M:%S"),
    structlog.dev.ConsoleRenderer(colors=False),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(verbose: bool = False) -> None:
    """Send log events to stderr: WARNING and above, or DEBUG when *verbose*."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    logging.getLogger("tiltpuzzle").setLevel(level)
