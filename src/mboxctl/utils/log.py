"""Console logging with the tool's tag and a realtime timestamp.

Lines look like ``[mboxctl 1700000000.123456789] message``. Records below
WARNING go to stdout, everything else to stderr.
"""

from __future__ import annotations

import logging
import sys

PREFIX = "mboxctl"
LOGGER_NAME = "mboxctl"


class ConsoleFormatter(logging.Formatter):
    """Prefix each message with the tag and ``seconds.nanoseconds``."""

    def __init__(self, prefix: str = PREFIX) -> None:
        super().__init__()
        self._prefix = prefix

    def format(self, record: logging.LogRecord) -> str:
        seconds = int(record.created)
        nanoseconds = int((record.created - seconds) * 1_000_000_000)
        return f"[{self._prefix} {seconds}.{nanoseconds:09d}] {super().format(record)}"


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(level: int = logging.INFO, stdout=None, stderr=None) -> logging.Logger:
    """Install the console handlers on the package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Minimum level to emit.
        stdout: Stream for records below WARNING (default ``sys.stdout``).
        stderr: Stream for WARNING and above (default ``sys.stderr``).
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = ConsoleFormatter()

    out_handler = logging.StreamHandler(stdout or sys.stdout)
    out_handler.addFilter(_BelowWarning())
    out_handler.setFormatter(formatter)

    err_handler = logging.StreamHandler(stderr or sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    logger.addHandler(out_handler)
    logger.addHandler(err_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def log(level: int, msg: str, *args) -> None:
    """Log a printf-style message at ``level`` through the package logger."""
    logging.getLogger(LOGGER_NAME).log(level, msg, *args)
