"""Logging helpers shared by the apisection CLI, service and renderers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT = "apisection"
_CONSOLE_FORMAT = "[apisection] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger nested under the ``apisection`` hierarchy."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console (stderr) and optional file handlers to the package logger.

    Rendered markdown goes to stdout, so console logging always targets stderr.
    """
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
