"""Log setup for the ``johnsons-gambit`` command.

Only the package logger is configured; the host application's root logger
is left alone.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "johnsons_gambit"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to ``sys.stderr`` as it is at emit time, not at setup time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def verbosity_level(verbose_count: int) -> int:
    if verbose_count <= 0:
        return logging.WARNING
    if verbose_count == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbose_count: int = 0) -> logging.Logger:
    """Set the package log level from the -v count and attach one stderr handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(verbosity_level(verbose_count))
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    return logger


def uvicorn_log_options(verbose_count: int) -> dict:
    """uvicorn's own level, and its per-request access log only at -vv."""
    level = verbosity_level(verbose_count)
    return {
        "log_level": logging.getLevelName(level).lower(),
        "access_log": level <= logging.DEBUG,
    }
