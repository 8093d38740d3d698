"""Logging setup for the ``crosssection`` package logger.

The API and the demo script call :func:`setup_logging` once at start-up;
library modules only ever use ``logging.getLogger(__name__)``.
"""
from __future__ import annotations

import logging
import sys

from . import config

PACKAGE_LOGGER = "crosssection"


def setup_logging(level: int | None = None, log_file: str | None = None) -> logging.Logger:
    """Attach a stdout handler, and optionally a file handler, to the package logger.

    Args:
        level: Logging level. Defaults to ``CROSSSECTION_LOG_LEVEL``.
        log_file: Path the records are appended to. Defaults to
            ``CROSSSECTION_LOG_FILE``; an empty string disables the file.

    Handlers installed by an earlier call are closed and replaced, so a
    reloaded API process does not emit every record twice.
    """
    if level is None:
        level = config.log_level()
    if log_file is None:
        log_file = config.log_file()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        "Logging at %s to stdout%s",
        logging.getLevelName(level),
        f" and {log_file}" if log_file else "",
    )
    return logger
