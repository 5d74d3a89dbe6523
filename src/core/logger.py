"""Logging setup for the Up client."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER_NAME = "up_client"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return a logger.

    Args:
        name: Logger name.
        level: Logging level (int or level name).
        log_file: Optional path to log file. If None, logs to stderr only.

    Returns:
        Configured logger.
    """

    log = logging.getLogger(name)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    log.setLevel(level)
    if log.handlers:
        return log

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return the application logger. Use after setup_logger has been called."""

    return logging.getLogger(name)


APP_LOGGERS = ("adapters", "core", "cli")


def configure_logging(level: int | str = logging.WARNING, log_file: Path | None = None) -> None:
    """Attach handlers to every package logger of the client.

    Modules log through `logging.getLogger(__name__)`, so the handlers go on
    the package roots.
    """

    for name in (ROOT_LOGGER_NAME, *APP_LOGGERS):
        setup_logger(name, level=level, log_file=log_file)
