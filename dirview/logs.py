"""Logging setup.

The interactive screen owns stdout in raw mode, so log records only ever go
to a file. Without an explicit level or file the package logger stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "dirview"
LOG_FILENAME = "dirview.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(APP_NAME).addHandler(logging.NullHandler())


def default_log_path() -> Path:
    """Return the per-user log file location."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str | None = None, log_file: Path | None = None) -> Path | None:
    """Attach a file handler to the package logger.

    Returns the log path in use, or ``None`` when logging stays disabled.
    """
    if level is None and log_file is None:
        return None

    path = log_file if log_file is not None else default_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel((level or "INFO").upper())
    package_logger.addHandler(handler)
    return path
