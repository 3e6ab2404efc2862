"""The ``SiteWalker`` logger.

Modules log through :data:`logger`; the CLI calls :func:`init_logging` once to
pick the level, format and an optional rotating log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteWalker"
LOG_FILE_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger: stdout, plus *log_file* if given."""
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file),
                maxBytes=LOG_FILE_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for old in lg.handlers[:]:
        lg.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
