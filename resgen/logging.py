"""Logging setup shared by the resgen modules and CLI."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "resgen"
_CONSOLE_FORMAT = "[resgen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``resgen`` or its ``resgen.<name>`` child."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route resgen records to stderr, and to ``log_file`` when given.

    Calling it again replaces the previous handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = reset_logging()
    logger.setLevel(level)
    logger.propagate = False
    logger.addHandler(_handler(logging.StreamHandler(), level, _CONSOLE_FORMAT))
    if log_file is not None:
        logger.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)
        )
    return logger


def reset_logging() -> logging.Logger:
    """Drop resgen handlers and hand records back to the root logger."""
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


__all__ = ["configure_logging", "get_logger", "reset_logging"]
