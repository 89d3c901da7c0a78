"""Logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging

from axaml_outline.config import AXAML_OUTLINE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_PACKAGE_LOGGERS = ("axaml_outline", "outline_server")


def resolve_log_level(verbose: bool = False, debug: bool = False) -> int:
    """Map CLI verbosity flags to a logging level, falling back to the environment."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    level = logging.getLevelName(AXAML_OUTLINE_LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int | None = None) -> None:
    """Install a single stream handler on the package loggers.

    Safe to call more than once; existing handlers only get their level updated.
    """
    if level is None:
        level = resolve_log_level()
    for name in _PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_LOG_FORMAT))
            handler.setLevel(level)
            logger.addHandler(handler)
        else:
            for handler in logger.handlers:
                handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` with the package handlers installed."""
    logger = logging.getLogger(name)
    if not any(logging.getLogger(root).handlers for root in _PACKAGE_LOGGERS):
        configure_logging()
    return logger
