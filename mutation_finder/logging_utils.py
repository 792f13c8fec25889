"""Logging setup shared by the CLI and library modules."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mutation_finder"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Send log records to stderr so the comparison report owns stdout."""

    level = resolve_level(verbose, quiet)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(child: str | None = None) -> logging.Logger:
    """Return the package logger, or one of its children."""

    if child:
        return logging.getLogger(f"{LOGGER_NAME}.{child}")
    return logging.getLogger(LOGGER_NAME)
