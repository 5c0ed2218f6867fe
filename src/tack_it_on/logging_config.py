"""Logging configuration for tack-it-on."""

import sys

from loguru import logger

_FORMAT = "{level.icon} {message}"
_VERBOSE_FORMAT = "{level.icon} <dim>{name}:</dim> {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG level (with module names) when verbose."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=_VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="INFO", format=_FORMAT)
