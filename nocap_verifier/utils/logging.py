"""
Logging setup for the verifier's command line entry points
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "nocap_verifier"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Chatty below WARNING while provider requests are in flight
NOISY_LOGGERS = ("aiohttp", "asyncio")


class PackageStreamHandler(logging.StreamHandler):
    """Marks the handler installed by setup_logging"""


def setup_logging(
    level: Optional[str] = None,
    verbose: bool = False,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling this again replaces the handler it installed before, so CLI
    commands invoked repeatedly in one process do not duplicate lines.

    Args:
        level: Level name for package loggers, WARNING when omitted
        verbose: Shortcut for DEBUG
        format_string: Custom format for log records
        stream: Destination, stderr when omitted so JSON on stdout stays clean

    Returns:
        The configured package logger
    """
    level_name = "DEBUG" if verbose else (level or "WARNING").upper()

    handler = PackageStreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if isinstance(existing, PackageStreamHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level_name))
    package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return package_logger
