"""
Logging configuration for the application.

One stdout handler for the whole process, installed when the app is
created. Request bodies and stored values are never logged; only
request paths and counts are.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-request access lines duplicate the "Call to" lines of the set routes.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def resolve_level(level: str) -> int:
    """Map a level name such as "debug" to its logging constant.

    Unknown names resolve to INFO.
    """
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> int:
    """Install the application's log handler on the root logger.

    Calling it again replaces the previous handler, so every app built
    in the same process (tests included) logs exactly once per record.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
        stream: Destination stream, stdout by default.

    Returns:
        The numeric level that was applied.
    """
    numeric = resolve_level(level)
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))
    if not isinstance(logging.getLevelName(level.strip().upper()), int):
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using INFO", level
        )
    return numeric
