"""Logging configuration, set up once at CLI startup.

Every module that does ``logger = logging.getLogger(__name__)`` inherits
this config. The level comes from the GOSCAFFOLD_LOG_LEVEL environment
variable and defaults to WARNING.
"""

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "GOSCAFFOLD_LOG_LEVEL"

# WARNING level: message only
_FMT_MINIMAL = "%(message)s"

# INFO level: timestamped with module context
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"

# DEBUG level: full diagnostic with file:line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"

_DATEFMT = "%H:%M:%S"

_NOISY_LOGGERS = ("git",)


def setup_logging(level=None):
    """Configure the root logger with a single stderr handler.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...). When None, read from
            GOSCAFFOLD_LOG_LEVEL.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR)
    numeric_level = parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)

    # GitPython logs every command it runs at DEBUG
    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def parse_level(level):
    """Convert a level name to its numeric constant, falling back to WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
