"""
Logging setup for the jlinerc package loggers.

Only the ``jlinerc`` logger is touched; the root logger and any handlers
the application installed are left alone. Records still propagate to
the root logger.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..config import Configuration

PACKAGE_LOGGER = "jlinerc"

# Prefix for handlers owned by setup_logging
_HANDLER_PREFIX = "jlinerc."


def setup_logging(
    log_level: Optional[str] = None,
    log_file: bool = False,
    configuration: Optional["Configuration"] = None,
) -> logging.Logger:
    """
    Attach handlers to the jlinerc package logger.

    Without an explicit level, DEBUG is used when the configuration's
    ``jline.log.debug`` property is on, INFO otherwise. Handlers added
    by an earlier call are replaced.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ...)
        log_file: If True, also log to a timestamped file
        configuration: Source of ``jline.log.debug`` when log_level is None

    Returns:
        The jlinerc package logger
    """
    from ..config.defaults import LOG_DEBUG

    if log_level is None:
        debug = configuration is not None and configuration.get_boolean(LOG_DEBUG, False)
        log_level = "DEBUG" if debug else "INFO"
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() and handler.get_name().startswith(_HANDLER_PREFIX):
            logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_PREFIX + "console")
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(name)s: %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = log_dir / f"jlinerc_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path)
        file_handler.set_name(_HANDLER_PREFIX + "file")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)

        logger.debug(f"Logging to file: {log_file_path}")

    return logger


def get_log_dir() -> Path:
    """Cache directory for jlinerc log files."""
    if os.name == 'nt':
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))

    return Path(base) / 'jlinerc' / 'logs'
