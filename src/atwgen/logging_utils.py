"""
Logging utilities for atwgen.

Everything logs through the standard library. On top of it this module adds
a TRACE level below DEBUG for per-panel geometry, a level-coloured console
formatter and a single setup entry point for the CLI.
"""

import logging
import os
import sys
from typing import Optional
from logging.handlers import RotatingFileHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self, message: str, *args, **kwargs) -> None:
    """Log ``message`` at TRACE level (panel placement and box geometry)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = _trace

LOG_FORMAT = '%(asctime)s - %(name)-28s - %(levelname)-8s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Marker attribute so repeated setup_logging() calls replace our handlers
_HANDLER_TAG = '_atwgen_handler'

_RESET = '\033[0m'
LEVEL_COLORS = {
    TRACE: '\033[0;36m',
    logging.DEBUG: '\033[0;32m',
    logging.INFO: '\033[0;37m',
    logging.WARNING: '\033[1;33m',
    logging.ERROR: '\033[1;31m',
    logging.CRITICAL: '\033[1;41m',
}


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI colour for terminals."""

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Format a copy; other handlers share the record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname:8}{_RESET}"
        return super().format(colored)

def setup_logging(level='INFO', log_file=None):
    """Setup logging configuration.

    Args:
        level (str): Logging level name, TRACE included (default: 'INFO')
        log_file (str): Optional path to log file

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    plain_formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    # Console handler, colored only for interactive terminals
    console_handler = logging.StreamHandler(sys.stdout)
    if sys.stdout.isatty():
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, DATE_FORMAT))
    else:
        console_handler.setFormatter(plain_formatter)
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(plain_formatter)
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

        root_logger.debug(f"Logging initialized at level {level} (console and file)")
    else:
        root_logger.debug(f"Logging initialized at level {level} (console only)")

def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
