"""
Logging configuration for cfgmenu.

The level can be set with the CFGMENU_LOG_LEVEL environment variable.
Log files go to the user's cache directory unless a directory is given.
"""

import os
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

LOG_LEVEL_ENV = "CFGMENU_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_level(default: str = "INFO") -> str:
    """
    Get the log level requested through the environment.

    Args:
        default: Level used when the variable is unset or invalid

    Returns:
        Upper-case level name
    """
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return level if level in LOG_LEVELS else default


def setup_logging(
    log_level: str = "INFO",
    log_file: bool = True,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure application logging.

    Settings load/save and menu changes log at INFO, rejected values at
    WARNING, and per-option detail at DEBUG. The console shows the
    requested level; the file always gets DEBUG.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log to a timestamped file
        log_dir: Directory for the log file (get_log_dir() by default)

    Returns:
        Root logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else level)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = Path(log_dir) if log_dir is not None else get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = log_dir / f"cfgmenu_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file_path}")

    return logger


def get_log_dir() -> Path:
    """
    Get platform-specific log directory.

    Returns:
        Path to log directory
    """
    if os.name == 'nt':  # Windows
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))

    return Path(base) / 'cfgmenu' / 'logs'
