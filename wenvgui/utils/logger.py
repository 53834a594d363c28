"""
Logging configuration for wenvgui.

Log files go to the ``logs`` directory in the project home directory, next
to the UI settings and the environments.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from ..core.project import get_home_dir

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    app_name: str = "wenvgui",
    log_level: str = "INFO",
    log_file: bool = True,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure logging for an application using wenvgui.

    The console shows messages from ``log_level`` up, the log file
    always records everything from DEBUG up.

    Args:
        app_name: Prefix of the log file name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log to a timestamped file
        log_dir: Directory for the log file, defaults to get_log_dir()

    Returns:
        Root logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)

    if not log_file:
        root.setLevel(level)
        return root

    # File handler needs DEBUG records to reach it
    root.setLevel(min(level, logging.DEBUG))

    target_dir = Path(log_dir) if log_dir is not None else get_log_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / f"{app_name}_{datetime.now():%Y%m%d_%H%M%S}.log"

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root.addHandler(file_handler)

    root.info(f"Logging to file: {log_path}")
    return root


def get_log_dir() -> Path:
    """Return the log directory inside the project home directory."""
    return Path(get_home_dir()) / "logs"
