"""
Utility functions for wenvgui.
"""

from .fileutils import close_quietly
from .logger import setup_logging, get_log_dir

__all__ = ["close_quietly", "setup_logging", "get_log_dir"]
