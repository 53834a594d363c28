"""
Core project functionality for wenvgui.

This module provides the locations of the application's persisted state.
"""

from .project import get_home_dir, get_envs_dir

__all__ = ["get_home_dir", "get_envs_dir"]
