"""
Configuration management for wenvgui.

This module handles persistence of the UI settings.
"""

from .settings import SettingsStore, SETTINGS_FILENAME

__all__ = ["SettingsStore", "SETTINGS_FILENAME"]
