"""
Settings persistence for wenvgui.

Handles loading and saving of the flat UI settings.
"""

import os
import logging
from typing import Dict, Mapping, Optional

from ..core.project import get_home_dir
from ..utils.fileutils import close_quietly
from .properties import dump_properties, iter_properties

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "uisettings.props"


class SettingsStore:
    """
    Store for the UI settings.

    Settings are a flat mapping of strings, stored as ``key=value``
    properties text in the project's home directory. Errors never leave
    this class: a failed load yields whatever could be read, a failed
    save returns False.

    Path:
        <home-dir>/uisettings.props
    """

    def __init__(self, home_dir: Optional[str] = None):
        """
        Initialize settings store.

        Args:
            home_dir: Directory for the settings file, defaults to the
                project home directory
        """
        self.home_dir = home_dir

    def settings_file(self) -> str:
        """
        Get the file for storing the settings.

        Returns:
            Path of the settings file, relative when home_dir is relative
        """
        home_dir = self.home_dir if self.home_dir is not None else get_home_dir()
        return os.path.join(home_dir, SETTINGS_FILENAME)

    def load(self) -> Dict[str, str]:
        """
        Load the settings.

        Returns an empty mapping if no settings file exists. If reading
        fails part way, the entries read up to that point are returned.

        Returns:
            Freshly loaded settings
        """
        result: Dict[str, str] = {}
        path = self.settings_file()

        if not os.path.exists(path):
            logger.debug(f"No settings file at {path}")
            return result

        stream = None
        try:
            stream = open(path, 'r')
            for key, value in iter_properties(stream):
                result[key] = value
            logger.debug(f"Loaded {len(result)} settings from {path}")
        except Exception as e:
            logger.warning(f"Failed to load settings from {path}: {e}")
        finally:
            close_quietly(stream)

        return result

    def save(self, settings: Mapping[str, str]) -> bool:
        """
        Save the settings, replacing the current file.

        The settings are written to a temporary file next to the settings
        file, which then replaces it.

        Args:
            settings: Flat mapping of strings

        Returns:
            True if successfully saved
        """
        path = self.settings_file()
        tmp_path = f"{path}.tmp"

        stream = None
        try:
            stream = open(tmp_path, 'w')
            dump_properties(settings, stream)
            stream.close()
            os.replace(tmp_path, path)
        except Exception as e:
            logger.error(f"Failed to save settings to {path}: {e}")
            close_quietly(stream)
            _remove_quietly(tmp_path)
            return False

        logger.info(f"Saved settings to {path}")
        return True


def _remove_quietly(path: str):
    try:
        if os.path.exists(path):
            os.remove(path)
    except OSError as e:
        logger.debug(f"Could not remove {path}: {e}")
