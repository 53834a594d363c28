"""
Project directories for wenvgui.
"""

import os

PROJECT_DIR_NAME = "wekavirtualenv"


def get_home_dir() -> str:
    """
    Get the platform-specific home directory of the project.

    The directory is not created here.

    Path:
        Linux/macOS: ~/.local/share/wekavirtualenv
        Windows: %USERPROFILE%\\wekavirtualenv

    Returns:
        Absolute path to the home directory
    """
    if os.name == 'nt':  # Windows
        base = os.path.expanduser('~')
    else:  # Linux/macOS
        base = os.path.expanduser('~/.local/share')

    return os.path.join(base, PROJECT_DIR_NAME)


def get_envs_dir() -> str:
    """Return the directory holding the environments."""
    return os.path.join(get_home_dir(), "envs")
