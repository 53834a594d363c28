"""
Icon loading for wenvgui.

Icons are PNG files bundled in the ``images`` directory of this package.
"""

import logging
from importlib import resources
from typing import Optional

from PySide6.QtGui import QIcon, QPixmap

logger = logging.getLogger(__name__)

# Package data directory holding the images
IMAGE_DIR = "images"

IMAGE_EXTENSION = ".png"


def get_pixmap(name: str) -> Optional[QPixmap]:
    """
    Load the image with the specified name.

    Requires a running QGuiApplication.

    Args:
        name: Name of the image, without extension

    Returns:
        Decoded pixmap, or None if missing or unreadable
    """
    resource = resources.files(__package__).joinpath(IMAGE_DIR).joinpath(name + IMAGE_EXTENSION)
    if not resource.is_file():
        logger.debug(f"No image resource for '{name}'")
        return None

    pixmap = QPixmap()
    if not pixmap.loadFromData(resource.read_bytes()):
        logger.warning(f"Failed to decode image '{name}'")
        return None

    return pixmap


def get_icon(name: str) -> Optional[QIcon]:
    """
    Load the icon with the specified name.

    Args:
        name: Name of the icon, without extension

    Returns:
        Icon, or None if it could not be loaded
    """
    pixmap = get_pixmap(name)
    if pixmap is None:
        return None
    return QIcon(pixmap)
