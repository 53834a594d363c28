"""User interface helpers for wenvgui."""

from .icons import get_icon, get_pixmap

__all__ = ["get_icon", "get_pixmap"]
