"""Custom widgets for wenvgui."""

from .file_chooser import FileChooser

__all__ = ["FileChooser"]
