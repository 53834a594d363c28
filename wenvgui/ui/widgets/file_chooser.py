"""
File chooser with bookmarks for wenvgui.

Uses Qt's own file dialog rather than the native one, since only that
shows the sidebar holding the bookmarks.
"""

import os
import logging
from typing import Iterable, List, Optional

from PySide6.QtCore import QUrl
from PySide6.QtWidgets import QFileDialog, QWidget

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 750
DEFAULT_HEIGHT = 500


class FileChooser(QFileDialog):
    """File dialog with a bookmarks panel."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        directory: str = "",
        bookmarks: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the file chooser.

        Args:
            parent: Parent widget
            directory: Initial directory, empty for the current directory
            bookmarks: Directories to show in the sidebar, None keeps
                Qt's default entries
        """
        super().__init__(parent, "", directory)
        self.setOption(QFileDialog.Option.DontUseNativeDialog, True)
        self.resize(DEFAULT_WIDTH, DEFAULT_HEIGHT)

        if bookmarks is not None:
            self.set_bookmarks(bookmarks)

    def set_bookmarks(self, paths: Iterable[str]):
        """
        Replace the bookmarked directories.

        Directories that don't exist are skipped.

        Args:
            paths: Directory paths
        """
        urls = []
        for path in paths:
            if not os.path.isdir(path):
                logger.debug(f"Skipping missing bookmark: {path}")
                continue
            urls.append(QUrl.fromLocalFile(os.path.abspath(path)))

        self.setSidebarUrls(urls)

    def get_bookmarks(self) -> List[str]:
        """
        Get the bookmarked directories.

        Returns:
            Local paths shown in the sidebar
        """
        return [url.toLocalFile() for url in self.sidebarUrls() if url.isLocalFile()]
