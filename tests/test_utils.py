"""Tests for project directories and utility helpers."""

import os
import logging

import pytest
from unittest.mock import MagicMock

from wenvgui.core import get_home_dir, get_envs_dir
from wenvgui.utils import close_quietly, setup_logging, get_log_dir

posix_only = pytest.mark.skipif(os.name == "nt", reason="~/.local/share layout only applies off Windows")


# ---------------------------------------------------------------------------
# Project directories
# ---------------------------------------------------------------------------

class TestProjectDirs:
    """Tests for home and environment directory resolution."""

    @posix_only
    def test_home_dir_in_local_share(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_home_dir() == os.path.join(
            str(tmp_path), ".local", "share", "wekavirtualenv"
        )

    @posix_only
    def test_home_dir_ignores_xdg_data_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
        assert get_home_dir() == os.path.join(
            str(tmp_path), ".local", "share", "wekavirtualenv"
        )

    def test_home_dir_not_created(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        assert not os.path.exists(get_home_dir())

    def test_envs_dir_below_home_dir(self):
        assert get_envs_dir() == os.path.join(get_home_dir(), "envs")


# ---------------------------------------------------------------------------
# close_quietly
# ---------------------------------------------------------------------------

class TestCloseQuietly:
    """Tests for best-effort resource release."""

    def test_closes_resource(self):
        resource = MagicMock()
        close_quietly(resource)
        resource.close.assert_called_once()

    def test_none_is_ignored(self):
        close_quietly(None)

    def test_close_error_suppressed(self):
        resource = MagicMock()
        resource.close.side_effect = IOError("disk gone")
        close_quietly(resource)
        resource.close.assert_called_once()

    def test_real_file(self, tmp_path):
        stream = open(tmp_path / "data.txt", "w")
        close_quietly(stream)
        assert stream.closed


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogging:
    """Tests for setup_logging()."""

    def test_console_only(self, restore_root_logger):
        logger = setup_logging(log_level="DEBUG", log_file=False)
        assert logger is restore_root_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_console_follows_log_level(self, restore_root_logger):
        logger = setup_logging(log_level="WARNING", log_file=False)
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        logger = setup_logging(log_level="chatty", log_file=False)
        assert logger.level == logging.INFO
        assert logger.handlers[0].level == logging.INFO

    def test_log_file_in_given_dir(self, tmp_path, restore_root_logger):
        logger = setup_logging(
            app_name="wenv-explorer", log_level="WARNING", log_dir=tmp_path / "logs"
        )

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert logger.level == logging.DEBUG
        assert len(list((tmp_path / "logs").glob("wenv-explorer_*.log"))) == 1

    @posix_only
    def test_default_log_dir_in_home_dir(self, tmp_path, monkeypatch, restore_root_logger):
        monkeypatch.setenv("HOME", str(tmp_path))
        log_dir = tmp_path / ".local" / "share" / "wekavirtualenv" / "logs"
        assert get_log_dir() == log_dir

        setup_logging()
        assert len(list(log_dir.glob("wenvgui_*.log"))) == 1
