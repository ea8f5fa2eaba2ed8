"""Tests for the system module."""
import os
import shutil

from unittest.mock import patch
from speedread.system import ensure_parent_dir, get_terminal_size, user_config_dir


class TestEnsureParentDir:
    """Tests for ensure_parent_dir function."""

    def test_ensure_parent_dir_creates_directory(self, tmp_path):
        """Test that parent directory is created if it doesn't exist."""
        file_path = tmp_path / "subdir1" / "subdir2" / "file.txt"
        ensure_parent_dir(file_path)

        assert file_path.parent.exists()
        assert file_path.parent.is_dir()

    def test_ensure_parent_dir_exists_already(self, tmp_path):
        """Test that existing parent directory is not affected."""
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()
        (existing_dir / "keep.txt").write_text("x")

        ensure_parent_dir(existing_dir / "file.txt")

        assert (existing_dir / "keep.txt").read_text() == "x"


class TestUserConfigDir:
    """Tests for user_config_dir function."""

    def test_under_home(self, tmp_path, monkeypatch):
        """Test that the config dir is ~/.config/speedread."""
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_config_dir() == tmp_path / ".config" / "speedread"

    def test_not_created(self, tmp_path, monkeypatch):
        """Test that looking up the directory does not create it."""
        monkeypatch.setenv("HOME", str(tmp_path))
        user_config_dir()
        assert not (tmp_path / ".config").exists()


class TestGetTerminalSize:
    """Tests for get_terminal_size function."""

    def test_reported_size(self):
        """Test that the probed size is returned as (cols, rows)."""
        with patch("speedread.system.shutil.get_terminal_size", return_value=os.terminal_size((120, 40))):
            assert get_terminal_size() == (120, 40)

    def test_zero_size_falls_back(self):
        """Test that a zero size reported by the terminal is replaced."""
        with patch("speedread.system.shutil.get_terminal_size", return_value=os.terminal_size((0, 0))):
            assert get_terminal_size() == (80, 24)

    def test_fallback_passed(self):
        """Test that 80x24 is the fallback when no terminal is attached."""
        with patch.object(shutil, "get_terminal_size", return_value=os.terminal_size((80, 24))) as probe:
            get_terminal_size()
        probe.assert_called_once_with(fallback=(80, 24))
