"""Tests for opening files with the OS default handler."""

from unittest.mock import patch

import pytest

from patchsorter.utils import launcher


class TestOpenPath:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            launcher.open_path(str(tmp_path / "nope.patch"))

    def test_linux_uses_xdg_open(self, tmp_path, monkeypatch):
        target = tmp_path / "0001-a.patch"
        target.write_text("")
        monkeypatch.setattr(launcher.sys, "platform", "linux")
        with patch.object(launcher.subprocess, "Popen") as popen:
            launcher.open_path(str(target))
        popen.assert_called_once_with(["xdg-open", str(target)])

    def test_macos_uses_open(self, tmp_path, monkeypatch):
        target = tmp_path / "0001-a.patch"
        target.write_text("")
        monkeypatch.setattr(launcher.sys, "platform", "darwin")
        with patch.object(launcher.subprocess, "Popen") as popen:
            launcher.open_path(str(target))
        popen.assert_called_once_with(["open", str(target)])
