"""Tests for config.py path resolution."""

import os

from patchsorter import config


class TestGetBasePath:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PATCHSORTER_BASE_DIR", str(tmp_path))
        assert config.get_base_path() == str(tmp_path)

    def test_defaults_to_cwd(self, monkeypatch, tmp_path):
        monkeypatch.delenv("PATCHSORTER_BASE_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert config.get_base_path() == os.getcwd()

    def test_frozen_uses_executable_dir(self, monkeypatch, tmp_path):
        monkeypatch.delenv("PATCHSORTER_BASE_DIR", raising=False)
        monkeypatch.setattr(config.sys, "frozen", True, raising=False)
        monkeypatch.setattr(config.sys, "executable", str(tmp_path / "PaperPatchSorter.exe"))
        assert config.get_base_path() == str(tmp_path)


class TestPaths:
    def test_patches_dir_inside_clone(self):
        assert config.PATCHES_DIR == os.path.join(config.CLONE_DIR, "patches", "server")

    def test_categories_file_name(self):
        assert os.path.basename(config.CATEGORIES_FILE) == "paper-categories.csv"
