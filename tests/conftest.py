"""
Shared test fixtures for patch sorter tests.
Provides a patch directory and a tag file path under tmp_path.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def patches_dir(tmp_path):
    """A patch directory with three patches and some unrelated files."""
    d = tmp_path / "patches"
    d.mkdir()
    for name in (
        "0002-b.patch",
        "0001-a.patch",
        "0003-c.patch",
        "README.md",
        "notes.txt",
    ):
        (d / name).write_text("diff --git a/x b/x\n")
    return d


@pytest.fixture
def categories_file(tmp_path):
    return tmp_path / "paper-categories.csv"
