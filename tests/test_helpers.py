"""Tests for UI helper functions (no flet needed)."""

import pytest

from patchsorter.config import COLOR_ROW_EVEN, COLOR_ROW_ODD
from patchsorter.ui.helpers import move_selection, row_color, shortcut_legend


class TestRowColor:
    def test_alternates(self):
        assert row_color(0) == COLOR_ROW_EVEN
        assert row_color(1) == COLOR_ROW_ODD
        assert row_color(2) == COLOR_ROW_EVEN


class TestShortcutLegend:
    def test_lines(self):
        assert shortcut_legend() == [
            "api: A",
            "performance: P",
            "bug_fix: F",
            "security: S",
            "fix_spigot_bullshit: T",
            "other: O",
        ]


class TestMoveSelection:
    @pytest.mark.parametrize(
        "selected, delta, count, expected",
        [
            (None, 1, 3, 0),
            (None, -1, 3, 2),
            (0, 1, 3, 1),
            (2, 1, 3, 2),
            (0, -1, 3, 0),
            (1, 0, 0, None),
            (5, -1, 3, 2),
        ],
    )
    def test_moves(self, selected, delta, count, expected):
        assert move_selection(selected, delta, count) == expected
