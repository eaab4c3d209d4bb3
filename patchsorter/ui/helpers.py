"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across the UI.
"""
from patchsorter.config import COLOR_ROW_EVEN, COLOR_ROW_ODD
from patchsorter.domain.categories import Category


def row_color(index: int) -> str:
    return COLOR_ROW_EVEN if index % 2 == 0 else COLOR_ROW_ODD


def shortcut_legend() -> list[str]:
    """One "label: key" line per category, in canonical order."""
    return [f"{c.label}: {c.shortcut}" for c in Category.all()]


def move_selection(selected: int | None, delta: int, count: int) -> int | None:
    """Clamp a keyboard-driven selection move to the visible list."""
    if count == 0:
        return None
    if selected is None:
        return 0 if delta >= 0 else count - 1
    return max(0, min(count - 1, selected + delta))
