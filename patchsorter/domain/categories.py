"""
categories.py - Category registry
Single responsibility: the closed set of patch tags and their short codes.

Declaration order is the canonical order used when tags are written out.
"""
from enum import Enum


class Category(Enum):
    API = ("api", "A")
    PERFORMANCE = ("perf", "P")
    BUG_FIX = ("fix", "F")
    SECURITY = ("sec", "S")
    FIX_SPIGOT_BULLSHIT = ("spigot", "T")
    OTHER = ("other", "O")

    def __init__(self, code: str, shortcut: str):
        self.code = code
        self.shortcut = shortcut

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def all(cls) -> tuple["Category", ...]:
        return tuple(cls)

    @classmethod
    def by_code(cls, code: str) -> "Category | None":
        """Look up a category by its persisted code; None if unrecognised."""
        for category in cls:
            if category.code == code:
                return category
        return None

    @classmethod
    def by_shortcut(cls, key: str) -> "Category | None":
        if not key:
            return None
        key = key.upper()
        for category in cls:
            if category.shortcut == key:
                return category
        return None


def canonical_order(categories) -> list[Category]:
    """Return the given categories sorted by declaration order, deduplicated."""
    present = set(categories)
    return [c for c in Category if c in present]
