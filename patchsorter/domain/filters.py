"""
filters.py - Filter variants
Single responsibility: describe which patches the list should show.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from patchsorter.domain.categories import Category


class FilterKind(Enum):
    ALL = "all"
    UNTAGGED = "untagged"
    CATEGORY = "category"


@dataclass(frozen=True)
class PatchFilter:
    kind: FilterKind = FilterKind.ALL
    category: Optional[Category] = None

    def __post_init__(self):
        if (self.kind is FilterKind.CATEGORY) != (self.category is not None):
            raise ValueError("category is required for, and only for, CATEGORY filters")

    @classmethod
    def accept_all(cls) -> "PatchFilter":
        return cls(FilterKind.ALL)

    @classmethod
    def untagged(cls) -> "PatchFilter":
        return cls(FilterKind.UNTAGGED)

    @classmethod
    def for_category(cls, category: Category) -> "PatchFilter":
        return cls(FilterKind.CATEGORY, category)

    @classmethod
    def options(cls) -> list["PatchFilter"]:
        """All selectable filters, in dropdown order."""
        return [cls.accept_all(), cls.untagged()] + [
            cls.for_category(c) for c in Category.all()
        ]

    @classmethod
    def from_label(cls, label: str) -> "PatchFilter":
        for option in cls.options():
            if option.label == label:
                return option
        raise ValueError(f"Unknown filter: {label!r}")

    @property
    def label(self) -> str:
        if self.kind is FilterKind.ALL:
            return "none"
        if self.kind is FilterKind.UNTAGGED:
            return "uncategorized"
        return self.category.label

    def test(self, categories) -> bool:
        """Evaluate the filter against one patch's tag set."""
        if self.kind is FilterKind.ALL:
            return True
        if self.kind is FilterKind.UNTAGGED:
            return not categories
        return self.category in categories
