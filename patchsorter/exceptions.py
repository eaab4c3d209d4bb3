"""
exceptions.py - Patch sorter exception hierarchy
Single responsibility: error types shared by storage, services and UI.
"""


class PatchSorterError(Exception):
    """Base class for failures the UI reports to the user."""


class BootstrapError(PatchSorterError):
    """Fetching the patch source failed; startup cannot continue."""


class CatalogError(PatchSorterError):
    """The patch directory could not be listed."""


class TagSaveError(PatchSorterError):
    """Writing the tag file failed. In-memory tags are still valid."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to save tags to {path}: {reason}")
        self.path = path
        self.reason = reason
