"""
patch_store.py - Patch tagging store
Single responsibility: own the catalog, tag mapping and active filter, and
expose the operations the UI calls.
"""
import logging
import os
from types import MappingProxyType

from patchsorter.domain.categories import Category
from patchsorter.domain.filters import PatchFilter
from patchsorter.services import filter_service, tag_service
from patchsorter.storage import catalog as catalog_repo
from patchsorter.storage import tag_file
from patchsorter.storage.catalog import patch_key
from patchsorter.storage.tag_file import TagMap
from patchsorter.utils import launcher

logger = logging.getLogger(__name__)


class PatchStore:
    """
    State behind the patch list. Every mutation returns the new value so a
    caller can re-render without reaching into the store.

    The catalog is a snapshot taken by load(); the visible list is only
    recomputed by set_filter(), always from the full catalog.
    """

    def __init__(self, patches_dir: str, categories_file: str):
        self.patches_dir = patches_dir
        self.categories_file = categories_file
        self._catalog: tuple[str, ...] = ()
        self._tags: TagMap = {}
        self._filter = PatchFilter.accept_all()
        self._visible: list[str] = []

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, names=None) -> list[str]:
        """
        Build the catalog from ``names`` (or a listing of patches_dir) and
        load the tag file. Returns the visible patches.
        """
        if names is None:
            names = catalog_repo.list_patch_dir(self.patches_dir)
        self._catalog = tuple(catalog_repo.load_catalog(names))
        self._tags = self._rekey_full_names(tag_file.load_tags(self.categories_file))
        logger.info("Catalog loaded: %d patches", len(self._catalog))
        return self.set_filter(PatchFilter.accept_all())

    def _rekey_full_names(self, tags: TagMap) -> TagMap:
        """Move tags stored under a full catalog filename onto its patch key."""
        tags = dict(tags)
        for name in self._catalog:
            if name not in tags:
                continue
            key = patch_key(name)
            if key == name:
                continue
            categories = tags.pop(name)
            tags[key] = tags.get(key, frozenset()) | categories
            logger.debug("Re-keyed tags for %s to %s", name, key)
        return tags

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> tuple[str, ...]:
        return self._catalog

    @property
    def tags(self):
        return MappingProxyType(self._tags)

    @property
    def active_filter(self) -> PatchFilter:
        return self._filter

    def visible_patches(self) -> list[str]:
        return list(self._visible)

    def categories_for(self, name: str) -> frozenset[Category]:
        return tag_service.categories_for(self._tags, patch_key(name))

    def display_name(self, name: str) -> str:
        categories = self.categories_for(name)
        if not categories:
            return name
        return f"{name} {tag_file.format_codes(categories)}"

    def get_visible_patches(self) -> list[str]:
        """Visible patch names, each followed by its tag codes if it has any."""
        return [self.display_name(name) for name in self._visible]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_filter(self, patch_filter: PatchFilter) -> list[str]:
        self._filter = patch_filter
        self._visible = filter_service.apply(self._catalog, self._tags, patch_filter)
        return self.visible_patches()

    def toggle_tag(self, index: int, category: Category) -> frozenset[Category]:
        """
        Flip ``category`` on the visible patch at ``index`` and save.
        Raises IndexError for a bad index and TagSaveError if the file could
        not be written; the in-memory change is kept either way.
        """
        name = self._patch_at(index)
        key = patch_key(name)
        self._tags = tag_service.toggle(self._tags, key, category)
        updated = tag_service.categories_for(self._tags, key)
        logger.info("%s -> %s", key, tag_file.format_codes(updated) or "(none)")
        self.save()
        return updated

    def save(self) -> None:
        order = [patch_key(name) for name in self._catalog]
        tag_file.save_tags(self.categories_file, self._tags, order)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def patch_path(self, index: int) -> str:
        return os.path.join(self.patches_dir, self._patch_at(index))

    def open_patch(self, index: int) -> str:
        """Open the visible patch at ``index`` in the default application."""
        path = self.patch_path(index)
        launcher.open_path(path)
        return path

    def _patch_at(self, index: int) -> str:
        if index < 0 or index >= len(self._visible):
            raise IndexError(f"No visible patch at index {index}")
        return self._visible[index]
