"""
filter_service.py - Filter evaluation
Single responsibility: derive the visible patch list from the full catalog.
"""
from patchsorter.domain.filters import PatchFilter
from patchsorter.services.tag_service import categories_for
from patchsorter.storage.catalog import patch_key
from patchsorter.storage.tag_file import TagMap


def apply(catalog, tags: TagMap, patch_filter: PatchFilter) -> list[str]:
    """Patches from ``catalog`` accepted by ``patch_filter``, in catalog order."""
    return [
        name
        for name in catalog
        if patch_filter.test(categories_for(tags, patch_key(name)))
    ]
