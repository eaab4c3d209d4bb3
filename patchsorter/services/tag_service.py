"""
tag_service.py - Tag assignment logic
Single responsibility: toggle and look up categories per patch key.
"""
from patchsorter.domain.categories import Category
from patchsorter.storage.tag_file import TagMap

_EMPTY: frozenset[Category] = frozenset()


def categories_for(tags: TagMap, key: str) -> frozenset[Category]:
    return tags.get(key, _EMPTY)


def toggle(tags: TagMap, key: str, category: Category) -> TagMap:
    """
    Return a new mapping with ``category`` flipped for ``key``.
    A key whose last tag is removed is dropped from the mapping.
    """
    current = categories_for(tags, key)
    updated = current - {category} if category in current else current | {category}
    result = dict(tags)
    if updated:
        result[key] = updated
    else:
        result.pop(key, None)
    return result
