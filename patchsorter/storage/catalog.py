"""
catalog.py - Patch catalog
Single responsibility: pick patch files out of a directory listing and put
them in numeric order.
"""
import logging
import os
import re

from patchsorter.config import PATCH_EXTENSION
from patchsorter.exceptions import CatalogError

logger = logging.getLogger(__name__)

PATCH_NAME_RE = re.compile(r"(\d+)-.+" + re.escape(PATCH_EXTENSION), re.ASCII)
_PREFIX_RE = re.compile(r"^\d+-", re.ASCII)

# Prefixes beyond a signed 32-bit int are treated as non-matching
MAX_PATCH_INDEX = 2**31 - 1


def parse_patch_name(name: str) -> tuple[int, str] | None:
    """Return (index, name) for a patch file name, or None if it is not one."""
    match = PATCH_NAME_RE.fullmatch(name)
    if not match:
        return None
    index = int(match.group(1))
    if index > MAX_PATCH_INDEX:
        logger.debug("Ignoring %s: numeric prefix out of range", name)
        return None
    return index, name


def patch_key(name: str) -> str:
    """Strip the leading "<digits>-" so tags survive renumbering."""
    return _PREFIX_RE.sub("", name, count=1)


def load_catalog(names) -> list[str]:
    """
    Keep the patch files from a directory snapshot, ordered by their
    numeric prefix. Ties keep the snapshot's order (sorted() is stable).
    """
    parsed = [p for p in (parse_patch_name(n) for n in names) if p is not None]
    return [name for _index, name in sorted(parsed, key=lambda p: p[0])]


def list_patch_dir(path: str) -> list[str]:
    """Snapshot the file names in the patch directory."""
    try:
        with os.scandir(path) as entries:
            names = [e.name for e in entries if e.is_file()]
    except OSError as e:
        raise CatalogError(f"Cannot list patch directory {path}: {e}") from e
    # scandir order is filesystem dependent
    names.sort()
    logger.info("Found %d files in %s", len(names), path)
    return names
