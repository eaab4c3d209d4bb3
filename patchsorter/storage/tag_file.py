"""
tag_file.py - Tag file persistence
Single responsibility: read and write the patch -> categories CSV file.

Format (header line is informational and skipped on read):

    patch,categories...
    <key>,<code>,<code>,...

Keys with no tags are never written. Keys containing commas or quotes are
quoted the csv module's way.
"""
import csv
import logging
import os

from patchsorter.config import CATEGORIES_TEMP_SUFFIX, CSV_HEADER
from patchsorter.domain.categories import Category, canonical_order
from patchsorter.exceptions import TagSaveError

logger = logging.getLogger(__name__)

TagMap = dict[str, frozenset[Category]]


def parse_row(row: list[str]) -> tuple[str, frozenset[Category]] | None:
    """Parse one data row. Unknown codes are dropped; None if nothing usable."""
    fields = [field.strip() for field in row]
    if not fields or not fields[0]:
        return None
    found = set()
    for code in fields[1:]:
        category = Category.by_code(code)
        if category is None:
            if code:
                logger.debug("Ignoring unknown category code %r for %s", code, fields[0])
            continue
        found.add(category)
    if not found:
        return None
    return fields[0], frozenset(found)


def load_tags(path: str) -> TagMap:
    """
    Load the tag file. A missing or unreadable file gives an empty mapping;
    malformed lines are skipped with a warning. Never raises.
    """
    if not os.path.exists(path):
        logger.info("No tag file at %s, starting empty", path)
        return {}

    tags: dict[str, set[Category]] = {}
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            for row in reader:
                if not any(field.strip() for field in row):
                    continue
                parsed = parse_row(row)
                if parsed is None:
                    logger.warning(
                        "Skipping malformed line %d in %s: %r",
                        reader.line_num,
                        path,
                        ",".join(row),
                    )
                    continue
                key, categories = parsed
                tags.setdefault(key, set()).update(categories)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.warning("Failed to load tag file %s: %s", path, e)
        return {}

    logger.info("Loaded tags for %d patches from %s", len(tags), path)
    return {key: frozenset(value) for key, value in tags.items()}


def format_codes(categories) -> str:
    return ",".join(c.code for c in canonical_order(categories))


def _ordered_keys(tags: TagMap, order) -> list[str]:
    keys: list[str] = []
    seen = set()
    for key in order or ():
        if key in tags and key not in seen:
            seen.add(key)
            keys.append(key)
    keys.extend(sorted(k for k in tags if k not in seen))
    return keys


def render_rows(tags: TagMap, order=None) -> list[list[str]]:
    """One row per tagged key; ``order`` lists keys to write first."""
    rows = []
    for key in _ordered_keys(tags, order):
        categories = tags[key]
        if not categories:
            continue
        rows.append([key] + [c.code for c in canonical_order(categories)])
    return rows


def save_tags(path: str, tags: TagMap, order=None) -> None:
    """
    Write the tag file through a sibling temp file and os.replace, so the
    previous file survives a failed write. Raises TagSaveError.
    """
    temp_path = path + CATEGORIES_TEMP_SUFFIX
    rows = render_rows(tags, order)
    try:
        with open(temp_path, "w", encoding="utf-8", newline="") as f:
            f.write(CSV_HEADER + "\n")
            csv.writer(f, lineterminator="\n").writerows(rows)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except OSError as e:
        logger.error("Failed to save tag file %s: %s", path, e)
        try:
            if os.path.exists(temp_path):
                os.remove(temp_path)
        except OSError:
            logger.debug("Could not remove temp file %s", temp_path)
        raise TagSaveError(path, str(e)) from e
    logger.debug("Saved %d tag lines to %s", len(rows), path)
