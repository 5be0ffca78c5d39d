"""
Shortcut catalog loader
Reads `shortcuts.json` from the application folder.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Optional

from src.core.models import CatalogLoadResult, ShortcutCatalog, ShortcutCategory, ShortcutItem
from src.utils.i18n import strings

logger = logging.getLogger(__name__)

CATALOG_FILE_NAME = "shortcuts.json"


class CatalogFormatError(ValueError):
    pass


def _lower_keys(record: Any, what: str) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise CatalogFormatError(f"{what} must be an object, got {type(record).__name__}")
    return {str(k).lower(): v for k, v in record.items()}


def _text(record: dict[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CatalogFormatError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _list(record: dict[str, Any], key: str) -> list:
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogFormatError(f"'{key}' must be an array, got {type(value).__name__}")
    return value


def parse_catalog(data: Any) -> ShortcutCatalog:
    """Build a catalog from decoded JSON, coalescing missing fields to empty values."""
    root = _lower_keys(data, "root")
    categories = []
    for raw_category in _list(root, "categories"):
        category = _lower_keys(raw_category, "category")
        items = []
        for raw_item in _list(category, "items"):
            item = _lower_keys(raw_item, "item")
            items.append(
                ShortcutItem(
                    name=_text(item, "name"),
                    keys=_text(item, "keys"),
                    note=_text(item, "note"),
                )
            )
        categories.append(ShortcutCategory(name=_text(category, "name"), items=tuple(items)))
    return ShortcutCatalog(categories=tuple(categories))


def default_base_dir() -> str:
    """Folder of the running program (the executable when frozen, else the launched script)."""
    if getattr(sys, "frozen", False):
        return os.path.dirname(os.path.abspath(sys.executable))
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if script:
        return os.path.dirname(os.path.abspath(script))
    return os.getcwd()


class ShortcutCatalogLoader:
    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = base_dir or default_base_dir()

    @property
    def catalog_path(self) -> str:
        return os.path.join(self.base_dir, CATALOG_FILE_NAME)

    def load(self) -> CatalogLoadResult:
        """
        Load the catalog. Never raises.

        Returns:
            CatalogLoadResult with an empty catalog and an advisory message when
            the file is missing, unreadable or malformed.
        """
        path = self.catalog_path
        if not os.path.isfile(path):
            logger.warning("Shortcut catalog not found: %s", path)
            return CatalogLoadResult(ShortcutCatalog(), strings.tr("err_catalog_not_found"))

        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)

            if data is None:
                logger.warning("Shortcut catalog is empty (null): %s", path)
                return CatalogLoadResult(ShortcutCatalog(), strings.tr("err_catalog_unreadable"))

            catalog = parse_catalog(data)
        except Exception:
            logger.warning("Invalid shortcut catalog: %s", path, exc_info=True)
            return CatalogLoadResult(ShortcutCatalog(), strings.tr("err_catalog_invalid"))

        logger.debug("Loaded %d categories / %d items from %s", len(catalog.categories), catalog.item_count(), path)
        return CatalogLoadResult(catalog)
