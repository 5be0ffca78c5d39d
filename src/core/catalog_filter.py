from __future__ import annotations

from src.core.models import ShortcutCatalog, ShortcutCategory, ShortcutItem


def _item_matches(item: ShortcutItem, needle: str) -> bool:
    return needle in item.name.casefold() or needle in item.keys.casefold() or needle in item.note.casefold()


def filter_catalog(catalog: ShortcutCatalog, query: str) -> ShortcutCatalog:
    """
    Case-insensitive substring filter.

    A category whose name matches keeps all of its items; otherwise only the
    matching items are kept and the category is dropped when none match. A blank query
    returns the catalog unchanged.
    """
    needle = str(query or "").strip().casefold()
    if not needle:
        return catalog

    out: list[ShortcutCategory] = []
    for category in catalog.categories:
        if needle in category.name.casefold():
            out.append(category)
            continue
        items = tuple(item for item in category.items if _item_matches(item, needle))
        if items:
            out.append(ShortcutCategory(name=category.name, items=items))
    return ShortcutCatalog(categories=tuple(out))
