from src.core.catalog_filter import filter_catalog
from src.core.models import ShortcutCatalog, ShortcutCategory, ShortcutItem


CATALOG = ShortcutCatalog(
    categories=(
        ShortcutCategory(
            "Editing",
            (
                ShortcutItem("Copy", "Ctrl+C", ""),
                ShortcutItem("Paste", "Ctrl+V", "plain text with Shift"),
            ),
        ),
        ShortcutCategory(
            "Browser",
            (
                ShortcutItem("New tab", "Ctrl+T", ""),
                ShortcutItem("Reopen tab", "Ctrl+Shift+T", ""),
            ),
        ),
    )
)


def test_blank_query_returns_catalog_unchanged():
    assert filter_catalog(CATALOG, "") is CATALOG
    assert filter_catalog(CATALOG, "   ") is CATALOG


def test_category_name_match_keeps_all_items():
    out = filter_catalog(CATALOG, "brow")
    assert [c.name for c in out.categories] == ["Browser"]
    assert len(out.categories[0].items) == 2


def test_item_match_is_case_insensitive_over_name_keys_and_note():
    out = filter_catalog(CATALOG, "SHIFT")
    assert [c.name for c in out.categories] == ["Editing", "Browser"]
    assert [i.name for i in out.categories[0].items] == ["Paste"]
    assert [i.name for i in out.categories[1].items] == ["Reopen tab"]


def test_categories_without_matches_are_dropped():
    out = filter_catalog(CATALOG, "copy")
    assert [c.name for c in out.categories] == ["Editing"]
    assert [i.keys for i in out.categories[0].items] == ["Ctrl+C"]

    assert filter_catalog(CATALOG, "no such shortcut").is_empty
