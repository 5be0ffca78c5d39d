import json

from src.core.catalog_loader import CATALOG_FILE_NAME, ShortcutCatalogLoader
from src.core.models import ShortcutItem
from src.utils.i18n import strings


def _write(tmp_path, payload):
    path = tmp_path / CATALOG_FILE_NAME
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_load_well_formed_catalog_preserves_order(tmp_path):
    _write(
        tmp_path,
        {
            "categories": [
                {
                    "name": "Edit",
                    "items": [
                        {"name": "Copy", "keys": "Ctrl+C", "note": "selection"},
                        {"name": "Paste", "keys": "Ctrl+V", "note": ""},
                    ],
                },
                {"name": "View", "items": [{"name": "Zoom", "keys": "Ctrl++", "note": ""}]},
            ]
        },
    )

    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()

    assert not result.error_message
    assert [c.name for c in result.data.categories] == ["Edit", "View"]
    assert [i.name for i in result.data.categories[0].items] == ["Copy", "Paste"]
    assert result.data.categories[0].items[0] == ShortcutItem("Copy", "Ctrl+C", "selection")
    assert result.data.item_count() == 3


def test_load_missing_file_returns_empty_catalog_and_message(tmp_path):
    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()
    assert result.data.is_empty
    assert result.error_message == strings.tr("err_catalog_not_found")


def test_load_malformed_json_reports_invalid_format(tmp_path):
    _write(tmp_path, '{"categories": [ {"name": "x", ')
    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()
    assert result.data.is_empty
    assert result.error_message == strings.tr("err_catalog_invalid")


def test_load_wrong_shapes_report_invalid_format(tmp_path):
    loader = ShortcutCatalogLoader(base_dir=str(tmp_path))
    for payload in ([1, 2], {"categories": {"name": "x"}}, {"categories": [None]}, {"categories": [{"name": 5}]}):
        _write(tmp_path, payload)
        result = loader.load()
        assert result.data.is_empty
        assert result.error_message == strings.tr("err_catalog_invalid")


def test_load_null_document_reports_unreadable(tmp_path):
    _write(tmp_path, "null")
    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()
    assert result.data.is_empty
    assert result.error_message == strings.tr("err_catalog_unreadable")


def test_missing_and_null_fields_coalesce_to_empty(tmp_path):
    _write(
        tmp_path,
        {
            "categories": [
                {"name": None, "items": None},
                {"items": [{"name": "Only name"}, {"keys": None, "note": "n"}]},
            ]
        },
    )
    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()

    assert result.error_message is None
    first, second = result.data.categories
    assert first.name == "" and first.items == ()
    assert second.name == ""
    assert second.items == (ShortcutItem("Only name", "", ""), ShortcutItem("", "", "n"))


def test_field_names_are_case_insensitive(tmp_path):
    _write(tmp_path, {"Categories": [{"NAME": "Git", "Items": [{"Name": "Commit", "KEYS": "Ctrl+Enter", "Note": "x"}]}]})
    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()
    assert result.error_message is None
    assert result.data.categories[0].name == "Git"
    assert result.data.categories[0].items[0] == ShortcutItem("Commit", "Ctrl+Enter", "x")


def test_empty_object_is_valid_empty_catalog(tmp_path):
    _write(tmp_path, {})
    result = ShortcutCatalogLoader(base_dir=str(tmp_path)).load()
    assert result.data.is_empty
    assert result.error_message is None


def test_each_load_returns_fresh_catalog(tmp_path):
    _write(tmp_path, {"categories": [{"name": "A", "items": []}]})
    loader = ShortcutCatalogLoader(base_dir=str(tmp_path))
    first = loader.load().data
    _write(tmp_path, {"categories": [{"name": "B", "items": []}]})
    second = loader.load().data
    assert first.categories[0].name == "A"
    assert second.categories[0].name == "B"
