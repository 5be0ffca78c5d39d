"""
UI string tables (English / Japanese).

Usage:
    from src.utils.i18n import strings
    strings.tr("status_copied", keys="Ctrl+C")

Unknown keys fall back to English, then to the key itself.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_EN = {
    "app_title": "ShortcutHUD",
    "hud_header": "Shortcuts",
    "tip_pin_on": "Pinned: the list stays open",
    "tip_pin_off": "Not pinned: the list hides when the pointer leaves",
    "tip_minimize": "Minimize",
    "menu_pin_on": "Pin: ON",
    "menu_pin_off": "Pin: OFF",
    "menu_opacity": "Opacity",
    "menu_reload": "Reload shortcuts",
    "menu_exit": "Exit",
    "ph_search": "Search shortcuts...",
    "lbl_no_categories": "No categories.",
    "lbl_no_shortcuts": "No shortcuts in this category.",
    "lbl_no_matches": "No shortcuts match the search.",
    "err_catalog_not_found": "shortcuts.json was not found. Place it in the same folder as the application.",
    "err_catalog_unreadable": "shortcuts.json could not be read.",
    "err_catalog_invalid": "shortcuts.json has an invalid format. Please check the JSON.",
    "status_catalog_failed": "Failed to load shortcut data.",
    "status_reloaded": "Shortcuts reloaded.",
    "status_keys_empty": "There are no keys to copy.",
    "status_copied": "Copied: {keys}",
    "status_copy_failed": "Failed to copy to the clipboard.",
    "err_unexpected_title": "ShortcutHUD",
    "err_unexpected": "An unexpected error occurred.",
}

_JA = {
    "app_title": "ShortcutHUD",
    "hud_header": "ショートカット",
    "tip_pin_on": "ピン留め中: 一覧を常に表示します",
    "tip_pin_off": "ピン留めなし: ポインタが離れると一覧を閉じます",
    "tip_minimize": "最小化",
    "menu_pin_on": "ピン留め: ON",
    "menu_pin_off": "ピン留め: OFF",
    "menu_opacity": "不透明度",
    "menu_reload": "ショートカットを再読込",
    "menu_exit": "終了",
    "ph_search": "ショートカットを検索...",
    "lbl_no_categories": "カテゴリがありません。",
    "lbl_no_shortcuts": "このカテゴリにはショートカットがありません。",
    "lbl_no_matches": "検索に一致するショートカットがありません。",
    "err_catalog_not_found": "shortcuts.json が見つかりません。実行ファイルと同じフォルダに配置してください。",
    "err_catalog_unreadable": "shortcuts.json を読み込めませんでした。",
    "err_catalog_invalid": "shortcuts.json の形式が不正です。JSONを確認してください。",
    "status_catalog_failed": "ショートカットデータの読込に失敗しました。",
    "status_reloaded": "ショートカットを再読込しました。",
    "status_keys_empty": "コピー対象のキーが空です。",
    "status_copied": "コピー: {keys}",
    "status_copy_failed": "クリップボードへのコピーに失敗しました。",
    "err_unexpected_title": "ShortcutHUD",
    "err_unexpected": "予期しないエラーが発生しました。",
}

_TABLES = {"en": _EN, "ja": _JA}


class Strings:
    def __init__(self, language: str = "en"):
        self.language = language if language in _TABLES else "en"

    def set_language(self, language: str) -> None:
        lang = str(language or "").lower()
        if lang not in _TABLES:
            logger.debug("Unsupported language %r; keeping %s", language, self.language)
            return
        self.language = lang

    def tr(self, key: str, **kwargs) -> str:
        text = _TABLES[self.language].get(key)
        if text is None:
            text = _EN.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return text
        return text


strings = Strings()
