"""
HUD settings store
Loads and saves the small per-user settings record (opacity, pin, position).
"""

from __future__ import annotations

import json
import logging
import os
import platform
from typing import Any, Optional

from src.core.models import (
    DEFAULT_OPACITY,
    DEFAULT_WINDOW_LEFT,
    DEFAULT_WINDOW_TOP,
    AppSettings,
)

logger = logging.getLogger(__name__)

APP_DIR_NAME = "ShortcutHUD"
SETTINGS_FILE_NAME = "settings.json"


def _require_number(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    # bool is an int subclass; a JSON true/false is not a number here.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {type(value).__name__}")
    return float(value)


def _require_bool(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean, got {type(value).__name__}")
    return value


class SettingsStore:
    """
    Reads/writes `settings.json` in the per-user application data folder.

    Neither `load` nor `save` raises: a missing or broken file yields the
    defaults, and write failures are dropped (settings are UI preferences only).
    """

    def __init__(self, settings_path: Optional[str] = None):
        self.settings_path = settings_path or self.default_settings_path()

    @staticmethod
    def default_settings_path() -> str:
        if os.name == "nt":
            base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA") or os.path.expanduser("~")
        elif platform.system() == "Darwin":
            base = os.path.join(os.path.expanduser("~"), "Library", "Application Support")
        else:
            base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
        return os.path.join(base, APP_DIR_NAME, SETTINGS_FILE_NAME)

    def load(self) -> AppSettings:
        try:
            if not os.path.exists(self.settings_path):
                return AppSettings.create_default()

            with open(self.settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            if data is None:
                return AppSettings.create_default()
            if not isinstance(data, dict):
                raise ValueError(f"settings root must be an object, got {type(data).__name__}")

            settings = AppSettings(
                opacity=_require_number(data, "Opacity", DEFAULT_OPACITY),
                is_pinned=_require_bool(data, "IsPinned", False),
                window_left=_require_number(data, "WindowLeft", DEFAULT_WINDOW_LEFT),
                window_top=_require_number(data, "WindowTop", DEFAULT_WINDOW_TOP),
            )
            return settings.sanitized()
        except Exception:
            logger.debug("Failed to load settings from %s; using defaults", self.settings_path, exc_info=True)
            return AppSettings.create_default()

    def save(self, settings: AppSettings) -> None:
        try:
            safe = settings.sanitized()
            settings_dir = os.path.dirname(os.path.abspath(self.settings_path))
            if settings_dir:
                os.makedirs(settings_dir, exist_ok=True)

            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self.to_json_dict(safe), f, ensure_ascii=False, indent=2)
        except Exception:
            logger.debug("Failed to save settings to %s", self.settings_path, exc_info=True)

    @staticmethod
    def to_json_dict(settings: AppSettings) -> dict[str, Any]:
        return {
            "Opacity": float(settings.opacity),
            "IsPinned": bool(settings.is_pinned),
            "WindowLeft": float(settings.window_left),
            "WindowTop": float(settings.window_top),
        }
