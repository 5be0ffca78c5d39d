from __future__ import annotations

from dataclasses import dataclass, field

from src.core.catalog_filter import filter_catalog
from src.core.models import AppSettings, ShortcutCatalog, ShortcutCategory


@dataclass
class HudSession:
    """
    Application-session state owned by the HUD window.

    Core services never hold on to these values: the window hands `settings`
    to the SettingsStore for each save and replaces `catalog` wholesale on reload.
    """

    settings: AppSettings = field(default_factory=AppSettings.create_default)
    catalog: ShortcutCatalog = field(default_factory=ShortcutCatalog)
    catalog_error: str = ""
    filter_query: str = ""

    # Suppresses write-through while loaded settings are pushed into widgets.
    applying_ui_state: bool = False

    def visible_categories(self) -> tuple[ShortcutCategory, ...]:
        return filter_catalog(self.catalog, self.filter_query).categories
