# Controller package: HUD behaviour kept out of the window class so it can be tested against dummy hosts.

from .catalog_controller import CatalogController
from .clipboard_controller import ClipboardController
from .popup_visibility_controller import PopupVisibilityController
from .settings_controller import SettingsController

__all__ = [
    "CatalogController",
    "ClipboardController",
    "PopupVisibilityController",
    "SettingsController",
]
