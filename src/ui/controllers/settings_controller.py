from __future__ import annotations

import logging
from typing import Any

from src.core.models import AppSettings, clamp_opacity
from src.core.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class SettingsController:
    """
    Write-through persistence of the HUD settings.

    Every change to opacity, position or pin is saved immediately. Saves are
    skipped while `host.session.applying_ui_state` is set, i.e. while loaded
    values are being pushed into widgets.
    """

    def __init__(self, store: SettingsStore):
        self.store = store

    def load_into(self, host: Any) -> AppSettings:
        session = host.session
        session.applying_ui_state = True
        try:
            settings = self.store.load()
            session.settings = settings
            host.apply_settings(settings)
        finally:
            session.applying_ui_state = False
        return session.settings

    def persist(self, host: Any) -> None:
        if host.session.applying_ui_state:
            return
        self.store.save(host.session.settings)

    def on_opacity_percent_changed(self, host: Any, percent: float) -> None:
        if host.session.applying_ui_state:
            return
        opacity = clamp_opacity(float(percent) / 100.0)
        host.setWindowOpacity(opacity)
        host.session.settings.opacity = opacity
        self.persist(host)

    def on_window_moved(self, host: Any, left: float, top: float) -> None:
        host.session.settings.window_left = float(left)
        host.session.settings.window_top = float(top)
        self.persist(host)

    def on_toggle_pin(self, host: Any) -> bool:
        pinned = host.popup_controller.on_toggle_pin()
        host.session.settings.is_pinned = pinned
        try:
            host.update_pin_ui(pinned)
        except Exception:
            logger.exception("Failed to refresh pin indicators")
        self.persist(host)
        return pinned

    def on_closing(self, host: Any, left: float, top: float, opacity: float) -> None:
        settings = host.session.settings
        settings.window_left = float(left)
        settings.window_top = float(top)
        settings.opacity = float(opacity)
        self.store.save(settings)
