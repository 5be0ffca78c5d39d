from __future__ import annotations

import logging
from typing import Hashable

from PySide6.QtCore import QObject, Signal

from src.ui.timers import DebouncedAction

logger = logging.getLogger(__name__)

REGION_HEADER = "header"
REGION_CATEGORY_POPUP = "category_popup"
REGION_DETAIL_POPUP = "detail_popup"


class PopupVisibilityController(QObject):
    """
    Show/hide/pin state machine for the HUD popups.

    Pointer hover is tracked as a set of region ids. Leaving a region only
    schedules a close after CLOSE_DELAY_MS; entering any region cancels it, so
    moving from the header into a popup never closes anything. While pinned the
    popups stay open until the window is minimized.

    Emits:
        popup_opened: closed -> open transition.
        popup_closed: open -> closed transition (the shell closes every popup).
    """

    CLOSE_DELAY_MS = 200

    popup_opened = Signal()
    popup_closed = Signal()

    def __init__(self, parent=None, *, pinned: bool = False, close_delay_ms: int = CLOSE_DELAY_MS):
        super().__init__(parent)
        self._pinned = bool(pinned)
        self._is_open = False
        self._regions_hovered: set[Hashable] = set()
        self._close_action = DebouncedAction(close_delay_ms, self.on_close_timer_fired, self)

    @property
    def pinned(self) -> bool:
        return self._pinned

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def regions_hovered(self) -> frozenset:
        return frozenset(self._regions_hovered)

    def is_close_pending(self) -> bool:
        return self._close_action.is_pending()

    def reset(self, pinned: bool) -> None:
        """Session start: open exactly when the loaded settings say pinned."""
        self._close_action.cancel()
        self._regions_hovered.clear()
        self._pinned = bool(pinned)
        if self._pinned:
            self._open()
        else:
            self._close()

    def set_pinned(self, value: bool) -> None:
        self._pinned = bool(value)
        if self._pinned:
            self._close_action.cancel()
            self._open()
        else:
            # Hover grace period still applies; the timer decides.
            self._schedule_close()

    def on_toggle_pin(self) -> bool:
        """Flip the pin. Returns the new value; the caller persists it."""
        self.set_pinned(not self._pinned)
        return self._pinned

    def on_region_enter(self, region_id: Hashable) -> None:
        self._regions_hovered.add(region_id)
        self._close_action.cancel()
        self._open()

    def on_region_leave(self, region_id: Hashable) -> None:
        if region_id not in self._regions_hovered:
            return
        self._regions_hovered.remove(region_id)
        if self._pinned:
            return
        self._schedule_close()

    def on_close_timer_fired(self) -> None:
        if self._pinned or self._regions_hovered:
            return
        self._close()

    def on_escape(self) -> bool:
        """Returns True when the key press closed the popups."""
        if self._pinned or not self._is_open:
            return False
        self._close_action.cancel()
        self._close()
        return True

    def on_window_minimized(self) -> None:
        self._close_action.cancel()
        self._regions_hovered.clear()
        self._close()

    def on_window_restored(self) -> None:
        if self._pinned:
            self._open()

    def _schedule_close(self) -> None:
        self._close_action.schedule()

    def _open(self) -> None:
        if self._is_open:
            return
        self._is_open = True
        logger.debug("Popup opened (pinned=%s, regions=%s)", self._pinned, sorted(map(str, self._regions_hovered)))
        self.popup_opened.emit()

    def _close(self) -> None:
        if not self._is_open:
            return
        self._is_open = False
        logger.debug("Popup closed (pinned=%s)", self._pinned)
        self.popup_closed.emit()
