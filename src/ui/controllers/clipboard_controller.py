from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtGui import QGuiApplication

from src.core.models import ShortcutItem
from src.utils.i18n import strings

logger = logging.getLogger(__name__)


class ClipboardController:
    def __init__(self, clipboard_provider: Optional[Callable[[], Any]] = None):
        self._clipboard_provider = clipboard_provider or QGuiApplication.clipboard

    def copy_keys(self, host: Any, item: ShortcutItem) -> bool:
        keys = str(getattr(item, "keys", "") or "")
        if not keys.strip():
            host.show_status(strings.tr("status_keys_empty"), kind="warning")
            return False

        try:
            clipboard = self._clipboard_provider()
            clipboard.setText(keys)
        except Exception:
            logger.warning("Clipboard copy failed", exc_info=True)
            host.show_status(strings.tr("status_copy_failed"), kind="error")
            return False

        host.show_status(strings.tr("status_copied", keys=keys), kind="success")
        return True
