"""
Status line for the HUD.
Short-lived messages shown under the header; a new message replaces the
current one and restarts the auto-clear countdown.
"""
from PySide6.QtWidgets import QLabel

from src.ui.timers import DebouncedAction


class StatusMessage(QLabel):
    """
    Transient status text. Hidden while empty.
    """

    DEFAULT_DURATION_MS = 1600

    STATUS_STYLES = {
        "info": {
            "bg": "rgba(30, 64, 175, 200)",
            "fg": "#dbeafe",
        },
        "success": {
            "bg": "rgba(22, 101, 52, 200)",
            "fg": "#dcfce7",
        },
        "warning": {
            "bg": "rgba(146, 64, 14, 200)",
            "fg": "#fef3c7",
        },
        "error": {
            "bg": "rgba(153, 27, 27, 200)",
            "fg": "#fee2e2",
        },
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("statusMessage")
        self.setWordWrap(True)
        self.status_kind = "info"
        self._clear_action = DebouncedAction(self.DEFAULT_DURATION_MS, self.clear_status, self)
        self.setVisible(False)

    def show_status(self, message: str, kind: str = "info", duration_ms: int = DEFAULT_DURATION_MS):
        """Show `message` and clear it after `duration_ms` (replaces any pending message)."""
        self.status_kind = kind if kind in self.STATUS_STYLES else "info"
        style = self.STATUS_STYLES[self.status_kind]
        self.setStyleSheet(f"""
            QLabel#statusMessage {{
                background-color: {style['bg']};
                color: {style['fg']};
                border-radius: 6px;
                padding: 4px 8px;
            }}
        """)
        self.setText(str(message or ""))
        self.setVisible(True)
        self._clear_action.schedule(duration_ms)

    def clear_status(self):
        self._clear_action.cancel()
        self.setText("")
        self.setVisible(False)

    def is_clear_pending(self) -> bool:
        return self._clear_action.is_pending()
