from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame


class HoverRegionFrame(QFrame):
    """
    Frame that reports pointer enter/leave under a fixed region id, plus Escape
    presses while it has focus. Popup windows and the HUD header derive from it.
    """

    region_entered = Signal(object)
    region_left = Signal(object)
    escape_pressed = Signal()

    def __init__(self, region_id, parent=None):
        super().__init__(parent)
        self.region_id = region_id

    def enterEvent(self, event):
        self.region_entered.emit(self.region_id)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.region_left.emit(self.region_id)
        super().leaveEvent(event)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.escape_pressed.emit()
            event.accept()
            return
        super().keyPressEvent(event)
