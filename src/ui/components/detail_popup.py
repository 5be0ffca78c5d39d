"""
Detail popup
Lists the shortcuts of the hovered category; clicking a row copies its keys.
"""
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QVBoxLayout, QHBoxLayout, QFrame, QLabel, QScrollArea, QWidget

from src.ui.components.hover_region import HoverRegionFrame
from src.utils.i18n import strings


class ShortcutRow(QFrame):
    clicked = Signal(object)

    def __init__(self, item, parent=None):
        super().__init__(parent)
        self.item = item
        self.setObjectName("shortcutRow")
        self.setAttribute(Qt.WA_Hover)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(item.keys)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(2)

        top = QHBoxLayout()
        top.setSpacing(8)
        self.keys_label = QLabel(item.keys)
        self.keys_label.setObjectName("keycap")
        self.name_label = QLabel(item.name)
        self.name_label.setWordWrap(True)
        top.addWidget(self.keys_label)
        top.addWidget(self.name_label, 1)
        layout.addLayout(top)

        self.note_label = None
        if item.note:
            self.note_label = QLabel(item.note)
            self.note_label.setObjectName("shortcutNote")
            self.note_label.setWordWrap(True)
            layout.addWidget(self.note_label)

        for label in self.findChildren(QLabel):
            label.setAttribute(Qt.WA_TransparentForMouseEvents)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit(self.item)
        super().mouseReleaseEvent(event)


class DetailPopup(HoverRegionFrame):
    item_clicked = Signal(object)

    POPUP_WIDTH = 320
    MAX_HEIGHT = 420

    def __init__(self, region_id, parent=None):
        super().__init__(region_id, parent)
        self.setWindowFlags(Qt.Tool | Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setAttribute(Qt.WA_ShowWithoutActivating)
        self.category = None
        self.rows = []
        self._setup_ui()

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        self.panel = QFrame()
        self.panel.setObjectName("hudPopup")
        outer.addWidget(self.panel)

        layout = QVBoxLayout(self.panel)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(4)

        self.header_label = QLabel()
        self.header_label.setObjectName("popupTitle")
        layout.addWidget(self.header_label)

        self.empty_label = QLabel(strings.tr("lbl_no_shortcuts"))
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.scroll.setStyleSheet("QScrollArea { background: transparent; }")

        self.rows_host = QWidget()
        self.rows_host.setStyleSheet("background: transparent;")
        self.rows_layout = QVBoxLayout(self.rows_host)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(2)
        self.rows_layout.addStretch()
        self.scroll.setWidget(self.rows_host)
        layout.addWidget(self.scroll)

        self.setFixedWidth(self.POPUP_WIDTH)

    def show_category(self, category):
        self.clear()
        self.category = category
        self.header_label.setText(category.name)

        for item in category.items:
            row = ShortcutRow(item)
            row.clicked.connect(self.item_clicked.emit)
            self.rows_layout.insertWidget(self.rows_layout.count() - 1, row)
            self.rows.append(row)

        self.empty_label.setVisible(not self.rows)
        self.scroll.setVisible(bool(self.rows))

        content_h = self.rows_host.sizeHint().height()
        self.scroll.setFixedHeight(min(content_h, self.MAX_HEIGHT))
        self.adjustSize()

    def clear(self):
        for row in self.rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self.rows = []
        self.category = None
        self.header_label.setText("")
        self.empty_label.setVisible(False)
