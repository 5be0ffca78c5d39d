"""
Category popup
Search box and category list shown under the HUD header.
"""
from PySide6.QtCore import Qt, Signal, QRect
from PySide6.QtWidgets import QVBoxLayout, QFrame, QLabel, QLineEdit, QListWidget, QListWidgetItem, QAbstractItemView

from src.ui.components.hover_region import HoverRegionFrame
from src.utils.i18n import strings


class CategoryPopup(HoverRegionFrame):
    """Frameless tool window listing the (filtered) categories."""

    # (index into the displayed categories, row rect in global coordinates)
    category_hovered = Signal(int, QRect)
    filter_changed = Signal(str)

    MAX_VISIBLE_ROWS = 14
    POPUP_WIDTH = 240

    def __init__(self, region_id, parent=None):
        super().__init__(region_id, parent)
        self.setWindowFlags(Qt.Tool | Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setAttribute(Qt.WA_ShowWithoutActivating)
        self._categories = ()
        self._setup_ui()

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        self.panel = QFrame()
        self.panel.setObjectName("hudPopup")
        outer.addWidget(self.panel)

        layout = QVBoxLayout(self.panel)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self.search_box = QLineEdit()
        self.search_box.setObjectName("searchBox")
        self.search_box.setPlaceholderText(strings.tr("ph_search"))
        self.search_box.setClearButtonEnabled(True)
        self.search_box.textChanged.connect(self.filter_changed.emit)
        layout.addWidget(self.search_box)

        self.info_label = QLabel()
        self.info_label.setObjectName("infoLabel")
        self.info_label.setWordWrap(True)
        self.info_label.setVisible(False)
        layout.addWidget(self.info_label)

        self.empty_label = QLabel()
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setWordWrap(True)
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

        self.category_list = QListWidget()
        self.category_list.setMouseTracking(True)
        self.category_list.setSelectionMode(QAbstractItemView.SingleSelection)
        self.category_list.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.category_list.itemEntered.connect(self._on_item_entered)
        layout.addWidget(self.category_list)

        self.setFixedWidth(self.POPUP_WIDTH)

    def set_categories(self, categories, *, error_message: str = "", filtering: bool = False):
        self._categories = tuple(categories)

        self.category_list.clear()
        for category in self._categories:
            item = QListWidgetItem(f"{category.name}  ({len(category.items)})")
            self.category_list.addItem(item)

        self.info_label.setText(error_message or "")
        self.info_label.setVisible(bool(error_message))

        show_empty = not self._categories and not error_message
        if show_empty:
            self.empty_label.setText(strings.tr("lbl_no_matches" if filtering else "lbl_no_categories"))
        self.empty_label.setVisible(show_empty)

        self.category_list.setVisible(bool(self._categories))
        self._fit_list_height()
        self.adjustSize()

    def _fit_list_height(self):
        count = self.category_list.count()
        if not count:
            return
        row_h = max(self.category_list.sizeHintForRow(0), 20)
        rows = min(count, self.MAX_VISIBLE_ROWS)
        self.category_list.setFixedHeight(rows * row_h + 2 * self.category_list.frameWidth() + 4)

    def categories(self):
        return self._categories

    def _on_item_entered(self, item: QListWidgetItem):
        row = self.category_list.row(item)
        if row < 0 or row >= len(self._categories):
            return
        self.category_list.setCurrentRow(row)
        rect = self.category_list.visualItemRect(item)
        top_left = self.category_list.viewport().mapToGlobal(rect.topLeft())
        self.category_hovered.emit(row, QRect(top_left, rect.size()))
