from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel, QToolButton, QMenu, QSlider, QWidgetAction, QApplication, QLayout)
from PySide6.QtCore import Qt, QEvent, QPoint, QRect, Signal, Slot
from PySide6.QtGui import QAction

import logging

from src.core.catalog_loader import ShortcutCatalogLoader
from src.core.models import OPACITY_MAX, OPACITY_MIN, clamp_opacity
from src.core.settings_store import SettingsStore
from src.ui.app_state import HudSession
from src.ui.components.category_popup import CategoryPopup
from src.ui.components.detail_popup import DetailPopup
from src.ui.components.hover_region import HoverRegionFrame
from src.ui.components.status_message import StatusMessage
from src.ui.controllers import (
    CatalogController,
    ClipboardController,
    PopupVisibilityController,
    SettingsController,
)
from src.ui.controllers.popup_visibility_controller import (
    REGION_CATEGORY_POPUP,
    REGION_DETAIL_POPUP,
    REGION_HEADER,
)
from src.ui.theme import HudTheme
from src.utils.i18n import strings

logger = logging.getLogger(__name__)


class HudHeader(HoverRegionFrame):
    """Title bar of the HUD. Dragging it moves the window."""

    drag_finished = Signal(int, int)

    def __init__(self, region_id, parent=None):
        super().__init__(region_id, parent)
        self.setObjectName("hudHeader")
        self._drag_offset = None

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            win = self.window()
            self._drag_offset = event.globalPosition().toPoint() - win.frameGeometry().topLeft()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._drag_offset is not None and event.buttons() & Qt.LeftButton:
            self.window().move(event.globalPosition().toPoint() - self._drag_offset)
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._drag_offset is not None and event.button() == Qt.LeftButton:
            self._drag_offset = None
            win = self.window()
            self.drag_finished.emit(win.x(), win.y())
            event.accept()
            return
        super().mouseReleaseEvent(event)


class HudWindow(QWidget):
    HUD_WIDTH = 240

    def __init__(self, settings_store=None, catalog_loader=None, clipboard_provider=None):
        super().__init__()
        self.setWindowTitle(strings.tr("app_title"))
        self.setWindowFlags(Qt.Window | Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
        self.setAttribute(Qt.WA_TranslucentBackground)

        self.session = HudSession()
        self.settings_controller = SettingsController(settings_store or SettingsStore())
        self.catalog_controller = CatalogController(catalog_loader or ShortcutCatalogLoader())
        self.clipboard_controller = ClipboardController(clipboard_provider)
        self.popup_controller = PopupVisibilityController(self)

        self.init_ui()
        self.create_context_menu()
        self.setStyleSheet(HudTheme.get_stylesheet())

        self.popup_controller.popup_opened.connect(self._on_popup_opened)
        self.popup_controller.popup_closed.connect(self._on_popup_closed)

        self.settings_controller.load_into(self)
        self.catalog_controller.load(self)
        self.popup_controller.reset(self.session.settings.is_pinned)

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.setSizeConstraint(QLayout.SetFixedSize)

        # === Header ===
        self.header = HudHeader(REGION_HEADER)
        self.header.setFixedWidth(self.HUD_WIDTH)
        header_layout = QHBoxLayout(self.header)
        header_layout.setContentsMargins(12, 6, 6, 6)
        header_layout.setSpacing(2)

        self.title_label = QLabel(strings.tr("hud_header"))
        self.title_label.setObjectName("hudTitle")
        header_layout.addWidget(self.title_label, 1)

        self.btn_pin = QToolButton()
        self.btn_pin.setObjectName("hudHeaderButton")
        self.btn_pin.setCursor(Qt.PointingHandCursor)
        self.btn_pin.clicked.connect(self.toggle_pin)
        header_layout.addWidget(self.btn_pin)

        self.btn_minimize = QToolButton()
        self.btn_minimize.setObjectName("hudHeaderButton")
        self.btn_minimize.setText("_")
        self.btn_minimize.setToolTip(strings.tr("tip_minimize"))
        self.btn_minimize.setCursor(Qt.PointingHandCursor)
        self.btn_minimize.clicked.connect(self.showMinimized)
        header_layout.addWidget(self.btn_minimize)

        layout.addWidget(self.header)

        # === Status line ===
        self.status_message = StatusMessage()
        self.status_message.setFixedWidth(self.HUD_WIDTH)
        layout.addWidget(self.status_message)

        # === Popups (separate tool windows) ===
        self.category_popup = CategoryPopup(REGION_CATEGORY_POPUP, self)
        self.detail_popup = DetailPopup(REGION_DETAIL_POPUP, self)

        for region in (self.header, self.category_popup, self.detail_popup):
            region.region_entered.connect(self.popup_controller.on_region_enter)
            region.region_left.connect(self.popup_controller.on_region_leave)
            region.escape_pressed.connect(self.handle_escape)

        self.category_popup.category_hovered.connect(self._on_category_hovered)
        self.category_popup.filter_changed.connect(lambda q: self.catalog_controller.set_filter(self, q))
        self.detail_popup.item_clicked.connect(lambda item: self.clipboard_controller.copy_keys(self, item))
        self.header.drag_finished.connect(lambda x, y: self.settings_controller.on_window_moved(self, x, y))

        self.header.setContextMenuPolicy(Qt.CustomContextMenu)
        self.header.customContextMenuRequested.connect(self._show_context_menu)

    def create_context_menu(self):
        self.context_menu = QMenu(self)

        self.action_pin = QAction(self)
        self.action_pin.triggered.connect(self.toggle_pin)
        self.context_menu.addAction(self.action_pin)

        # Opacity slider embedded in the menu
        opacity_host = QWidget()
        opacity_layout = QHBoxLayout(opacity_host)
        opacity_layout.setContentsMargins(12, 4, 12, 4)
        opacity_layout.addWidget(QLabel(strings.tr("menu_opacity")))
        self.opacity_slider = QSlider(Qt.Horizontal)
        self.opacity_slider.setRange(int(OPACITY_MIN * 100), int(OPACITY_MAX * 100))
        self.opacity_slider.setMinimumWidth(120)
        self.opacity_slider.valueChanged.connect(
            lambda v: self.settings_controller.on_opacity_percent_changed(self, v)
        )
        opacity_layout.addWidget(self.opacity_slider)
        opacity_action = QWidgetAction(self)
        opacity_action.setDefaultWidget(opacity_host)
        self.context_menu.addAction(opacity_action)

        self.context_menu.addSeparator()

        self.action_reload = QAction(strings.tr("menu_reload"), self)
        self.action_reload.triggered.connect(self.reload_shortcuts)
        self.context_menu.addAction(self.action_reload)

        self.action_exit = QAction(strings.tr("menu_exit"), self)
        self.action_exit.triggered.connect(self.exit_app)
        self.context_menu.addAction(self.action_exit)

        self.context_menu.aboutToShow.connect(self._sync_opacity_slider)

    # ------------------------------------------------------------------
    # Host interface used by the controllers
    # ------------------------------------------------------------------
    def apply_settings(self, settings):
        self.move(int(round(settings.window_left)), int(round(settings.window_top)))

        opacity = clamp_opacity(settings.opacity)
        settings.opacity = opacity
        self.setWindowOpacity(opacity)
        self.opacity_slider.setValue(int(round(opacity * 100)))

        self.update_pin_ui(settings.is_pinned)

    def update_pin_ui(self, pinned: bool):
        self.btn_pin.setText("📌" if pinned else "📍")
        self.btn_pin.setToolTip(strings.tr("tip_pin_on" if pinned else "tip_pin_off"))
        self.action_pin.setText(strings.tr("menu_pin_on" if pinned else "menu_pin_off"))

    def rebuild_category_list(self):
        self.category_popup.set_categories(
            self.session.visible_categories(),
            error_message=self.session.catalog_error,
            filtering=bool(self.session.filter_query.strip()),
        )
        self.close_detail_popup()

    def show_status(self, message: str, kind: str = "info", duration_ms: int = StatusMessage.DEFAULT_DURATION_MS):
        self.status_message.show_status(message, kind=kind, duration_ms=duration_ms)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    @Slot()
    def toggle_pin(self):
        self.settings_controller.on_toggle_pin(self)

    @Slot()
    def reload_shortcuts(self):
        self.catalog_controller.reload(self)

    @Slot()
    def handle_escape(self) -> bool:
        return self.popup_controller.on_escape()

    @Slot()
    def exit_app(self):
        self.close()
        app = QApplication.instance()
        if app is not None:
            app.quit()

    def _show_context_menu(self, pos: QPoint):
        self.context_menu.exec(self.header.mapToGlobal(pos))

    def _sync_opacity_slider(self):
        self.session.applying_ui_state = True
        try:
            self.opacity_slider.setValue(int(round(self.windowOpacity() * 100)))
        finally:
            self.session.applying_ui_state = False

    # ------------------------------------------------------------------
    # Popups
    # ------------------------------------------------------------------
    def _on_popup_opened(self):
        if self.isVisible() and not self.isMinimized():
            self._show_category_popup()

    def _on_popup_closed(self):
        self.close_detail_popup()
        self.category_popup.hide()

    def _show_category_popup(self):
        self.category_popup.move(self.mapToGlobal(QPoint(0, self.height() + 4)))
        self.category_popup.show()
        self.category_popup.raise_()

    def close_detail_popup(self):
        self.detail_popup.hide()
        self.detail_popup.clear()

    def _on_category_hovered(self, index: int, row_rect: QRect):
        categories = self.category_popup.categories()
        if not self.popup_controller.is_open or index < 0 or index >= len(categories):
            return
        self.detail_popup.show_category(categories[index])
        popup_geo = self.category_popup.frameGeometry()
        self.detail_popup.move(popup_geo.right() + 4, row_rect.top())
        self.detail_popup.show()
        self.detail_popup.raise_()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def showEvent(self, event):
        super().showEvent(event)
        if self.popup_controller.is_open:
            self._show_category_popup()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape and self.handle_escape():
            event.accept()
            return
        super().keyPressEvent(event)

    def changeEvent(self, event):
        if event.type() == QEvent.WindowStateChange:
            if self.isMinimized():
                self.popup_controller.on_window_minimized()
            elif event.oldState() & Qt.WindowMinimized:
                self.popup_controller.on_window_restored()
        super().changeEvent(event)

    def closeEvent(self, event):
        try:
            self.settings_controller.on_closing(self, self.x(), self.y(), self.windowOpacity())
        except Exception:
            logger.exception("Failed to save settings on close")
        self.close_detail_popup()
        self.category_popup.hide()
        event.accept()
