import sys
import logging
from PySide6.QtCore import QLocale
from PySide6.QtWidgets import QApplication
from src.ui.main_window import HudWindow
from src.utils.i18n import strings

logger = logging.getLogger("shortcut_hud")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("ShortcutHUD")

    if QLocale.system().name().lower().startswith("ja"):
        strings.set_language("ja")

    def exception_hook(exctype, value, traceback):
        from PySide6.QtWidgets import QMessageBox
        logger.error("Unhandled exception", exc_info=(exctype, value, traceback))
        # Report and keep running.
        QMessageBox.warning(None, strings.tr("err_unexpected_title"), f"{strings.tr('err_unexpected')}\n{value}")

    sys.excepthook = exception_hook

    window = HudWindow()
    window.show()
    sys.exit(app.exec())
