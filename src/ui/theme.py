class HudTheme:
    """
    Colors and stylesheet for the HUD window and its popups.
    The HUD draws its own rounded panels on a translucent window, so every
    surface below is addressed by object name.
    """

    DARK_PALETTE = {
        # Panels
        "panel_bg": "rgba(22, 27, 34, 235)",
        "panel_border": "#30363d",
        "header_bg": "rgba(13, 17, 23, 240)",

        # Text
        "text_primary": "#e6edf3",
        "text_secondary": "#8b949e",
        "text_tertiary": "#6e7681",

        # Accent
        "primary": "#818cf8",
        "primary_light": "#312e81",
        "danger": "#f85149",

        # Interactive
        "hover": "#21262d",
        "active": "#30363d",
        "input_bg": "#0d1117",
        "input_border": "#30363d",

        # Key caps
        "keycap_bg": "#374151",
        "keycap_fg": "#f9fafb",

        # Scrollbar
        "scrollbar_handle": "#30363d",
        "scrollbar_hover": "#484f58",
    }

    @staticmethod
    def get_palette():
        return HudTheme.DARK_PALETTE

    @staticmethod
    def get_stylesheet():
        c = HudTheme.get_palette()

        return f"""
            QWidget {{
                font-family: 'Segoe UI', 'Yu Gothic UI', 'Meiryo', -apple-system, sans-serif;
                font-size: 13px;
                color: {c['text_primary']};
            }}

            QLabel {{
                background: transparent;
            }}

            /* ==================== HEADER ==================== */
            QFrame#hudHeader {{
                background-color: {c['header_bg']};
                border: 1px solid {c['panel_border']};
                border-radius: 10px;
            }}

            QLabel#hudTitle {{
                font-weight: 600;
            }}

            QToolButton#hudHeaderButton {{
                background: transparent;
                border: none;
                border-radius: 6px;
                padding: 2px 6px;
            }}
            QToolButton#hudHeaderButton:hover {{
                background-color: {c['hover']};
            }}
            QToolButton#hudHeaderButton:pressed {{
                background-color: {c['active']};
            }}

            /* ==================== POPUPS ==================== */
            QFrame#hudPopup {{
                background-color: {c['panel_bg']};
                border: 1px solid {c['panel_border']};
                border-radius: 10px;
            }}

            QLabel#popupTitle {{
                color: {c['primary']};
                font-weight: 600;
                padding-bottom: 4px;
            }}

            QLabel#infoLabel {{
                color: {c['danger']};
            }}

            QLabel#emptyLabel {{
                color: {c['text_secondary']};
            }}

            QLineEdit#searchBox {{
                background-color: {c['input_bg']};
                border: 1px solid {c['input_border']};
                border-radius: 6px;
                padding: 4px 8px;
            }}
            QLineEdit#searchBox:focus {{
                border-color: {c['primary']};
            }}

            QListWidget {{
                background: transparent;
                border: none;
                outline: none;
            }}
            QListWidget::item {{
                padding: 5px 8px;
                border-radius: 6px;
            }}
            QListWidget::item:hover {{
                background-color: {c['hover']};
            }}
            QListWidget::item:selected {{
                background-color: {c['primary_light']};
                color: {c['text_primary']};
            }}

            QFrame#shortcutRow {{
                background: transparent;
                border: none;
                border-radius: 6px;
                padding: 4px 6px;
            }}
            QFrame#shortcutRow:hover {{
                background-color: {c['hover']};
            }}

            QLabel#keycap {{
                background-color: {c['keycap_bg']};
                color: {c['keycap_fg']};
                border-radius: 5px;
                padding: 2px 8px;
                font-family: 'Consolas', 'SF Mono', 'Menlo', monospace;
            }}

            QLabel#shortcutNote {{
                color: {c['text_tertiary']};
                font-size: 11px;
            }}

            /* ==================== SCROLLBAR ==================== */
            QScrollBar:vertical {{
                background: transparent;
                width: 8px;
            }}
            QScrollBar::handle:vertical {{
                background-color: {c['scrollbar_handle']};
                border-radius: 4px;
                min-height: 24px;
            }}
            QScrollBar::handle:vertical:hover {{
                background-color: {c['scrollbar_hover']};
            }}
            QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
                height: 0px;
            }}
        """
