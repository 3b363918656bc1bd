from sketchjam import config_manager

THEME = config_manager.CONFIG['theme']


def get_stylesheet():
    return f"""
    /* === GLOBAL === */
    QWidget {{
        font-family: '{THEME['font_family_ui']}', sans-serif;
        font-size: {THEME['font_size']};
        color: {THEME['text_header']};
    }}

    QMainWindow, QMenuBar, QToolBar {{
        background-color: {THEME['window_bg']};
        border: none;
    }}

    QMenuBar::item:selected, QMenu::item:selected {{
        background-color: {THEME['btn_accent']};
    }}

    /* === DOCKS (one per instrument panel) === */
    QDockWidget::title {{
        background: {THEME['panel_bg']};
        padding: 6px;
        border-radius: 12px 12px 0px 0px;
    }}

    QFrame#PanelContent {{
        background-color: {THEME['instrument_bg']};
        border-radius: 0px 0px 12px 12px;
        border-bottom: 1px solid {THEME['border_color']};
    }}

    QLabel#PanelTitle {{
        color: {THEME['muted_text']};
        font-size: 10px;
        font-weight: bold;
    }}

    /* === TOOL BUTTONS (draw modes) === */
    QPushButton {{
        background-color: {THEME['btn_default']};
        color: {THEME['btn_text']};
        border-radius: 8px;
        padding: 8px;
        font-weight: 600;
        border: none;
    }}

    QPushButton:hover, QPushButton:checked {{
        background-color: {THEME['btn_accent']};
        color: white;
    }}

    /* === DIAGNOSTICS READOUT === */
    QLabel#Readout {{
        font-family: monospace;
        color: {THEME['muted_text']};
    }}
    """
