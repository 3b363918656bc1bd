"""
Configuration and Constants for SketchJam

"""

# ==========================================
# 📐 CANVAS & GRID
# ==========================================
DEFAULT_CANVAS_WIDTH = 1350
DEFAULT_CANVAS_HEIGHT = 1050
GRID_SIZE = 25  # Initial placement grid
SNAP_SIZE = 5   # Movement / resize snap
MAX_HISTORY = 20

# ==========================================
# 🎚️ EQ / BRIGHTNESS
# ==========================================
NUM_LEVELS = 12   # White to black
DEFAULT_LEVEL = 6  # Nearest to neutral EQ

# ==========================================
# 🎨 ELEMENT COLORS (RGB / RGBA tuples)
# ==========================================
DRUM_COLOR_DARK = (0, 0, 0)
DRUM_COLOR_LIGHT = (255, 255, 255)
GRID_COLOR_DARK = (0, 0, 0, 25)        # 10% black
GRID_COLOR_LIGHT = (255, 255, 255, 25)  # 10% white
MIN_OPACITY = 0.2
MAX_OPACITY = 1.0
OPACITY_STEP = 0.2

# ==========================================
# ⚙️ FALLBACK CONFIG (used when config.json is unreadable)
# ==========================================
DEFAULT_CONFIG = {
    "app_settings": {
        "title": "SketchJam",
        "initial_width": 1900,
        "initial_height": 1050,
    },
    "theme": {
        "font_family_ui": "Segoe UI",
        "font_size": "12px",
        "text_header": "#e0e0e0",
        "window_bg": "#383838",
        "panel_bg": "#2d2d2d",
        "border_color": "#4a4a4a",
        "btn_default": "#444444",
        "btn_text": "#e0e0e0",
        "btn_accent": "#00c8ff",
        "instrument_bg": "#383838",
        "muted_text": "#9a9a9a",
    },
    "canvas": {
        "width": DEFAULT_CANVAS_WIDTH,
        "height": DEFAULT_CANVAS_HEIGHT,
        "grid_size": GRID_SIZE,
        "snap_size": SNAP_SIZE,
    },
    "history": {
        "limit": MAX_HISTORY,
    },
    "eq": {
        "initial_level": DEFAULT_LEVEL,
    },
}
