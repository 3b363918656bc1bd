"""
Color Palette for SketchJam

12 colors x 4 tint rows. Each column is a note (C = red, going around
the color wheel in 30 degree steps); lower rows blend toward white.

"""

CELL_SIZE = 25
PADDING = 25  # Padding around the color matrix
COLS = 12
ROWS = 4

# Tint factors per row: 1.0 = pure color, 0.0 = white
TINT_LEVELS = (1.0, 0.8, 0.6, 0.4)

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

NOTE_COLORS = (
    (0xFF, 0x00, 0x00),  # C  - Red (0°)
    (0xFF, 0x80, 0x00),  # C# - Orange (30°)
    (0xFF, 0xFF, 0x00),  # D  - Yellow (60°)
    (0x80, 0xFF, 0x00),  # D# - Yellow-Green (90°)
    (0x00, 0xFF, 0x00),  # E  - Green (120°)
    (0x00, 0xFF, 0x80),  # F  - Green-Cyan (150°)
    (0x00, 0xFF, 0xFF),  # F# - Cyan (180°)
    (0x00, 0x80, 0xFF),  # G  - Cyan-Blue (210°)
    (0x00, 0x00, 0xFF),  # G# - Blue (240°)
    (0x80, 0x00, 0xFF),  # A  - Purple (270°)
    (0xFF, 0x00, 0xFF),  # A# - Magenta (300°)
    (0xFF, 0x00, 0x80),  # B  - Pink-Red (330°)
)


def blend_with_white(color, factor: float):
    """Blend toward white (1.0 = original, 0.0 = white)"""
    return tuple(int(c + (255 - c) * (1 - factor)) for c in color)


def build_color_matrix():
    return [[blend_with_white(NOTE_COLORS[col], TINT_LEVELS[row]) for col in range(COLS)]
            for row in range(ROWS)]


COLOR_MATRIX = build_color_matrix()


def note_for_column(col: int) -> str:
    if 0 <= col < COLS:
        return NOTE_NAMES[col]
    return ""


def note_for_color(color) -> str:
    """Note name of a palette color (any tint row), or "" for other colors"""
    color = tuple(color)
    for row in COLOR_MATRIX:
        if color in row:
            return note_for_column(row.index(color))
    return ""


def cell_at(x, y):
    """Map a pointer position to (row, col), or None outside the matrix"""
    col = (x - PADDING) // CELL_SIZE
    row = (y - PADDING) // CELL_SIZE
    if 0 <= col < COLS and 0 <= row < ROWS:
        return int(row), int(col)
    return None


class Palette:
    """Palette with a current selection"""

    def __init__(self):
        self.matrix = build_color_matrix()
        self.selected = None  # (row, col)

    def color(self, row, col):
        return self.matrix[row][col]

    def select_at(self, x, y):
        """
        Select the cell under the pointer

        Returns:
            tuple: The chosen RGB color, or None if the pointer missed
        """
        cell = cell_at(x, y)
        if cell is None:
            return None
        self.selected = cell
        return self.color(*cell)

    def clear_selection(self):
        self.selected = None
