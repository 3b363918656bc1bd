"""
Scale Presets for SketchJam

A root note and a major/minor choice give a seven-note scale. The
preset strip shows those seven note colors so a scale can be painted
without hunting through the full palette.

Layout (pixels, matching the palette width):
- Selector: title row, 12 root cells of 25 px, then MAJOR | MINOR halves
- Strip: 7 cells of 50 px

"""

from sketchjam.logic.palette import NOTE_COLORS, NOTE_NAMES

# Semitones from the root
MAJOR_INTERVALS = (0, 2, 4, 5, 7, 9, 11)  # W-W-H-W-W-W-H
MINOR_INTERVALS = (0, 2, 3, 5, 7, 8, 10)  # W-H-W-W-H-W-W

# === Selector Layout === #
SELECTOR_WIDTH = 350
TITLE_HEIGHT = 25
ROW_HEIGHT = 25
ROOT_X = 25
ROOT_CELL = 25
TYPE_BUTTON_WIDTH = SELECTOR_WIDTH // 2

# === Strip Layout === #
STRIP_CELL = 50
STRIP_COLS = len(MAJOR_INTERVALS)


def scale_notes(root: int, major: bool = True):
    """Note indices (0-11) of the scale starting on root"""
    intervals = MAJOR_INTERVALS if major else MINOR_INTERVALS
    return tuple((root + step) % 12 for step in intervals)


def scale_name(root: int, major: bool = True) -> str:
    return f"{NOTE_NAMES[root % 12]} {'Major' if major else 'Minor'}"


class ScalePreset:
    """Selected scale plus the highlighted strip cell"""

    def __init__(self, root: int = 0, major: bool = True):
        self.root = root % 12
        self.major = major
        self.notes = scale_notes(self.root, self.major)
        self.selected = None  # Strip column

    @property
    def name(self) -> str:
        return scale_name(self.root, self.major)

    def set_scale(self, root: int, major: bool):
        self.root = root % 12
        self.major = major
        self.notes = scale_notes(self.root, self.major)
        self.selected = None

    def clear_selection(self):
        self.selected = None

    def color(self, col: int):
        return NOTE_COLORS[self.notes[col]]

    def note_name(self, col: int) -> str:
        return NOTE_NAMES[self.notes[col]]

    # === Pointer Mapping === #
    def selector_press(self, x, y) -> bool:
        """
        Handle a press on the root/type selector

        Args:
            x, y: Pointer position in selector coordinates

        Returns:
            bool: True if the scale changed
        """
        if TITLE_HEIGHT <= y < TITLE_HEIGHT + ROW_HEIGHT:
            col = (x - ROOT_X) // ROOT_CELL
            if not 0 <= col < 12:
                return False
            root, major = int(col), self.major
        elif TITLE_HEIGHT + ROW_HEIGHT <= y < TITLE_HEIGHT + 2 * ROW_HEIGHT:
            if not 0 <= x < SELECTOR_WIDTH:
                return False
            root, major = self.root, x < TYPE_BUTTON_WIDTH
        else:
            return False

        if (root, major) == (self.root, self.major):
            return False
        self.set_scale(root, major)
        return True

    def strip_press(self, x, y):
        """
        Pick a note from the strip

        Returns:
            tuple: RGB color of the note, or None if the pointer missed
        """
        col = x // STRIP_CELL
        if not (0 <= col < STRIP_COLS and 0 <= y < STRIP_CELL):
            return None
        self.selected = int(col)
        return self.color(self.selected)
