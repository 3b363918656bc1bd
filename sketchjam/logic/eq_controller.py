"""
EQ Panel Controller

Turns pointer input on the brightness bar into a level and pushes the
derived settings out through the context. No toolkit classes here: the
Qt widget in ui/eq_panel.py calls handle_pointer_event() and paints.

Bar layout (panel is 350 x 75):
- y 0-25: title
- y 25-50: 12 cells, white to black
- y 50-75: TREBLE / BASS labels

"""

import math

from sketchjam.config import NUM_LEVELS

PANEL_WIDTH = 350
PANEL_HEIGHT = 75
PADDING = 25
BAR_X = PADDING
BAR_Y = 25
BAR_HEIGHT = 25
CELL_WIDTH = (PANEL_WIDTH - 2 * PADDING) // NUM_LEVELS

POINTER_KINDS = ("press", "drag")


def level_at(x, y):
    """
    Map a pointer position to a level

    Returns:
        int: Level index, or None if the pointer is off the bar
    """
    if not (BAR_Y <= y < BAR_Y + BAR_HEIGHT):
        return None
    level = math.floor((x - BAR_X) / CELL_WIDTH)
    if 0 <= level < NUM_LEVELS:
        return level
    return None


def cell_gray(level: int) -> int:
    """Swatch color for a cell (255 for level 0 down to 0 for level 11)"""
    return 255 - (level * 255 // (NUM_LEVELS - 1))


class EQController:
    def __init__(self, context):
        self.context = context  # Not owned

    @property
    def level(self) -> int:
        return self.context.settings.level

    def handle_pointer_event(self, x, y, kind: str = "press"):
        """
        Single entry point for pointer input

        Press and drag both re-evaluate, so dragging across the bar sweeps
        the level continuously.

        Returns:
            int: The new level, or None if the event was ignored
        """
        if kind not in POINTER_KINDS:
            return None
        level = level_at(x, y)
        if level is None:
            return None
        self.context.apply_level(level)
        return level
