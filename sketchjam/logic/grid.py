"""
Grid snapping helpers

Two grids are used on the canvas:
- GRID_SIZE (25 px) for the starting corner of a new element
- SNAP_SIZE (5 px) for moving and resizing

These are defaults; the canvas passes its configured sizes as `step`.

"""

import math

from sketchjam.config import GRID_SIZE, SNAP_SIZE


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; grid math wants .5 to go up
    return int(math.floor(value + 0.5))


def snap_value(value, step: int = SNAP_SIZE) -> int:
    return round_half_up(value / step) * step


def snap_to_grid(x, y, step: int = SNAP_SIZE):
    """Snap a point to the movement grid"""
    return snap_value(x, step), snap_value(y, step)


def snap_to_grid_start(x, y, step: int = GRID_SIZE):
    """Snap a point to the placement grid"""
    return snap_value(x, step), snap_value(y, step)


def nearest(value, choices):
    """Closest entry of choices to value; ties go to the earlier entry"""
    best = choices[0]
    for choice in choices:
        if abs(value - choice) < abs(value - best):
            best = choice
    return best


def snap_clamped(value, step, low, high) -> int:
    return max(low, min(high, snap_value(value, step)))
