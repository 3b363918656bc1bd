"""
Drawable Elements for SketchJam

Every shape on the canvas is an instrument:
- DrumElement: square tom, size picks the tom
- SnareDrumElement: square ring, size picks rim or middle shot
- PianoElement: fixed-width bar, height picks the octave
- GuitarElement: thin string, width picks the octave, height the duration

Opacity doubles as volume. Sizes always snap to the values each
instrument understands.

"""

import math
import uuid
from copy import copy as shallow_copy

from sketchjam.config import MIN_OPACITY, MAX_OPACITY
from sketchjam.logic.grid import nearest, snap_clamped


class DrawableElement:
    """Base element: position, size, color, rotation and opacity"""

    element_type = "Element"
    palette_colorable = True  # Drums ignore the palette and follow the theme

    def __init__(self, x: int, y: int, width: int, height: int, color=(255, 0, 0)):
        """
        Initialize an element

        Args:
            x, y: Top-left corner in canvas coordinates
            width, height: Requested size (snapped by subclasses)
            color: RGB tuple
        """
        self.x = x
        self.y = y
        self.width, self.height = self.snap_size(width, height)
        self.color = tuple(color)
        self.rotation = 0  # 0, 90, 180, 270
        self.opacity = 1.0
        self.element_id = uuid.uuid4().hex

    # === Sizing === #
    def snap_size(self, width, height):
        return width, height

    def set_size(self, width, height):
        self.width, self.height = self.snap_size(width, height)

    def set_position(self, x, y):
        self.x = x
        self.y = y

    # === Appearance === #
    def set_color(self, color):
        if self.palette_colorable:
            self.color = tuple(color)

    def set_opacity(self, opacity: float):
        # Rounded so repeated steps land exactly on the limits
        self.opacity = round(max(MIN_OPACITY, min(MAX_OPACITY, opacity)), 2)

    def rotate90(self):
        self.rotation = (self.rotation + 90) % 360

    # === Geometry === #
    @property
    def bounds(self):
        return self.x, self.y, self.width, self.height

    def contains(self, px, py) -> bool:
        """Hit test, rotating the point back around the top-left corner"""
        if self.rotation:
            rad = -math.radians(self.rotation)
            dx, dy = px - self.x, py - self.y
            px = dx * math.cos(rad) - dy * math.sin(rad) + self.x
            py = dx * math.sin(rad) + dy * math.cos(rad) + self.y
        return (self.x <= px < self.x + self.width and
                self.y <= py < self.y + self.height)

    @property
    def mapped_value(self) -> str:
        return ""

    def copy(self):
        # Colors are tuples, so a shallow copy is independent
        return shallow_copy(self)

    def __eq__(self, other):
        if not isinstance(other, DrawableElement):
            return NotImplemented
        return (type(self) is type(other) and self.element_id == other.element_id and
                self.bounds == other.bounds and self.color == other.color and
                self.rotation == other.rotation and self.opacity == other.opacity)

    __hash__ = None

    def __repr__(self):
        return (f"{type(self).__name__}(x={self.x}, y={self.y}, "
                f"w={self.width}, h={self.height}, {self.mapped_value!r})")


class DrumElement(DrawableElement):
    element_type = "Drum"
    palette_colorable = False
    SNAP_SIZES = (50, 75, 100)
    DRUM_TYPES = ("High Tom", "Mid Tom", "Floor Tom")

    def snap_size(self, width, height):
        size = nearest(max(width, height), self.SNAP_SIZES)
        return size, size

    @property
    def mapped_value(self):
        if self.width in self.SNAP_SIZES:
            return self.DRUM_TYPES[self.SNAP_SIZES.index(self.width)]
        return "Unknown"


class SnareDrumElement(DrumElement):
    element_type = "Snare Drum"
    SNAP_SIZES = (100, 150)
    DRUM_TYPES = ("Rim Shot", "Middle Shot")


class PianoElement(DrawableElement):
    element_type = "Piano"
    FIXED_WIDTH = 100
    HEIGHT_SNAP = 100
    MIN_HEIGHT = 100
    MAX_HEIGHT = 500

    def snap_size(self, width, height):
        return self.FIXED_WIDTH, snap_clamped(height, self.HEIGHT_SNAP,
                                              self.MIN_HEIGHT, self.MAX_HEIGHT)

    @property
    def octave(self) -> int:
        # Short = high octave, tall = low octave
        return 6 - self.height // self.HEIGHT_SNAP

    @property
    def mapped_value(self):
        return f"Octave {self.octave}"


class GuitarElement(DrawableElement):
    element_type = "Guitar"
    WIDTH_SNAPS = (5, 10, 15, 20, 25)
    HEIGHT_SNAP = 25
    MIN_HEIGHT = 100
    MAX_HEIGHT = 500

    def snap_size(self, width, height):
        return (nearest(width, self.WIDTH_SNAPS),
                snap_clamped(height, self.HEIGHT_SNAP, self.MIN_HEIGHT, self.MAX_HEIGHT))

    @property
    def octave(self) -> int:
        # Thin = high octave, thick = low octave
        return 5 - self.WIDTH_SNAPS.index(self.width)

    @property
    def duration(self) -> int:
        return self.height // self.HEIGHT_SNAP

    @property
    def mapped_value(self):
        return f"Octave {self.octave}, Duration {self.duration}"


ELEMENT_TYPES = {
    "drum": DrumElement,
    "snare": SnareDrumElement,
    "piano": PianoElement,
    "guitar": GuitarElement,
}
