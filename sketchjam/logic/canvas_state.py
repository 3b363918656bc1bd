"""
Canvas State for SketchJam

The document behind the canvas widget:
- Owns the list of elements and the current selection (one element or a group)
- Holds theme colors pushed in from the EQ settings
- Wraps every edit in mutation() so it lands in the history as one entry
- Restores snapshots for undo/redo

Qt-free on purpose: the widget in ui/canvas.py only paints this and
forwards input.

"""

import logging
import uuid
from contextlib import contextmanager

from sketchjam.config import (DRUM_COLOR_DARK, DRUM_COLOR_LIGHT, GRID_COLOR_DARK,
                              GRID_COLOR_LIGHT, OPACITY_STEP, DEFAULT_CANVAS_WIDTH,
                              DEFAULT_CANVAS_HEIGHT, GRID_SIZE, SNAP_SIZE)
from sketchjam.logic.elements import ELEMENT_TYPES, DrawableElement
from sketchjam.logic.grid import snap_value
from sketchjam.logic.history import HistoryEntry

logger = logging.getLogger(__name__)

MIN_DRAG = 10
DEFAULT_DRAW_SIZE = 100


class CanvasState:
    """Elements, selection and theme for one canvas"""

    def __init__(self, history=None, width: int = DEFAULT_CANVAS_WIDTH,
                 height: int = DEFAULT_CANVAS_HEIGHT, grid_size: int = GRID_SIZE,
                 snap_size: int = SNAP_SIZE):
        """
        Args:
            history: HistoryManager that receives finished mutations (not owned)
            width, height: Canvas size in pixels
            grid_size: Placement grid for new elements
            snap_size: Movement grid for drags and nudges
        """
        self.history = history
        self.width = width
        self.height = height
        self.grid_size = grid_size
        self.snap_size = snap_size

        # === Data === #
        self.elements = []
        self.selected = None
        self.selected_group = []  # Marquee selection
        self.current_color = (255, 0, 0)  # C

        # === Theme === #
        self.background_gray = 255
        self.use_dark_elements = True
        self.drum_color = DRUM_COLOR_DARK
        self.grid_color = GRID_COLOR_DARK

        self._drag_before = None

    # === Snapshots & History === #
    def snapshot(self):
        return tuple(element.copy() for element in self.elements)

    @contextmanager
    def mutation(self, label: str):
        """Record whatever the with-block changes as one history entry"""
        # A drag in progress is closed first so its move and this edit stay separate
        resume_drag = self._drag_before is not None
        self.end_drag()

        before = self.snapshot()
        yield
        after = self.snapshot()
        if after != before and self.history is not None:
            self.history.record(HistoryEntry(label, before, after))

        if resume_drag:
            self.begin_drag()

    def apply_inverse(self, entry: HistoryEntry):
        self._restore(entry.before)

    def apply_forward(self, entry: HistoryEntry):
        self._restore(entry.after)

    def _restore(self, snapshot):
        # Fresh copies: the history keeps sole ownership of its snapshots
        self.elements = [element.copy() for element in snapshot]
        for element in self.elements:
            if not element.palette_colorable:
                element.color = self.drum_color  # Theme is not part of history
        self.clear_selection()
        self._drag_before = None

    # === Theme (called from the EQ settings) === #
    def set_background_color(self, gray: int):
        self.background_gray = max(0, min(255, int(gray)))

    def set_element_colors(self, use_dark: bool):
        self.use_dark_elements = use_dark
        if use_dark:
            self.grid_color = GRID_COLOR_DARK
            self.drum_color = DRUM_COLOR_DARK
        else:
            self.grid_color = GRID_COLOR_LIGHT
            self.drum_color = DRUM_COLOR_LIGHT

        for element in self.elements:
            if not element.palette_colorable:
                element.color = self.drum_color

    # === Queries === #
    def element_at(self, x, y):
        """Topmost element under the point, or None"""
        for element in reversed(self.elements):
            if element.contains(x, y):
                return element
        return None

    @property
    def selection(self):
        """Every selected element: the marquee group, else the single selection"""
        if self.selected_group:
            return list(self.selected_group)
        return [self.selected] if self.selected is not None else []

    def select_at(self, x, y):
        self.selected_group = []
        self.selected = self.element_at(x, y)
        return self.selected

    def select_in_rect(self, start, end):
        """
        Marquee select: every element whose center lies inside the rectangle

        Args:
            start, end: Opposite corners of the marquee in canvas coordinates

        Returns:
            list: The selected elements (a single hit also becomes `selected`)
        """
        left, right = sorted((start[0], end[0]))
        top, bottom = sorted((start[1], end[1]))

        hits = []
        for element in self.elements:
            cx = element.x + element.width / 2
            cy = element.y + element.height / 2
            if left <= cx <= right and top <= cy <= bottom:
                hits.append(element)

        self.selected_group = hits
        self.selected = hits[0] if len(hits) == 1 else None
        return hits

    # === Edits === #
    def add_element(self, element: DrawableElement):
        if not element.palette_colorable:
            element.color = self.drum_color
        with self.mutation(f"Add {element.element_type}"):
            self.elements.append(element)
        self.selected_group = []
        self.selected = element
        return element

    def create_element(self, mode: str, start, end):
        """
        Build an element from a drag and add it

        Args:
            mode: One of "drum", "snare", "piano", "guitar"
            start: Drag start, already on the placement grid
            end: Drag end, already on the movement grid

        Returns:
            DrawableElement: The new element, or None for an unknown mode
        """
        element_cls = ELEMENT_TYPES.get(mode)
        if element_cls is None:
            logger.warning("Unknown draw mode: %s", mode)
            return None

        width = abs(end[0] - start[0])
        height = abs(end[1] - start[1])
        x = min(start[0], end[0])
        y = min(start[1], end[1])

        # A click without a real drag gets a default size
        if width < MIN_DRAG and height < MIN_DRAG:
            width = height = DEFAULT_DRAW_SIZE

        element = element_cls(x, y, width, height, self.current_color)
        return self.add_element(element)

    def begin_drag(self):
        """Start moving the selection; the move is recorded by end_drag()"""
        if self.selected is not None:
            self._drag_before = self.snapshot()

    def drag_selected_to(self, x, y):
        if self.selected is None:
            return
        self.selected.set_position(snap_value(x, self.snap_size), snap_value(y, self.snap_size))

    def end_drag(self):
        if self._drag_before is None:
            return
        before, self._drag_before = self._drag_before, None
        after = self.snapshot()
        if after != before and self.history is not None:
            self.history.record(HistoryEntry("Move", before, after))

    def move_selected(self, dx, dy):
        targets = self.selection
        if not targets:
            return
        with self.mutation("Move"):
            for element in targets:
                element.set_position(snap_value(element.x + dx, self.snap_size),
                                     snap_value(element.y + dy, self.snap_size))

    def duplicate_selected(self):
        if self.selected is None:
            return None
        duplicate = self.selected.copy()
        duplicate.element_id = uuid.uuid4().hex
        with self.mutation("Duplicate"):
            self.elements.append(duplicate)
        self.selected_group = []
        self.selected = duplicate
        return duplicate

    def delete_selected(self):
        targets = self.selection
        if not targets:
            return False
        with self.mutation("Delete"):
            self.elements = [e for e in self.elements if not any(e is t for t in targets)]
            self.clear_selection()
        return True

    def rotate_selected(self):
        targets = self.selection
        if not targets:
            return
        with self.mutation("Rotate"):
            for element in targets:
                element.rotate90()

    def change_opacity(self, delta: float = OPACITY_STEP):
        targets = self.selection
        if not targets:
            return
        with self.mutation("Opacity"):
            for element in targets:
                element.set_opacity(element.opacity + delta)

    def set_current_color(self, color):
        self.current_color = tuple(color)
        targets = [e for e in self.selection if e.palette_colorable]
        if targets:
            with self.mutation("Recolor"):
                for element in targets:
                    element.set_color(color)

    def clear_selection(self):
        self.selected = None
        self.selected_group = []
