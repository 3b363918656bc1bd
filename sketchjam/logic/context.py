"""
Application Context for SketchJam

Single owner of the canvas state, history, settings model and the audio
sink handle. Widgets and controllers hold a plain reference to this
object; nothing else owns the canvas state.

"""

from sketchjam.config import (MAX_HISTORY, DEFAULT_LEVEL, DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT,
                              GRID_SIZE, SNAP_SIZE)
from sketchjam.logic.canvas_state import CanvasState
from sketchjam.logic.history import HistoryManager
from sketchjam.logic.settings import SettingsModel


class SketchContext:
    def __init__(self, audio_sink=None, history_limit: int = MAX_HISTORY,
                 initial_level: int = DEFAULT_LEVEL,
                 width: int = DEFAULT_CANVAS_WIDTH, height: int = DEFAULT_CANVAS_HEIGHT,
                 grid_size: int = GRID_SIZE, snap_size: int = SNAP_SIZE):
        """
        Args:
            audio_sink: Object with set_eq(bass, treble); injected by the app root
            history_limit: Undo capacity
            initial_level: Brightness level applied at startup
            width, height: Canvas size in pixels
            grid_size, snap_size: Placement and movement grids
        """
        self.audio_sink = audio_sink
        self.history = HistoryManager(limit=history_limit)
        self.canvas = CanvasState(history=self.history, width=width, height=height,
                                  grid_size=grid_size, snap_size=snap_size)
        self.settings = SettingsModel(initial_level)
        self.apply_level(initial_level)

    @classmethod
    def from_config(cls, config, audio_sink=None):
        return cls(
            audio_sink=audio_sink,
            history_limit=config['history']['limit'],
            initial_level=config['eq']['initial_level'],
            width=config['canvas']['width'],
            height=config['canvas']['height'],
            grid_size=config['canvas']['grid_size'],
            snap_size=config['canvas']['snap_size'],
        )

    def apply_level(self, level: int):
        """Derive settings for a level and push them to canvas and audio"""
        result = self.settings.set_level(level)
        self.canvas.set_background_color(result.theme.background_gray)
        self.canvas.set_element_colors(result.theme.use_dark_elements)
        if self.audio_sink is not None:
            self.audio_sink.set_eq(result.eq.bass_gain, result.eq.treble_gain)
        return result

    def undo(self):
        return self.history.undo(self.canvas)

    def redo(self):
        return self.history.redo(self.canvas)
