"""
Logic Package for SketchJam

Contains data structures and business logic (no Qt):
- Elements: Drum, snare, piano and guitar shapes
- CanvasState: The document the canvas widget paints
- HistoryManager: Undo/redo system
- SettingsModel: Brightness level to EQ and theme
- ScalePreset: Root note and major/minor to seven note colors
- AudioSink: Receives EQ gains
- SketchContext: Owns all of the above

"""

from .elements import DrumElement, SnareDrumElement, PianoElement, GuitarElement
from .history import HistoryEntry, HistoryManager
from .settings import EQSettings, ThemeColors, SettingsModel, derive_settings
from .canvas_state import CanvasState
from .scales import ScalePreset
from .audio_sink import AudioSink
from .context import SketchContext

__all__ = ['DrumElement', 'SnareDrumElement', 'PianoElement', 'GuitarElement',
           'HistoryEntry', 'HistoryManager', 'EQSettings', 'ThemeColors',
           'SettingsModel', 'derive_settings', 'CanvasState', 'ScalePreset', 'AudioSink',
           'SketchContext']
