"""
Settings Model for SketchJam

Maps a single brightness level to:
- EQ gains for the audio sink (dark = bass heavy, light = treble heavy)
- Theme colors for the canvas (background gray, dark or light elements)

"""

import logging
from dataclasses import dataclass

from sketchjam.config import NUM_LEVELS, DEFAULT_LEVEL

logger = logging.getLogger(__name__)

MAX_LEVEL = NUM_LEVELS - 1


@dataclass(frozen=True)
class EQSettings:
    bass_gain: float    # 0.5 to 1.5
    treble_gain: float  # 1.5 to 0.5


@dataclass(frozen=True)
class ThemeColors:
    use_dark_elements: bool
    background_gray: int  # 0 to 255


@dataclass(frozen=True)
class SettingsResult:
    level: int
    brightness: float
    eq: EQSettings
    theme: ThemeColors


def clamp_level(level: int) -> int:
    """Clamp any integer into the valid level range [0, 11]"""
    return max(0, min(MAX_LEVEL, int(level)))


def derive_settings(level: int) -> SettingsResult:
    """
    Derive EQ and theme from a brightness level

    Level 0 is white (bass 0.5, treble 1.5), level 11 is black
    (bass 1.5, treble 0.5). Twelve levels have no exact center, so
    level 6 lands slightly on the bass side.

    Args:
        level: Brightness level, clamped into [0, 11]

    Returns:
        SettingsResult: The clamped level with its EQ and theme
    """
    level = clamp_level(level)
    t = level / MAX_LEVEL
    brightness = 1.0 - t

    eq = EQSettings(bass_gain=0.5 + t, treble_gain=1.5 - t)
    theme = ThemeColors(
        use_dark_elements=brightness > 0.5,  # Light background = dark elements
        background_gray=round(brightness * 255),
    )
    return SettingsResult(level=level, brightness=brightness, eq=eq, theme=theme)


class SettingsModel:
    """Holds the selected brightness level"""

    def __init__(self, level: int = DEFAULT_LEVEL):
        self.current = derive_settings(level)

    @property
    def level(self) -> int:
        return self.current.level

    def set_level(self, level: int) -> SettingsResult:
        self.current = derive_settings(level)
        logger.debug(
            "EQ: brightness=%d%%, bass=%.1f, treble=%.1f",
            int(self.current.brightness * 100),
            self.current.eq.bass_gain,
            self.current.eq.treble_gain,
        )
        return self.current
