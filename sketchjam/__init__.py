"""SketchJam: place drums, pianos and guitars on a grid and play them."""

__version__ = "0.1.0"
