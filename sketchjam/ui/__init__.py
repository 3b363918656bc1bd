"""Qt widgets for SketchJam: canvas, docks and panels."""
