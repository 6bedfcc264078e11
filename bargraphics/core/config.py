"""
Central configuration for bar and label geometry.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Canvas -----
DEFAULT_CANVAS: tuple[float, float, float, float] = (0.0, 0.0, 100.0, 50.0)
"""Logical (x, y, width, height) box every layer is computed in until transformed."""

# ----- Bars -----
DEFAULT_STROKE_WIDTH: float = 0.01
"""Outline width for bar rectangles; bars are inset by it on each side."""

MIN_SLICE_SIZE: float = 1.0
"""Below this per-bar width, separation is ignored and the canvas is split evenly."""

DEFAULT_BASELINE_FRACTION: float = 0.5
"""Zero line position as a fraction of canvas height from the top."""

# ----- Fonts -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_FONT_STYLE: str = "normal"
DEFAULT_FONT_WEIGHT: str = "normal"
DEFAULT_FONT_SIZE: float = 8.0

GLYPH_CACHE_SIZE: int = 2048
"""Max cached (text, font) outlines."""

# ----- Text layout -----
DEFAULT_LINE_SPACING: float = 1.0
"""Extra gap (units) between wrapped lines; none before the first line."""

DEFAULT_WRAP_WIDTH: float = float("inf")
"""No wrapping unless a width is given."""

LABEL_SCALE_MARGIN: float = 0.9
"""Scaled labels take this fraction of the allowed width/height."""

MIN_LABEL_SCALE: float = 0.20
"""Labels that need to shrink below this factor are dropped."""

LABEL_LINE_WIDTH: float = 0.5
"""Stroke width of leader lines from a label to its subject."""

LABEL_LINE_GAP: float = 1.0
"""Gap between a text box and the start of its leader line."""

# ----- Bar chart labels -----
BAR_LABEL_ROTATION_DEG: float = 70.0
"""Rotation applied to per-bar labels below the chart."""

# ----- Rendering -----
SVG_WIDTH_PX: int = 200
SVG_HEIGHT_PX: int = 100
DEFAULT_BAR_COLOR: str = "#4682b4"
DEFAULT_STROKE_COLOR: str = "black"
DEFAULT_LABEL_COLOR: str = "black"

# ----- Shadow -----
SHADOW_COLOR: tuple[int, int, int, int] = (0, 0, 0, 255)
"""RGBA used for rasterized shapes and drop shadows."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING").upper()
"""Level for the command-line runner. Set env LOG_LEVEL=DEBUG to see dropped labels."""
