# bargraphics/core/types.py
"""
Dataclasses for canvas boxes, fonts, bar parameters and label parameters.
All are frozen so layers built from them can be shared between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from shapely.geometry import Polygon, box

from bargraphics.core.config import (
    BAR_LABEL_ROTATION_DEG,
    DEFAULT_BASELINE_FRACTION,
    DEFAULT_CANVAS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_STYLE,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_LABEL_COLOR,
    DEFAULT_LINE_SPACING,
    DEFAULT_STROKE_WIDTH,
    DEFAULT_WRAP_WIDTH,
)
from bargraphics.core.positions import TextAlignment


LayerMode = Literal["bar", "label"]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box (x, y, width, height); y grows downward."""
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> Rect:
        """From shapely-style (minx, miny, maxx, maxy)."""
        minx, miny, maxx, maxy = bounds
        return cls(minx, miny, maxx - minx, maxy - miny)

    def to_polygon(self) -> Polygon:
        return box(self.min_x, self.min_y, self.max_x, self.max_y)


CanvasBounds = Rect

DEFAULT_BOUNDS = Rect(*DEFAULT_CANVAS)


@dataclass(frozen=True)
class FontSpec:
    """Font descriptor handed to the text-shaping collaborator."""
    family: str = DEFAULT_FONT_FAMILY
    size: float = DEFAULT_FONT_SIZE
    style: str = DEFAULT_FONT_STYLE
    weight: str = DEFAULT_FONT_WEIGHT


@dataclass(frozen=True)
class BarSpec:
    """
    Geometry parameters for one bar slot. range_min/range_max are the original
    domain; effective geometry uses [-1, 1] when normalized.
    """
    bar_index: int
    bar_count: int
    value: float
    range_min: float
    range_max: float
    separation: float = 0.0
    normalized: bool = False
    baseline_fraction: float = DEFAULT_BASELINE_FRACTION
    stroke_width: float = DEFAULT_STROKE_WIDTH


@dataclass(frozen=True)
class LabelSpec:
    """
    Label text and layout. max_width/max_height of 0 mean unconstrained;
    max_height None lets a bar label use its slice width.
    """
    text: str
    font: FontSpec = field(default_factory=FontSpec)
    color: str = DEFAULT_LABEL_COLOR
    alignment: TextAlignment = TextAlignment.LEFT
    max_width: float = 0.0
    max_height: float | None = None
    rotation_deg: float = BAR_LABEL_ROTATION_DEG
    line_spacing: float = DEFAULT_LINE_SPACING
    wrap_width: float = DEFAULT_WRAP_WIDTH
