# bargraphics/core/axes.py
"""
Axis shapes for the first bar slot: the zero line across all slots and an
optional vertical line spanning the value range.
"""

from __future__ import annotations

from shapely.geometry import GeometryCollection, LinearRing, LineString

from bargraphics.core.bars import compute_bar, effective_range
from bargraphics.core.geometry import closed_path, compose_shapes
from bargraphics.core.types import BarSpec, Rect


def zero_line(bounds: Rect, spec: BarSpec) -> LinearRing:
    """
    Zero-height closed ring from the left edge of the first slot to the right
    edge of the last, at the baseline.
    """
    first = compute_bar(bounds, spec, 0.0, bar_index=0)
    last = compute_bar(bounds, spec, 0.0, bar_index=spec.bar_count - 1)
    y = first.min_y
    return closed_path([
        (first.min_x, y),
        (last.max_x, y),
        (last.max_x, y),
        (first.min_x, y),
    ])


def range_line(bounds: Rect, spec: BarSpec) -> LineString:
    """Vertical line from the bottom of the min bar to the top of the max bar, first slot."""
    lo, hi = effective_range(spec)
    bottom = compute_bar(bounds, spec, lo, bar_index=0)
    top = compute_bar(bounds, spec, hi, bar_index=0)
    return LineString([(bottom.min_x, bottom.max_y), (top.min_x, top.min_y)])


def build_axes(bounds: Rect, spec: BarSpec, show_range_axis: bool = False) -> GeometryCollection:
    """Zero line, plus the range line when show_range_axis is set."""
    shapes = [zero_line(bounds, spec)]
    if show_range_axis:
        shapes.append(range_line(bounds, spec))
    return compose_shapes(shapes)
