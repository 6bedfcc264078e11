# bargraphics/core/bars.py
"""
Bar geometry: the rectangle for a value inside an N-bar layout.
Pure functions; bar_index is passed explicitly so probing other slots
(axes, tick labels) never touches shared state.
"""

from __future__ import annotations

from bargraphics.core.config import MIN_SLICE_SIZE
from bargraphics.core.error_codes import DEGENERATE_GEOMETRY
from bargraphics.core.types import BarSpec, Rect


def effective_range(spec: BarSpec) -> tuple[float, float]:
    """(min, max) used for geometry: [-1, 1] when normalized, else the original range."""
    if spec.normalized:
        return (-1.0, 1.0)
    return (spec.range_min, spec.range_max)


def symmetric_domain(spec: BarSpec) -> tuple[float, float]:
    """[-m, m] with m the larger magnitude of the effective range; pins the zero line."""
    lo, hi = effective_range(spec)
    m = max(abs(lo), abs(hi))
    return (-m, m)


def slice_size(width: float, bar_count: int, separation: float, stroke_width: float = 0.0) -> float:
    """
    Width allotted to one bar, minus room for the stroke on both edges.
    n bars share n-1 separators; separation is dropped if slices get too thin.
    """
    if bar_count <= 0:
        raise ValueError(f"{DEGENERATE_GEOMETRY}: bar_count must be >= 1, got {bar_count}")
    size = (width - (bar_count * separation) + separation) / bar_count
    if size < MIN_SLICE_SIZE and separation > 0:
        size = width / bar_count
    return size - stroke_width * 2


def compute_bar(
    bounds: Rect,
    spec: BarSpec,
    value: float,
    bar_index: int | None = None,
) -> Rect:
    """
    Rectangle for value in slot bar_index (default spec.bar_index).
    Positive values rise from the baseline, others hang below it; both are
    inset by the stroke width so outlines are not counted twice.
    """
    index = spec.bar_index if bar_index is None else bar_index
    x = bounds.x - bounds.width / 2
    y = bounds.y - bounds.height / 2
    height = bounds.height
    stroke = spec.stroke_width

    size = slice_size(bounds.width, spec.bar_count, spec.separation, stroke)
    _, max_value = symmetric_domain(spec)
    ratio = value / max_value if max_value != 0 else 0.0

    ybase = spec.baseline_fraction * height
    px = x + index * size + stroke
    if value > 0.0:
        py = y + ybase - ybase * ratio - stroke
        h = ybase * ratio + stroke / 4
    else:
        py = y + ybase - stroke / 4
        h = ybase * -ratio - stroke

    return Rect(px, py, size - stroke, max(0.0, h))
