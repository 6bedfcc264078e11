# bargraphics/core/chart_layer.py
"""
Chart layer for one bar slot: either the bar itself (with axes on the first
slot) or the slot's label (with axis tick labels on the first slot).
Layers are immutable; transform() returns a rebased copy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np
from shapely.geometry.base import BaseGeometry

from bargraphics.core.axes import build_axes
from bargraphics.core.bars import compute_bar, effective_range
from bargraphics.core.config import (
    DEFAULT_BAR_COLOR,
    DEFAULT_STROKE_COLOR,
)
from bargraphics.core.geometry import AffineMatrix, compose_shapes, transform_rect, union_shapes
from bargraphics.core.label_placement import place_label
from bargraphics.core.positions import TextAlignment
from bargraphics.core.text_shape import build_multiline_outline
from bargraphics.core.types import DEFAULT_BOUNDS, BarSpec, LabelSpec, LayerMode, Rect


def format_tick(value: float) -> str:
    """Default float text, e.g. 50.0 -> '50.0'."""
    return str(float(value))


@dataclass(frozen=True)
class BarLayer:
    """
    One bar slot. In "bar" mode spec.value is the bar's value; in "label" mode
    it is the value whose bar the label hangs under (usually the chart minimum)
    and label holds the text.
    """
    mode: LayerMode
    spec: BarSpec
    show_axes: bool = False
    color: str = DEFAULT_BAR_COLOR
    stroke_color: str = DEFAULT_STROKE_COLOR
    label: LabelSpec | None = None
    bounds: Rect = DEFAULT_BOUNDS

    def __post_init__(self) -> None:
        if self.mode not in ("bar", "label"):
            raise ValueError(f"unknown layer mode {self.mode!r}")
        if self.mode == "label" and self.label is None:
            raise ValueError("label layer needs a LabelSpec")
        if self.mode == "bar" and self.label is not None:
            raise ValueError("bar layer cannot carry a LabelSpec")

    @classmethod
    def bar(cls, spec: BarSpec, **kwargs: object) -> BarLayer:
        return cls(mode="bar", spec=spec, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def for_label(cls, spec: BarSpec, label: LabelSpec, **kwargs: object) -> BarLayer:
        kwargs.setdefault("color", label.color)
        kwargs.setdefault("stroke_color", label.color)
        return cls(mode="label", spec=spec, label=label, **kwargs)  # type: ignore[arg-type]

    # ----- Painted-shape contract -----

    @property
    def paint(self) -> str:
        return self.color

    @property
    def stroke_paint(self) -> str:
        return self.stroke_color

    @property
    def stroke_width(self) -> float | None:
        """Only bars are stroked."""
        if self.mode == "bar":
            return self.spec.stroke_width
        return None

    def get_shape(self) -> BaseGeometry | None:
        """Bar or label shape for this slot; None if the label was dropped."""
        if self.label is not None:
            return self._label_shape(self.label)
        return self._bar_shape()

    def transform(self, matrix: np.ndarray | AffineMatrix) -> BarLayer:
        """Same layer with bounds replaced by the transformed bounds."""
        return replace(self, bounds=transform_rect(self.bounds, matrix))

    def bar_rect(self, value: float | None = None) -> Rect:
        """Rectangle for value (default: this slot's value) in this layer's bounds."""
        v = self.spec.value if value is None else value
        return compute_bar(self.bounds, self.spec, v)

    # ----- Shapes -----

    def _bar_shape(self) -> BaseGeometry:
        bar = self.bar_rect().to_polygon()
        if self.spec.bar_index == 0:
            axes = build_axes(self.bounds, self.spec, show_range_axis=self.show_axes)
            return compose_shapes([axes, bar])
        return bar

    def _label_shape(self, label: LabelSpec) -> BaseGeometry | None:
        bar = self.bar_rect()
        position = (bar.center_x, bar.max_y + label.font.size / 2)
        max_height = bar.width if label.max_height is None else label.max_height

        outline = build_multiline_outline(label.text, label.font, label.wrap_width, label.line_spacing)
        text_shape = place_label(
            outline, position, label.alignment,
            max_height=max_height,
            max_width=label.max_width,
            rotation_deg=label.rotation_deg,
        )

        if self.spec.bar_index == 0 and self.show_axes:
            ticks = [self._tick_shape(value, label) for value in self.tick_values()]
            return union_shapes(ticks + [text_shape])
        return text_shape

    def tick_values(self) -> list[float]:
        """Axis tick values: effective min and max, plus 0.0 when the range straddles zero."""
        lo, hi = effective_range(self.spec)
        values = [lo, hi]
        if lo < 0.0 < hi:
            values.append(0.0)
        return values

    def _tick_text(self, value: float) -> str:
        if self.spec.normalized:
            lo, hi = effective_range(self.spec)
            if value == lo:
                return format_tick(self.spec.range_min)
            if value == hi:
                return format_tick(self.spec.range_max)
        return format_tick(value)

    def _tick_shape(self, value: float, label: LabelSpec) -> BaseGeometry | None:
        """Axis tick label right-aligned one font size left of the first bar's edge."""
        bar = compute_bar(self.bounds, self.spec, value, bar_index=0)
        y = bar.max_y if value < 0.0 else bar.min_y
        position = (bar.min_x - label.font.size, y)
        outline = build_multiline_outline(self._tick_text(value), label.font)
        return place_label(outline, position, TextAlignment.RIGHT)
