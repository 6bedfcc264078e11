# bargraphics/core/layout.py
"""
Bar chart orchestration: one bar layer per value and one label layer per
label, sharing range, normalization and canvas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from shapely.geometry.base import BaseGeometry

from bargraphics.core.chart_layer import BarLayer
from bargraphics.core.config import (
    DEFAULT_BAR_COLOR,
    DEFAULT_BASELINE_FRACTION,
    DEFAULT_STROKE_WIDTH,
)
from bargraphics.core.error_codes import ILLEGIBLE_LABEL
from bargraphics.core.geometry import AffineMatrix
from bargraphics.core.types import DEFAULT_BOUNDS, BarSpec, FontSpec, LabelSpec, Rect

logger = logging.getLogger(__name__)


@dataclass
class ChartLayout:
    """Layers of one bar chart plus the range they were built with."""
    layers: list[BarLayer]
    range_min: float
    range_max: float
    normalized: bool = False
    warnings: list[str] = field(default_factory=list)

    @property
    def bar_layers(self) -> list[BarLayer]:
        return [layer for layer in self.layers if layer.mode == "bar"]

    @property
    def label_layers(self) -> list[BarLayer]:
        return [layer for layer in self.layers if layer.mode == "label"]

    def shapes(self) -> list[tuple[BarLayer, BaseGeometry]]:
        """(layer, shape) for every layer that produced a shape; dropped labels are skipped."""
        out: list[tuple[BarLayer, BaseGeometry]] = []
        for layer in self.layers:
            shape = layer.get_shape()
            if shape is None:
                text = layer.label.text if layer.label is not None else ""
                logger.debug("%s: skipping label %r in slot %d", ILLEGIBLE_LABEL, text, layer.spec.bar_index)
                continue
            out.append((layer, shape))
        return out

    def transform(self, matrix: np.ndarray | AffineMatrix) -> ChartLayout:
        """Every layer rebased onto the transformed bounds."""
        return ChartLayout(
            layers=[layer.transform(matrix) for layer in self.layers],
            range_min=self.range_min,
            range_max=self.range_max,
            normalized=self.normalized,
            warnings=list(self.warnings),
        )


def value_range(values: Sequence[float]) -> tuple[float, float]:
    """(min, max) of values, always including 0 so bars share a baseline."""
    if not values:
        return (0.0, 0.0)
    return (min(min(values), 0.0), max(max(values), 0.0))


def normalize_values(values: Sequence[float], range_min: float, range_max: float) -> list[float]:
    """Scale values into [-1, 1] by the larger magnitude of the range."""
    m = max(abs(range_min), abs(range_max))
    if m == 0:
        return [0.0 for _ in values]
    return [v / m for v in values]


def build_bar_chart(
    values: Sequence[float],
    labels: Sequence[str] | None = None,
    range_min: float | None = None,
    range_max: float | None = None,
    normalized: bool = False,
    separation: float = 0.0,
    baseline_fraction: float = DEFAULT_BASELINE_FRACTION,
    stroke_width: float = DEFAULT_STROKE_WIDTH,
    show_axes: bool = False,
    colors: Sequence[str] | None = None,
    font: FontSpec | None = None,
    bounds: Rect = DEFAULT_BOUNDS,
) -> ChartLayout:
    """
    Build bar and label layers for values. Range defaults to the data range
    (including 0); colors cycle when fewer than values. Labels beyond the
    number of values are ignored.
    """
    lo, hi = value_range(values)
    if range_min is not None:
        lo = range_min
    if range_max is not None:
        hi = range_max
    if not values:
        return ChartLayout(layers=[], range_min=lo, range_max=hi, normalized=normalized)

    n = len(values)
    bar_values = normalize_values(values, lo, hi) if normalized else [float(v) for v in values]
    palette = list(colors) if colors else [DEFAULT_BAR_COLOR]
    font = font or FontSpec()

    def spec_for(index: int, value: float) -> BarSpec:
        return BarSpec(
            bar_index=index,
            bar_count=n,
            value=value,
            range_min=lo,
            range_max=hi,
            separation=separation,
            normalized=normalized,
            baseline_fraction=baseline_fraction,
            stroke_width=stroke_width,
        )

    layers: list[BarLayer] = [
        BarLayer.bar(
            spec_for(i, v),
            show_axes=show_axes,
            color=palette[i % len(palette)],
            bounds=bounds,
        )
        for i, v in enumerate(bar_values)
    ]

    warnings: list[str] = []
    if labels:
        if len(labels) > n:
            warnings.append(f"{len(labels) - n} label(s) without a value were ignored.")
        # Labels hang under the lowest bar so they never overlap a bar.
        label_min = min(min(bar_values), 0.0)
        for i, text in enumerate(labels[:n]):
            layers.append(
                BarLayer.for_label(
                    spec_for(i, label_min),
                    LabelSpec(text=text, font=font),
                    show_axes=show_axes,
                    bounds=bounds,
                )
            )

    return ChartLayout(layers=layers, range_min=lo, range_max=hi, normalized=normalized, warnings=warnings)
