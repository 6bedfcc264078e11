"""
build_bar_chart: one bar layer per value, label layers under the lowest bar,
shared range and normalization.
"""

from __future__ import annotations

import pytest

from bargraphics.core.geometry import scaling
from bargraphics.core.layout import build_bar_chart, normalize_values, value_range
from bargraphics.core.types import DEFAULT_BOUNDS, FontSpec, Rect


def test_value_range_includes_zero() -> None:
    assert value_range([]) == (0.0, 0.0)
    assert value_range([3.0, 5.0]) == (0.0, 5.0)
    assert value_range([-3.0, -1.0]) == (-3.0, 0.0)


def test_normalize_values() -> None:
    assert normalize_values([2.0, -4.0], -4.0, 2.0) == [0.5, -1.0]
    assert normalize_values([1.0], 0.0, 0.0) == [0.0]


def test_layers_per_value_and_label() -> None:
    chart = build_bar_chart([3.0, -2.0, 5.0], ["a", "b", "c"])
    assert len(chart.bar_layers) == 3
    assert len(chart.label_layers) == 3
    assert (chart.range_min, chart.range_max) == (-2.0, 5.0)
    assert [layer.spec.value for layer in chart.bar_layers] == [3.0, -2.0, 5.0]
    assert [layer.spec.bar_index for layer in chart.label_layers] == [0, 1, 2]
    # labels hang under the lowest bar
    assert all(layer.spec.value == -2.0 for layer in chart.label_layers)
    assert all(layer.spec.bar_count == 3 for layer in chart.layers)


def test_explicit_range_overrides_data() -> None:
    chart = build_bar_chart([3.0], range_min=-10.0, range_max=10.0)
    spec = chart.bar_layers[0].spec
    assert (spec.range_min, spec.range_max) == (-10.0, 10.0)


def test_normalized_chart() -> None:
    chart = build_bar_chart([2.0, -4.0], normalized=True)
    assert [layer.spec.value for layer in chart.bar_layers] == [0.5, -1.0]
    assert (chart.range_min, chart.range_max) == (-4.0, 2.0)
    assert all(layer.spec.normalized for layer in chart.layers)


def test_empty_values() -> None:
    chart = build_bar_chart([], ["orphan"])
    assert chart.layers == []
    assert chart.shapes() == []


def test_extra_labels_are_reported() -> None:
    chart = build_bar_chart([1.0], ["a", "b", "c"])
    assert len(chart.label_layers) == 1
    assert chart.warnings == ["2 label(s) without a value were ignored."]


def test_colors_cycle() -> None:
    chart = build_bar_chart([1.0, 2.0, 3.0], colors=["red", "blue"])
    assert [layer.paint for layer in chart.bar_layers] == ["red", "blue", "red"]


def test_shapes_for_every_layer() -> None:
    chart = build_bar_chart([3.0, -2.0, 5.0], ["a", "b", "c"], show_axes=True)
    shapes = chart.shapes()
    assert len(shapes) == 6
    assert all(not shape.is_empty for _, shape in shapes)


def test_dropped_labels_are_skipped() -> None:
    chart = build_bar_chart([1.0, 2.0], ["Hello", "World"], font=FontSpec(size=400.0))
    assert len(chart.shapes()) == 2


def test_transform_rebases_every_layer() -> None:
    chart = build_bar_chart([1.0, 2.0], ["a", "b"])
    moved = chart.transform(scaling(2.0))
    assert all(layer.bounds == Rect(0.0, 0.0, 200.0, 100.0) for layer in moved.layers)
    assert all(layer.bounds == DEFAULT_BOUNDS for layer in chart.layers)
    assert moved.bar_layers[1].bar_rect().height == pytest.approx(
        2 * chart.bar_layers[1].bar_rect().height, rel=1e-3
    )
