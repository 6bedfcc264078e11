"""
SVG export: path data for each shape kind and the written document.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from shapely.geometry import LinearRing, LineString, box

from bargraphics.core.layout import build_bar_chart
from bargraphics.core.render_svg import SVG_NS, chart_to_svg, export_chart_svg, shape_to_svg_d
from bargraphics.core.types import FontSpec


def test_shape_to_svg_d() -> None:
    d = shape_to_svg_d(box(0, 0, 1, 1))
    assert d.startswith("M ") and d.endswith("Z")
    assert d.count("L ") == 3
    assert shape_to_svg_d(LinearRing([(0, 0), (4, 0), (4, 0), (0, 0)])).endswith("Z")
    assert not shape_to_svg_d(LineString([(0, 0), (0, 5)])).endswith("Z")
    assert shape_to_svg_d(None) == ""


def test_polygon_holes_become_subpaths() -> None:
    donut = box(0, 0, 10, 10).difference(box(3, 3, 6, 6))
    assert shape_to_svg_d(donut).count("M ") == 2


def test_export_writes_svg(tmp_path: Path) -> None:
    chart = build_bar_chart([3.0, -2.0, 5.0], ["a", "b", "c"], show_axes=True)
    out = tmp_path / "chart.svg"
    warnings = export_chart_svg(chart, out)
    assert warnings == []
    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert root.tag == f"{{{SVG_NS}}}svg"
    bars = root.find(f"{{{SVG_NS}}}g[@id='bars']")
    labels = root.find(f"{{{SVG_NS}}}g[@id='labels']")
    assert len(bars) == 3
    assert len(labels) == 3
    assert [p.get("data-slot") for p in bars] == ["0", "1", "2"]
    assert all(p.get("fill-rule") == "evenodd" for p in labels)


def test_dropped_labels_are_reported() -> None:
    chart = build_bar_chart([1.0, 2.0], ["Hello", "World"], font=FontSpec(size=400.0))
    svg, warnings = chart_to_svg(chart)
    assert svg.startswith("<?xml")
    assert len(warnings) == 1
    assert warnings[0].startswith("2 element(s) skipped")
