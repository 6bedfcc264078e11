# bargraphics/core/render_svg.py
"""
Export a bar chart layout as a self-contained SVG: bars filled and stroked,
axes stroked, labels filled. Geometry is already y-down, so no flip is needed.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiPolygon,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

from bargraphics.core.config import SVG_HEIGHT_PX, SVG_WIDTH_PX
from bargraphics.core.error_codes import ILLEGIBLE_LABEL, user_message
from bargraphics.core.geometry import polygon_bounds
from bargraphics.core.layout import ChartLayout

SVG_NS = "http://www.w3.org/2000/svg"


def _coords_to_svg_d(coords: list[tuple[float, float]], closed: bool) -> str:
    """Polyline to SVG path d (M L L ...), with Z when closed."""
    if not coords:
        return ""
    parts = [f"M {coords[0][0]:.4f} {coords[0][1]:.4f}"]
    for x, y in coords[1:]:
        parts.append(f"L {x:.4f} {y:.4f}")
    if closed:
        parts.append("Z")
    return " ".join(parts)


def shape_to_svg_d(geom: BaseGeometry | None) -> str:
    """SVG path data for polygons (holes as extra subpaths), rings, lines and collections."""
    if geom is None or geom.is_empty:
        return ""
    if isinstance(geom, Polygon):
        rings = [geom.exterior, *geom.interiors]
        return " ".join(_coords_to_svg_d(list(r.coords)[:-1], closed=True) for r in rings)
    if isinstance(geom, LinearRing):
        return _coords_to_svg_d(list(geom.coords)[:-1], closed=True)
    if isinstance(geom, LineString):
        return _coords_to_svg_d(list(geom.coords), closed=False)
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        return " ".join(d for d in (shape_to_svg_d(g) for g in geom.geoms) if d)
    return ""


def _view_box(shapes: list[BaseGeometry], margin: float) -> tuple[float, float, float, float]:
    """(min_x, min_y, width, height) covering all shapes plus margin."""
    boxes = [polygon_bounds(s) for s in shapes if not s.is_empty]
    if not boxes:
        return (0.0, 0.0, 1.0, 1.0)
    min_x = min(b[0] for b in boxes) - margin
    min_y = min(b[1] for b in boxes) - margin
    max_x = max(b[2] for b in boxes) + margin
    max_y = max(b[3] for b in boxes) + margin
    return (min_x, min_y, max(1.0, max_x - min_x), max(1.0, max_y - min_y))


def chart_to_svg(
    layout: ChartLayout,
    width_px: int = SVG_WIDTH_PX,
    height_px: int = SVG_HEIGHT_PX,
    margin: float = 2.0,
) -> tuple[str, list[str]]:
    """Return (svg text, warnings). Dropped labels are reported in warnings."""
    warnings = list(layout.warnings)
    drawn = layout.shapes()
    dropped = len(layout.layers) - len(drawn)
    if dropped:
        warnings.append(f"{dropped} element(s) skipped: {user_message(ILLEGIBLE_LABEL)}")

    min_x, min_y, vw, vh = _view_box([shape for _, shape in drawn], margin)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": str(width_px),
            "height": str(height_px),
            "viewBox": f"{min_x:.2f} {min_y:.2f} {vw:.2f} {vh:.2f}",
            "preserveAspectRatio": "xMidYMid meet",
        },
    )
    g_bars = ET.SubElement(root, "g", {"id": "bars"})
    g_labels = ET.SubElement(root, "g", {"id": "labels"})

    for layer, shape in drawn:
        d = shape_to_svg_d(shape)
        if not d:
            continue
        if layer.mode == "bar":
            ET.SubElement(
                g_bars,
                "path",
                {
                    "d": d,
                    "fill": layer.paint,
                    "stroke": layer.stroke_paint,
                    "stroke-width": f"{layer.stroke_width:.4f}",
                    "data-slot": str(layer.spec.bar_index),
                },
            )
        else:
            ET.SubElement(
                g_labels,
                "path",
                {
                    "d": d,
                    "fill": layer.paint,
                    "fill-rule": "evenodd",
                    "stroke": "none",
                    "data-slot": str(layer.spec.bar_index),
                },
            )

    out_str = ET.tostring(root, encoding="unicode", method="xml")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, warnings


def export_chart_svg(
    layout: ChartLayout,
    out_path: str | Path,
    width_px: int = SVG_WIDTH_PX,
    height_px: int = SVG_HEIGHT_PX,
) -> list[str]:
    """Write the chart SVG to out_path; returns warnings for skipped elements."""
    svg, warnings = chart_to_svg(layout, width_px=width_px, height_px=height_px)
    Path(out_path).write_text(svg, encoding="utf-8")
    return warnings
