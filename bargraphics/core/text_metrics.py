# bargraphics/core/text_metrics.py
"""
Glyph outlines for a single line of text using matplotlib's font engine.
Outlines are y-down with the baseline at y = 0, in font units of 1 pt.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

from matplotlib import font_manager
from matplotlib.font_manager import FontProperties
from matplotlib.path import Path
from matplotlib.textpath import text_to_path
from matplotlib.transforms import Affine2D
from shapely import affinity
from shapely.geometry import LinearRing, MultiPolygon, Polygon
from shapely.ops import unary_union

from bargraphics.core.config import DEFAULT_FONT_FAMILY, GLYPH_CACHE_SIZE
from bargraphics.core.geometry import bounds_rect, ensure_polygon
from bargraphics.core.types import FontSpec, Rect

_font_warning_emitted: set[str] = set()


def font_properties(font: FontSpec) -> FontProperties:
    """matplotlib FontProperties for font; fallback with warning if the family is missing."""
    prop = FontProperties(
        family=font.family,
        style=font.style,
        weight=font.weight,
        size=font.size,
    )
    try:
        font_manager.findfont(prop, fallback_to_default=False)
    except ValueError:
        if font.family not in _font_warning_emitted:
            _font_warning_emitted.add(font.family)
            warnings.warn(f"Font not found: {font.family!r}; using default.", UserWarning)
        prop.set_family(DEFAULT_FONT_FAMILY)
    return prop


def _rings_to_geometry(rings: list) -> Polygon | MultiPolygon:
    """
    Fill glyph contours by winding direction: rings turning the same way as the
    largest ring are filled, the others are counters (the hole in 'o').
    Overlapping neighbours (kerned pairs, runs of '_') stay filled.
    """
    parts: list[tuple[Polygon, bool]] = []
    for ring in rings:
        if len(ring) < 4:
            continue
        ccw = LinearRing(ring).is_ccw
        poly = Polygon(ring)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if poly.is_empty:
            continue
        parts.append((poly, ccw))
    if not parts:
        return Polygon()
    _, outer_ccw = max(parts, key=lambda part: part[0].area)
    fills = unary_union([poly for poly, ccw in parts if ccw == outer_ccw])
    counters = unary_union([poly for poly, ccw in parts if ccw != outer_ccw])
    return ensure_polygon(fills.difference(counters))


@lru_cache(maxsize=GLYPH_CACHE_SIZE)
def glyph_outline(text: str, font: FontSpec) -> Polygon | MultiPolygon:
    """
    Filled outline of one line of text. Whitespace-only or empty text gives an
    empty polygon. Cached; shapely geometries are immutable so sharing is safe.
    """
    if not text:
        return Polygon()
    prop = font_properties(font)
    verts, codes = text_to_path.get_text_path(prop, text)
    if len(verts) == 0:
        return Polygon()
    path = Path(verts, codes).transformed(
        Affine2D().scale(font.size / text_to_path.FONT_SCALE)
    )
    geom = _rings_to_geometry(path.to_polygons(closed_only=True))
    if geom.is_empty:
        return geom
    # Font space is y-up; flip to screen space about the baseline.
    return ensure_polygon(affinity.scale(geom, xfact=1.0, yfact=-1.0, origin=(0, 0)))


def outline_bounds(outline: Polygon | MultiPolygon | None) -> Rect:
    """Tight bounding box of an outline; zero box for empty outlines."""
    return bounds_rect(outline)


def measure_text(text: str, font: FontSpec) -> tuple[float, float]:
    """Return (width, height) of the outline of text."""
    b = outline_bounds(glyph_outline(text, font))
    return (b.width, b.height)
