# bargraphics/core/geometry.py
"""
Geometry helpers: polygon normalization, bounds, affine matrices,
shape composition. Shapes are shapely geometries in y-down screen units.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np
from shapely import affinity
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    MultiPolygon,
    Polygon,
)
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from bargraphics.core.types import Rect

# shapely affine_transform order: [a, b, d, e, xoff, yoff]
AffineMatrix = tuple[float, float, float, float, float, float]

IDENTITY: AffineMatrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def ensure_polygon(geom: BaseGeometry | None) -> Polygon | MultiPolygon:
    """Return geom as Polygon or MultiPolygon; fix invalid with buffer(0)."""
    if geom is None or geom.is_empty:
        return Polygon()
    if isinstance(geom, (Polygon, MultiPolygon)):
        if not geom.is_valid:
            geom = geom.buffer(0)
        return geom  # type: ignore[return-value]
    if hasattr(geom, "geoms"):
        polys = [ensure_polygon(g) for g in geom.geoms]
        polys = [p for p in polys if not p.is_empty]
        if not polys:
            return Polygon()
        return ensure_polygon(unary_union(polys))
    return Polygon()


def polygon_bounds(geom: BaseGeometry | None) -> tuple[float, float, float, float]:
    """Return (minx, miny, maxx, maxy); zeros for empty geometry."""
    if geom is None or geom.is_empty:
        return (0.0, 0.0, 0.0, 0.0)
    b = geom.bounds
    return (b[0], b[1], b[2], b[3])


def bounds_rect(geom: BaseGeometry | None) -> Rect:
    """Bounding box of geom as a Rect."""
    return Rect.from_bounds(polygon_bounds(geom))


def closed_path(points: list[tuple[float, float]]) -> LinearRing:
    """
    Closed ring through points, degenerate (collinear) rings included.
    Stroking backends draw a closed zero-height ring differently from an open line.
    """
    if points[0] != points[-1]:
        points = points + [points[0]]
    return LinearRing(points)


def union_shapes(shapes: Iterable[BaseGeometry | None]) -> Polygon | MultiPolygon:
    """Area union of filled shapes; None and empty shapes are skipped."""
    parts = [s for s in shapes if s is not None and not s.is_empty]
    if not parts:
        return Polygon()
    return ensure_polygon(unary_union(parts))


def compose_shapes(shapes: Iterable[BaseGeometry | None]) -> GeometryCollection:
    """
    Collect shapes without merging, so rings and lines keep their own paths.
    Nested collections are flattened.
    """
    out: list[BaseGeometry] = []
    for s in shapes:
        if s is None:
            continue
        if isinstance(s, GeometryCollection):
            out.extend(s.geoms)
        else:
            out.append(s)
    return GeometryCollection(out)


# ----- Affine matrices (3x3 numpy, row-major, column vectors) -----

def translation(dx: float, dy: float) -> np.ndarray:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def scaling(sx: float, sy: float | None = None) -> np.ndarray:
    sy = sx if sy is None else sy
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def rotation_about(angle_deg: float, cx: float, cy: float) -> np.ndarray:
    """Rotation by angle_deg around (cx, cy); positive is clockwise on screen."""
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    rot = np.array([[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]])
    return translation(cx, cy) @ rot @ translation(-cx, -cy)


def to_affine(matrix: np.ndarray) -> AffineMatrix:
    """3x3 matrix to shapely's 6-tuple."""
    return (
        float(matrix[0, 0]), float(matrix[0, 1]),
        float(matrix[1, 0]), float(matrix[1, 1]),
        float(matrix[0, 2]), float(matrix[1, 2]),
    )


def from_affine(matrix: AffineMatrix) -> np.ndarray:
    a, b, d, e, xoff, yoff = matrix
    return np.array([[a, b, xoff], [d, e, yoff], [0.0, 0.0, 1.0]])


def apply_affine(geom: BaseGeometry, matrix: np.ndarray | AffineMatrix) -> BaseGeometry:
    """Transform geom by a 3x3 matrix or a shapely 6-tuple."""
    if isinstance(matrix, np.ndarray):
        matrix = to_affine(matrix)
    return affinity.affine_transform(geom, list(matrix))


def transform_rect(rect: Rect, matrix: np.ndarray | AffineMatrix) -> Rect:
    """Bounding box of rect after the transform."""
    return bounds_rect(apply_affine(rect.to_polygon(), matrix))
