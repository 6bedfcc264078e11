# bargraphics/core/shadow.py
"""
Raster drop shadows for shapes: rasterize with Pillow, then a separable
Gaussian blur with numpy. Post-processing only; layout never depends on it.
"""

from __future__ import annotations

import math

import numpy as np
from PIL import Image, ImageDraw
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from bargraphics.core.config import SHADOW_COLOR
from bargraphics.core.geometry import apply_affine, bounds_rect, ensure_polygon, translation


def gaussian_kernel(radius: int) -> np.ndarray:
    """1D kernel of 2*radius+1 taps, sigma = radius/3, summing to 1."""
    if radius < 1:
        raise ValueError("Radius must be >= 1")
    sigma = radius / 3.0
    two_sigma_square = 2.0 * sigma * sigma
    sigma_root = math.sqrt(two_sigma_square * math.pi)
    distance = np.arange(-radius, radius + 1, dtype=np.float64) ** 2
    data = np.exp(-distance / two_sigma_square) / sigma_root
    return data / data.sum()


def _convolve_axis(a: np.ndarray, kernel: np.ndarray, axis: int) -> np.ndarray:
    """Convolve along axis; pixels closer than the radius to the edge keep their value."""
    r = len(kernel) // 2
    out = a.copy()
    if a.shape[axis] < len(kernel):
        return out
    moved = np.moveaxis(a, axis, -1)
    blurred = np.apply_along_axis(lambda row: np.convolve(row, kernel, mode="valid"), -1, moved)
    target = np.moveaxis(out, axis, -1)
    target[..., r:a.shape[axis] - r] = blurred
    return out


def _polygons(geom: BaseGeometry) -> list[Polygon]:
    geom = ensure_polygon(geom)
    if isinstance(geom, MultiPolygon):
        return list(geom.geoms)
    if geom.is_empty:
        return []
    return [geom]


def rasterize_shape(shape: BaseGeometry) -> Image.Image:
    """RGBA image of the shape's filled area, sized to its bounding box."""
    b = bounds_rect(shape)
    width = max(1, int(b.width))
    height = max(1, int(b.height))
    image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    moved = apply_affine(shape, translation(-b.x, -b.y))
    for poly in _polygons(moved):
        draw.polygon(list(poly.exterior.coords), fill=SHADOW_COLOR)
        for hole in poly.interiors:
            draw.polygon(list(hole.coords), fill=(0, 0, 0, 0))
    return image


def create_drop_shadow(image: Image.Image, size: int) -> Image.Image:
    """
    Black blurred copy of image's alpha, padded by 2*size on every side.
    Blur runs horizontally then vertically.
    """
    kernel = gaussian_kernel(size)
    shadow = Image.new("RGBA", (image.width + 4 * size, image.height + 4 * size), (0, 0, 0, 0))
    shadow.paste(image, (size * 2, size * 2))

    alpha = np.asarray(shadow.getchannel("A"), dtype=np.float64)
    alpha = _convolve_axis(alpha, kernel, axis=1)
    alpha = _convolve_axis(alpha, kernel, axis=0)

    out = np.zeros((shadow.height, shadow.width, 4), dtype=np.uint8)
    out[..., :3] = SHADOW_COLOR[:3]
    out[..., 3] = np.clip(np.rint(alpha), 0, 255).astype(np.uint8)
    return Image.fromarray(out)


def shape_shadow(shape: BaseGeometry, size: int) -> Image.Image:
    """Drop shadow image for a shape."""
    return create_drop_shadow(rasterize_shape(shape), size)
