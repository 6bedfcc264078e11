# bargraphics/core/label_placement.py
"""
Label placement: move an outline to a target point by alignment, shrink it
to fit width/height limits, rotate about the target. Also leader lines from
a label to its subject and aspect-preserving transforms for text.
"""

from __future__ import annotations

import logging

from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry

from bargraphics.core.config import (
    LABEL_LINE_GAP,
    LABEL_LINE_WIDTH,
    LABEL_SCALE_MARGIN,
    MIN_LABEL_SCALE,
)
from bargraphics.core.error_codes import ILLEGIBLE_LABEL
from bargraphics.core.geometry import (
    AffineMatrix,
    apply_affine,
    bounds_rect,
    from_affine,
    rotation_about,
    scaling,
    translation,
)
from bargraphics.core.positions import TextAlignment
from bargraphics.core.types import Rect

logger = logging.getLogger(__name__)


def fit_scale(width: float, height: float, max_width: float = 0.0, max_height: float = 0.0) -> float:
    """
    Uniform scale that brings (width, height) inside the limits with a margin.
    0 means no limit; 1.0 if nothing needs shrinking.
    """
    scale_width = 1.0
    scale_height = 1.0
    if max_width > 0.0 and width > max_width:
        scale_width = max_width / width * LABEL_SCALE_MARGIN
    if max_height > 0.0 and height > max_height:
        scale_height = max_height / height * LABEL_SCALE_MARGIN
    return min(scale_width, scale_height)


def alignment_offset(alignment: TextAlignment, width: float, height: float) -> tuple[float, float]:
    """(dx, dy) from the target point to the outline origin."""
    if alignment is TextAlignment.CENTER_TOP:
        return (-width / 2, height / 2)
    if alignment is TextAlignment.CENTER_BOTTOM:
        return (-width / 2, -height)
    if alignment is TextAlignment.RIGHT:
        return (-width, -height / 2)
    if alignment is TextAlignment.LEFT:
        return (0.0, -height / 2)
    if alignment is TextAlignment.MIDDLE:
        return (-width / 2, -height / 2)
    if alignment is TextAlignment.CENTER:
        return (-width / 2, 0.0)
    return (0.0, 0.0)


def place_label(
    outline: BaseGeometry | None,
    target: tuple[float, float],
    alignment: TextAlignment,
    max_height: float = 0.0,
    max_width: float = 0.0,
    rotation_deg: float = 0.0,
) -> BaseGeometry | None:
    """
    Position outline at target. Returns None when there is no outline or when
    fitting would shrink it below MIN_LABEL_SCALE.
    """
    if outline is None:
        return None

    b = bounds_rect(outline)
    shape = apply_affine(outline, translation(-b.x, -b.y))
    width, height = b.width, b.height

    if max_height > 0.0 or max_width > 0.0:
        scale = fit_scale(width, height, max_width=max_width, max_height=max_height)
        if scale < MIN_LABEL_SCALE:
            logger.debug(
                "%s: scale %.3f for %.1fx%.1f label (limits %.1fx%.1f)",
                ILLEGIBLE_LABEL, scale, width, height, max_width, max_height,
            )
            return None
        if scale != 1.0:
            shape = apply_affine(shape, scaling(scale))
            width *= scale
            height *= scale

    px, py = target
    dx, dy = alignment_offset(alignment, width, height)
    matrix = translation(px + dx, py + dy)
    if rotation_deg != 0.0:
        matrix = rotation_about(rotation_deg, px, py) @ matrix
    return apply_affine(shape, matrix)


def label_line_start(text_bounds: Rect, alignment: TextAlignment) -> tuple[float, float]:
    """Where a leader line leaves the text box: just outside the aligned side."""
    if alignment is TextAlignment.CENTER_TOP:
        return (text_bounds.center_x, text_bounds.min_y - LABEL_LINE_GAP)
    if alignment is TextAlignment.CENTER_BOTTOM:
        return (text_bounds.center_x, text_bounds.max_y + LABEL_LINE_GAP)
    if alignment is TextAlignment.RIGHT:
        return (text_bounds.max_x + LABEL_LINE_GAP, text_bounds.center_y)
    if alignment is TextAlignment.LEFT:
        return (text_bounds.min_x - LABEL_LINE_GAP, text_bounds.center_y)
    return (0.0, 0.0)


def label_line(
    text_bounds: Rect,
    label_position: tuple[float, float],
    alignment: TextAlignment,
    width: float = LABEL_LINE_WIDTH,
) -> Polygon:
    """Stroked leader line from the text box to label_position (e.g. a bar edge)."""
    start = label_line_start(text_bounds, alignment)
    line = LineString([start, label_position])
    return line.buffer(width / 2, cap_style="square", join_style="mitre")


def transform_uniform(geom: BaseGeometry, matrix: AffineMatrix, rescale: bool = True) -> BaseGeometry:
    """
    Apply matrix with equal x/y scale so text is never stretched: the smaller
    scale when rescale, otherwise none. Shear and translation are kept.
    """
    m = from_affine(matrix)
    if rescale:
        scale = min(m[0, 0], m[1, 1])
    else:
        scale = 1.0
    m[0, 0] = scale
    m[1, 1] = scale
    return apply_affine(geom, m)
