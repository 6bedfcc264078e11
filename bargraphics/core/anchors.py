# bargraphics/core/anchors.py
"""
Label anchoring: turn a resolved position (compass keyword or literal offset)
plus an optional anchor into the point a label is placed at.
"""

from __future__ import annotations

from bargraphics.core.positions import (
    COMPASS_DIRECTIONS,
    ExplicitOffset,
    Position,
    ResolvedPosition,
)
from bargraphics.core.types import Rect


def _compass_offset(position: ResolvedPosition, width: float, height: float, sign: float) -> tuple[float, float]:
    if isinstance(position, Position):
        ux, uy = COMPASS_DIRECTIONS[position]
        return (sign * ux * width / 2, sign * uy * height / 2)
    if isinstance(position, ExplicitOffset):
        return (position.dx, position.dy)
    return (0.0, 0.0)


def anchor_offset(label_box: Rect, anchor: ResolvedPosition | None) -> tuple[float, float]:
    """
    Correction for which point of the label sits on the position. Signs are
    inverted: an EAST anchor moves the label west by half its width.
    """
    if anchor is None:
        return (0.0, 0.0)
    return _compass_offset(anchor, label_box.width, label_box.height, -1.0)


def position_adjust(
    subject_box: Rect,
    label_box: Rect,
    position: ResolvedPosition | None,
    anchor: ResolvedPosition | None = None,
) -> tuple[float, float] | None:
    """
    Placement point: subject_box origin, plus half the subject size toward the
    compass position (or the literal offset), plus the anchor offset.
    None when position is None.
    """
    if position is None:
        return None
    dx, dy = _compass_offset(position, subject_box.width, subject_box.height, 1.0)
    ax, ay = anchor_offset(label_box, anchor)
    return (subject_box.x + dx + ax, subject_box.y + dy + ay)
