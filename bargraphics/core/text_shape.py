# bargraphics/core/text_shape.py
"""
Multi-line text outlines: greedy character-level wrapping to a max width,
lines stacked top to bottom. Glyph shapes come from a shaper callable
(default: matplotlib glyph outlines).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from bargraphics.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_STYLE,
    DEFAULT_LINE_SPACING,
    DEFAULT_WRAP_WIDTH,
)
from bargraphics.core.geometry import apply_affine, bounds_rect, translation, union_shapes
from bargraphics.core.text_metrics import glyph_outline
from bargraphics.core.types import FontSpec

Shaper = Callable[[str, FontSpec], BaseGeometry]
Outline = Union[Polygon, MultiPolygon]


@dataclass(frozen=True)
class TextLine:
    """One wrapped line and its unpositioned outline."""
    text: str
    outline: BaseGeometry


def _fit_line(
    text: str,
    start: int,
    font: FontSpec,
    max_width: float,
    shaper: Shaper,
) -> TextLine:
    """Longest prefix of text[start:] whose outline fits max_width; one char always fits."""
    end = len(text)
    while True:
        candidate = text[start:end]
        outline = shaper(candidate, font)
        if len(candidate) == 1 or bounds_rect(outline).width <= max_width:
            return TextLine(candidate, outline)
        end -= 1


def layout_lines(
    text: str,
    font: FontSpec,
    max_width: float = DEFAULT_WRAP_WIDTH,
    shaper: Shaper = glyph_outline,
) -> list[TextLine]:
    """Split text into lines that each fit max_width. Characters are never dropped."""
    lines: list[TextLine] = []
    start = 0
    while start < len(text):
        line = _fit_line(text, start, font, max_width, shaper)
        lines.append(line)
        start += len(line.text)
    return lines


def build_multiline_outline(
    text: str | None,
    font: FontSpec,
    max_width: float = DEFAULT_WRAP_WIDTH,
    line_spacing: float = DEFAULT_LINE_SPACING,
    shaper: Shaper = glyph_outline,
) -> Outline | None:
    """
    Outline of text wrapped to max_width. Each line is moved down by the height
    of the lines above plus line_spacing (no spacing before the first line).
    None for None or empty text.
    """
    if not text:
        return None
    shape: Outline = Polygon()
    for line in layout_lines(text, font, max_width, shaper):
        margin_top = 0.0 if shape.is_empty else line_spacing
        offset = bounds_rect(shape).height + margin_top
        moved = apply_affine(line.outline, translation(0.0, offset))
        shape = union_shapes([shape, moved])
    return shape


def build_label_outline(
    text: str | None,
    family: str | None = None,
    style: str | None = None,
    size: float = 0,
    max_width: float = DEFAULT_WRAP_WIDTH,
    line_spacing: float = DEFAULT_LINE_SPACING,
) -> Outline | None:
    """build_multiline_outline with default family, style and size filled in when missing or zero."""
    font = FontSpec(
        family=family or DEFAULT_FONT_FAMILY,
        style=style or DEFAULT_FONT_STYLE,
        size=size or DEFAULT_FONT_SIZE,
    )
    return build_multiline_outline(text, font, max_width, line_spacing)
