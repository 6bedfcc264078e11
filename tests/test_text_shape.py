"""
Text outlines: greedy wrapping, line stacking, and glyph outlines from the
bundled DejaVu Sans font.
"""

from __future__ import annotations

import pytest
from shapely.geometry import Polygon, box

from bargraphics.core.geometry import bounds_rect
from bargraphics.core.text_metrics import font_properties, glyph_outline, measure_text
from bargraphics.core.text_shape import build_label_outline, build_multiline_outline, layout_lines
from bargraphics.core.types import FontSpec

FONT = FontSpec()


def box_shaper(text: str, font: FontSpec) -> Polygon:
    """Fixed-pitch stand-in: 6 units per char, 10 units tall, baseline at 0."""
    if not text.strip():
        return Polygon()
    return box(0, -8, 6 * len(text) - 1, 2)


def test_wrap_splits_greedily() -> None:
    lines = layout_lines("abcdefghij", FONT, max_width=20, shaper=box_shaper)
    assert [line.text for line in lines] == ["abc", "def", "ghi", "j"]


def test_wrap_keeps_every_character() -> None:
    text = "the quick brown fox"
    lines = layout_lines(text, FONT, max_width=27, shaper=box_shaper)
    assert "".join(line.text for line in lines) == text
    for line in lines:
        assert bounds_rect(line.outline).width <= 27 or len(line.text) == 1


def test_single_char_always_accepted() -> None:
    lines = layout_lines("abc", FONT, max_width=1, shaper=box_shaper)
    assert [line.text for line in lines] == ["a", "b", "c"]


def test_unlimited_width_is_one_line() -> None:
    assert len(layout_lines("abcdefghij", FONT, shaper=box_shaper)) == 1


def test_lines_stack_with_spacing() -> None:
    outline = build_multiline_outline("abcdefghij", FONT, max_width=20, line_spacing=1.0, shaper=box_shaper)
    b = bounds_rect(outline)
    # 4 lines of 10 with 3 gaps of 1
    assert b.height == pytest.approx(43.0)
    assert b.width == pytest.approx(17.0)
    assert b.y == pytest.approx(-8.0)


def test_empty_text_gives_none() -> None:
    assert build_multiline_outline(None, FONT, shaper=box_shaper) is None
    assert build_multiline_outline("", FONT, shaper=box_shaper) is None


def test_glyph_outline_sits_on_baseline() -> None:
    outline = glyph_outline("Hi", FONT)
    b = bounds_rect(outline)
    assert not outline.is_empty
    assert b.width > 0 and b.height > 0
    # y-down: capitals rise above the baseline
    assert b.min_y < 0
    assert b.max_y == pytest.approx(0.0, abs=0.5)


def test_glyph_counter_is_a_hole() -> None:
    outline = glyph_outline("o", FONT)
    assert outline.geom_type == "Polygon"
    assert len(outline.interiors) == 1


def test_whitespace_has_no_outline() -> None:
    assert glyph_outline(" ", FONT).is_empty
    assert glyph_outline("", FONT).is_empty


def test_measure_text_grows_with_size() -> None:
    small_w, small_h = measure_text("Bar", FontSpec(size=8.0))
    big_w, big_h = measure_text("Bar", FontSpec(size=16.0))
    assert big_w == pytest.approx(2 * small_w, rel=0.02)
    assert big_h == pytest.approx(2 * small_h, rel=0.02)


def test_missing_font_warns_and_falls_back() -> None:
    with pytest.warns(UserWarning, match="Font not found"):
        prop = font_properties(FontSpec(family="No Such Family 7f3a"))
    assert prop.get_family() == ["DejaVu Sans"]


def test_build_label_outline_fills_defaults() -> None:
    outline = build_label_outline("Label")
    assert outline is not None
    assert bounds_rect(outline).width == pytest.approx(measure_text("Label", FONT)[0])


@pytest.mark.parametrize("text", ["__", "--", "___"])
def test_overlapping_glyphs_stay_filled(text: str) -> None:
    outline = glyph_outline(text, FontSpec(size=20.0))
    assert outline.geom_type == "Polygon"
    assert len(outline.interiors) == 0
    single = glyph_outline(text[0], FontSpec(size=20.0))
    assert bounds_rect(outline).width > bounds_rect(single).width


def test_counters_survive_next_to_other_glyphs() -> None:
    outline = glyph_outline("oo", FONT)
    holes = sum(len(poly.interiors) for poly in getattr(outline, "geoms", [outline]))
    assert holes == 2
