"""
Position and alignment vocabulary: keyword lookup and "x,y" parsing.
"""

from __future__ import annotations

import pytest

from bargraphics.core.positions import (
    ExplicitOffset,
    Position,
    TextAlignment,
    parse_alignment,
    resolve_position,
)


def test_resolve_compass_keyword() -> None:
    assert resolve_position("northeast") is Position.NORTHEAST
    assert resolve_position("center") is Position.CENTER


def test_resolve_literal_pair() -> None:
    assert resolve_position("12,-4") == ExplicitOffset(12.0, -4.0)
    assert resolve_position(" 1.5 , 2") == ExplicitOffset(1.5, 2.0)


@pytest.mark.parametrize("text", ["bogus", "NorthEast", "1,2,3", "a,b", "7", "", None])
def test_resolve_rejects_unknown_input(text: str | None) -> None:
    assert resolve_position(text) is None


def test_parse_alignment() -> None:
    assert parse_alignment("center_top") is TextAlignment.CENTER_TOP
    assert parse_alignment("middle") is TextAlignment.MIDDLE
    assert parse_alignment("sideways") is TextAlignment.NONE
    assert parse_alignment("sideways", default=TextAlignment.LEFT) is TextAlignment.LEFT


def test_position_labels() -> None:
    assert str(Position.SOUTHWEST) == "southwest"
    assert Position.from_label("west") is Position.WEST
    assert Position.from_label("WEST") is None


@pytest.mark.parametrize("text", ["1_0,2", "nan,1", "1,inf", "0x10,1", "1e,2"])
def test_resolve_rejects_non_decimal_numbers(text: str) -> None:
    assert resolve_position(text) is None


def test_resolve_accepts_decimal_forms() -> None:
    assert resolve_position("1e1,.5") == ExplicitOffset(10.0, 0.5)
    assert resolve_position("+3.,-2E-1") == ExplicitOffset(3.0, -0.2)
