# bargraphics/core/positions.py
"""
Alignment and position vocabulary: text alignment keywords, compass positions,
and parsing of position arguments ("northeast" or "12,-4").
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from bargraphics.core.error_codes import INVALID_POSITION

logger = logging.getLogger(__name__)


class TextAlignment(Enum):
    """How a label is placed relative to its target point."""
    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    CENTER_TOP = "center_top"
    RIGHT = "right"
    CENTER_BOTTOM = "center_bottom"
    MIDDLE = "middle"

    @classmethod
    def from_label(cls, label: str | None) -> TextAlignment | None:
        """Case-sensitive keyword lookup; None if unknown."""
        try:
            return cls(label)
        except ValueError:
            return None


class Position(Enum):
    """Compass positions relative to the center of a box."""
    CENTER = "center"
    EAST = "east"
    NORTH = "north"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTH = "south"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    WEST = "west"

    @classmethod
    def from_label(cls, label: str | None) -> Position | None:
        try:
            return cls(label)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExplicitOffset:
    """A literal (dx, dy) offset given as "x,y"."""
    dx: float
    dy: float


ResolvedPosition = Union[Position, ExplicitOffset]

# Plain decimal or exponent notation; no "nan", "inf" or digit separators.
_NUMBER_RE = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*")


# (x, y) multipliers of half the box size; y grows downward.
COMPASS_DIRECTIONS: dict[Position, tuple[int, int]] = {
    Position.CENTER: (0, 0),
    Position.EAST: (1, 0),
    Position.WEST: (-1, 0),
    Position.NORTH: (0, -1),
    Position.SOUTH: (0, 1),
    Position.NORTHEAST: (1, -1),
    Position.NORTHWEST: (-1, -1),
    Position.SOUTHEAST: (1, 1),
    Position.SOUTHWEST: (-1, 1),
}


def parse_alignment(label: str | None, default: TextAlignment = TextAlignment.NONE) -> TextAlignment:
    """Alignment for a keyword, or default when the keyword is unknown."""
    alignment = TextAlignment.from_label(label)
    return alignment if alignment is not None else default


def resolve_position(position: str | None) -> ResolvedPosition | None:
    """
    Return a Position for a compass keyword or an ExplicitOffset for "x,y".
    None if the input is neither; callers treat None as "no adjustment".
    """
    if position is None:
        return None
    compass = Position.from_label(position)
    if compass is not None:
        return compass

    xy = position.split(",")
    if len(xy) != 2:
        logger.debug("%s: unrecognized position %r", INVALID_POSITION, position)
        return None
    if not all(_NUMBER_RE.fullmatch(part) for part in xy):
        logger.debug("%s: malformed position pair %r", INVALID_POSITION, position)
        return None
    return ExplicitOffset(float(xy[0]), float(xy[1]))
