# bargraphics/core/runner.py
"""
CLI entrypoint: build a bar chart from comma-separated values and labels,
write it as SVG.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from bargraphics.core.config import (
    DEFAULT_BASELINE_FRACTION,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_STROKE_WIDTH,
    LOG_LEVEL,
    SVG_HEIGHT_PX,
    SVG_WIDTH_PX,
)
from bargraphics.core.layout import build_bar_chart
from bargraphics.core.render_svg import export_chart_svg
from bargraphics.core.types import FontSpec

logger = logging.getLogger(__name__)


def parse_values(s: str) -> list[float]:
    """Parse '3,-2,5.5' into floats; blank items are skipped."""
    out: list[float] = []
    for part in (s or "").split(","):
        part = part.strip()
        if part:
            out.append(float(part))
    return out


def parse_labels(s: str) -> list[str]:
    """Parse 'a,b,c' into labels; items are stripped, empty items kept as ''."""
    if not (s or "").strip():
        return []
    return [part.strip() for part in s.split(",")]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a small bar chart as SVG.")
    p.add_argument("--values", type=str, required=True, help="Bar values, e.g. '3,-2,5'")
    p.add_argument("--labels", type=str, default="", help="Bar labels, e.g. 'a,b,c'")
    p.add_argument("--out", type=str, default="chart.svg", help="Output SVG path")
    p.add_argument("--range-min", type=float, default=None, dest="range_min", help="Axis minimum (default: data)")
    p.add_argument("--range-max", type=float, default=None, dest="range_max", help="Axis maximum (default: data)")
    p.add_argument("--normalized", action="store_true", help="Scale values into [-1, 1]")
    p.add_argument("--show-axes", action="store_true", dest="show_axes", help="Draw range axis and tick labels")
    p.add_argument("--separation", type=float, default=0.0, help="Gap between bars (canvas units)")
    p.add_argument("--baseline", type=float, default=DEFAULT_BASELINE_FRACTION, help="Zero line as fraction of height")
    p.add_argument("--stroke-width", type=float, default=DEFAULT_STROKE_WIDTH, dest="stroke_width", help="Bar outline width")
    p.add_argument("--colors", type=str, default="", help="Bar colors, e.g. 'red,#00ff00'")
    p.add_argument("--font-family", type=str, default=DEFAULT_FONT_FAMILY, dest="font_family", help="Label font family")
    p.add_argument("--font-size", type=float, default=DEFAULT_FONT_SIZE, dest="font_size", help="Label font size")
    p.add_argument("--width", type=int, default=SVG_WIDTH_PX, help="SVG width (px)")
    p.add_argument("--height", type=int, default=SVG_HEIGHT_PX, help="SVG height (px)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))
    args = _parse_args(argv)

    layout = build_bar_chart(
        parse_values(args.values),
        labels=parse_labels(args.labels),
        range_min=args.range_min,
        range_max=args.range_max,
        normalized=args.normalized,
        separation=args.separation,
        baseline_fraction=args.baseline,
        stroke_width=args.stroke_width,
        show_axes=args.show_axes,
        colors=parse_labels(args.colors) or None,
        font=FontSpec(family=args.font_family, size=args.font_size),
    )
    out = Path(args.out)
    for warning in export_chart_svg(layout, out, width_px=args.width, height_px=args.height):
        logger.warning(warning)
    print(out)


if __name__ == "__main__":
    main()
