"""
CLI smoke test: values and labels in, SVG file out.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from bargraphics.core.runner import main, parse_labels, parse_values


def test_parse_values() -> None:
    assert parse_values("3, -2,,5.5") == [3.0, -2.0, 5.5]
    assert parse_values("") == []


def test_parse_labels() -> None:
    assert parse_labels("a, b ,") == ["a", "b", ""]
    assert parse_labels("  ") == []


def test_main_writes_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "chart.svg"
    main(["--values", "3,-2,5", "--labels", "a,b,c", "--show-axes", "--out", str(out)])
    assert out.exists()
    assert "<svg" in out.read_text(encoding="utf-8")
    assert capsys.readouterr().out.strip() == str(out)
