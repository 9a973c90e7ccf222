"""Unit tests for CSS color parsing."""

from __future__ import annotations

import pytest

from df12_components.color import Color, ColorError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("#FFF", "#fff"),
        ("#0d6efd", "#0d6efd"),
        ("  #0D6EFD80 ", "#0d6efd80"),
        ("RebeccaPurple", "rebeccapurple"),
        ("rgb(1, 2, 3)", "rgb(1, 2, 3)"),
        ("var(--brand)", "var(--brand)"),
    ],
)
def test_parse_accepts_css_colors(raw: str, expected: str) -> None:
    assert str(Color.parse(raw)) == expected


@pytest.mark.parametrize("raw", ["#12", "#ggg", "red; color: blue", "rgb(1,2,3);x"])
def test_parse_rejects_invalid_values(raw: str) -> None:
    with pytest.raises(ColorError):
        Color.parse(raw)


def test_parse_rejects_non_strings() -> None:
    with pytest.raises(ColorError, match="int"):
        Color.parse(12)  # type: ignore[arg-type]


def test_parse_returns_color_instances_unchanged() -> None:
    color = Color.named("red")
    assert Color.parse(color) is color


def test_rgb_formats_opacity() -> None:
    assert str(Color.rgb(13, 110, 253)) == "rgb(13, 110, 253)"
    assert str(Color.rgb(13, 110, 253, opacity=0.25)) == "rgba(13, 110, 253, 0.25)"


def test_rgb_validates_ranges() -> None:
    with pytest.raises(ColorError, match="0-255"):
        Color.rgb(256, 0, 0)
    with pytest.raises(ColorError, match="0-1"):
        Color.rgb(0, 0, 0, opacity=2)
