"""Tests for color normalization and derived colors."""

import re

import pytest

from quotecanvas.engine.colors import (
    NAMED_COLORS,
    background_gradient,
    darken,
    hex_to_rgb,
    is_light,
    is_near_white,
    normalize_color,
    rgba,
)

HEX_COLOR_RE = re.compile(r"#[0-9a-f]{6}")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("white", "#ffffff"),
        ("rgb(74,144,226)", "#4a90e2"),
        ("##ABC", "#aabbcc"),
        ("abc", "#aabbcc"),
        ("4A90E2", "#4a90e2"),
        ("  #4A90E2  ", "#4a90e2"),
        ("rgba(255, 0, 0, 0.5)", "#ff0000"),
        ("rgb(300, 0, 0)", "#ff0000"),
        ("transparent", "#ffffff"),
        ("Goldenrod", "#daa520"),
        ("not-a-color", "#000000"),
        ("#12345", "#000000"),
        ("", "#000000"),
        (None, "#000000"),
        (42, "#000000"),
    ],
)
def test_normalize_color(raw, expected):
    assert normalize_color(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "##ABC",
        "rgb(1,2,3)",
        "navy",
        "garbage",
        "#FfF",
        "#",
        "rgb(",
        "\n#fff",
        "rgb(\uff11\uff12, 0, 0)",
        "#\uff10\uff10\uff10",
        "rgb(" + "9" * 5000 + ",0,0)",
        "\u00a0",
    ],
)
def test_normalize_is_total_and_idempotent(raw):
    once = normalize_color(raw)
    assert HEX_COLOR_RE.fullmatch(once), raw
    assert normalize_color(once) == once


def test_named_table_is_canonical():
    for name, color in NAMED_COLORS.items():
        assert normalize_color(color) == color, name


def test_is_light_strict_boundary():
    # Y = 128 exactly is not light
    assert not is_light("#808080")
    assert is_light("#818181")
    assert is_light("#ffffff")
    assert not is_light("#000000")


def test_darken_light_color():
    assert darken("#ffffff") == "#9b9b9b"
    assert darken("#e0e0e0") == "#7c7c7c"


def test_darken_floors_channels_at_zero():
    # Light overall, but the blue channel is already below 100
    assert darken("#ffff00") == "#9b9b00"


def test_darken_leaves_dark_colors_unchanged():
    assert darken("#264653") == "#264653"
    assert darken("NAVY") == "#000080"


def test_is_near_white():
    assert is_near_white("#ffffff")
    assert is_near_white("#fafafa")
    assert is_near_white("#fdfcfa")
    assert not is_near_white("#fdf6e3")
    assert not is_near_white("#eeeeee")
    assert not is_near_white("#333333")


def test_hex_to_rgb_and_rgba():
    assert hex_to_rgb("#4a90e2") == (74, 144, 226)
    assert rgba("#4a90e2", 0.2) == "rgba(74, 144, 226, 0.2)"
    assert rgba("garbage", 0.0) == "rgba(0, 0, 0, 0.0)"


def test_background_gradient():
    gradient = background_gradient("#7A645C")
    assert gradient.angle == 135
    assert [s.color for s in gradient.stops] == ["#7a645c05", "#7a645c15", "#7a645c25"]
    assert [s.offset for s in gradient.stops] == [0.0, 0.5, 1.0]
    assert gradient.css == "linear-gradient(135deg, #7a645c05 0%, #7a645c15 50%, #7a645c25 100%)"
