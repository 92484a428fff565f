"""Tests for pattern repair and rendering."""

import pytest

from quotecanvas.engine.patterns import (
    encode_flag,
    path_to_points,
    render_pattern,
    repair_pattern,
)
from quotecanvas.models.style import Pattern, PatternKind

BG = "#ffffff"
PRIMARY = "#123456"


def _repair(raw: dict, background: str = BG, primary: str | None = PRIMARY):
    return repair_pattern(Pattern.model_validate(raw), background, primary)


def test_unknown_kind_is_skipped():
    assert _repair({"type": "hexagon", "x": 1, "y": 2}) is None


def test_rect_copies_single_dimension():
    p = _repair({"type": "rect", "x": 0, "y": 0, "attributes": {"width": 50}})
    assert p.attributes["width"] == 50
    assert p.attributes["height"] == 50

    p = _repair({"type": "rect", "attributes": {"height": 12}})
    assert p.attributes["width"] == 12


def test_rect_defaults_when_both_absent():
    p = _repair({"type": "rect"})
    assert (p.attributes["width"], p.attributes["height"]) == (50, 50)


def test_white_fill_replaced_by_primary():
    p = _repair({"type": "circle", "attributes": {"fill": "#ffffff"}})
    assert p.attributes["fill"] == PRIMARY


def test_fill_matching_background_replaced():
    p = _repair({"type": "circle", "attributes": {"fill": "#FDF6E3"}}, background="#fdf6e3")
    assert p.attributes["fill"] == PRIMARY


def test_white_fill_without_primary_uses_mid_gray():
    p = _repair({"type": "ellipse", "attributes": {"fill": "white"}}, primary=None)
    assert p.attributes["fill"] == "#666666"


def test_primary_equal_to_background_uses_mid_gray():
    p = _repair({"type": "rect", "attributes": {"fill": "#ffffff"}}, primary="#FFFFFF")
    assert p.attributes["fill"] == "#666666"


def test_none_paint_is_preserved():
    p = _repair({"type": "circle", "attributes": {"fill": "none", "stroke": "#E76F51"}})
    assert p.attributes["fill"] == "none"
    assert p.attributes["stroke"] == "#e76f51"


def test_default_paint_for_area_and_stroke_kinds():
    area = _repair({"type": "circle"})
    assert area.attributes["fill"] == PRIMARY
    assert area.attributes["stroke"] == "none"

    stroke = _repair({"type": "line"})
    assert stroke.attributes["fill"] == "none"
    assert stroke.attributes["stroke"] == PRIMARY


def test_stroke_width_and_opacity_defaults():
    p = _repair({"type": "circle", "attributes": {"strokeWidth": -3, "opacity": 4}})
    assert p.attributes["strokeWidth"] == 1
    assert p.attributes["opacity"] == 1

    p = _repair({"type": "circle", "attributes": {"strokeWidth": "2.5", "opacity": "0.3"}})
    assert p.attributes["strokeWidth"] == 2.5
    assert p.attributes["opacity"] == 0.3


def test_circle_defaults_center_to_anchor():
    p = _repair({"type": "circle", "x": 30, "y": 40})
    assert p.attributes["r"] == 20
    assert (p.attributes["cx"], p.attributes["cy"]) == (30, 40)


def test_ellipse_defaults():
    p = _repair({"type": "ellipse"})
    assert (p.attributes["rx"], p.attributes["ry"]) == (30, 20)


def test_line_defaults():
    p = _repair({"type": "line", "x": 10, "y": 20})
    assert (p.attributes["x2"], p.attributes["y2"]) == (110, 20)


def test_polygon_path_data_converted_to_points():
    p = _repair({"type": "polygon", "attributes": {"d": "M 10 10 L 50 10 L 30 40"}})
    assert p.attributes["points"] == "10,10,50,10,30,40"
    assert "d" not in p.attributes


def test_polygon_keeps_existing_points():
    p = _repair({"type": "polygon", "attributes": {"points": "0,0 10,0 5,8", "d": "M 1 1"}})
    assert p.attributes["points"] == "0,0 10,0 5,8"


def test_polygon_accepts_point_pairs():
    p = _repair({"type": "polygon", "attributes": {"points": [[0, 0], [10, 0], [5, 8]]}})
    assert p.attributes["points"] == "0,0,10,0,5,8"


def test_polygon_default_triangle():
    p = _repair({"type": "polygon", "x": 100, "y": 100})
    assert p.attributes["points"] == "100,100 140,100 120,65"


def test_polyline_and_path_defaults():
    assert _repair({"type": "polyline"}).attributes["points"]
    assert _repair({"type": "path", "x": 5, "y": 6}).attributes["d"] == "M 5 6 L 105 6"


def test_arc_path_synthesis():
    p = _repair({
        "type": "arc",
        "x": 100,
        "y": 100,
        "attributes": {"rx": 50, "ry": 50, "endx": 200, "endy": 100, "largearc": True, "sweep": False},
    })
    assert p.attributes["d"] == "M 100 100 A 50 50 0 1 0 200 100"
    assert p.attributes["largearc"] == "1"
    assert p.attributes["sweep"] == "0"


def test_arc_defaults_end_to_anchor():
    p = _repair({"type": "arc", "x": 7, "y": 9})
    assert p.attributes["d"] == "M 7 9 A 0 0 0 0 0 7 9"


@pytest.mark.parametrize(
    "value, expected",
    [(True, "1"), (False, "0"), (1, "1"), (0, "0"), ("true", "1"), ("1", "1"), ("no", "0"), (None, "0")],
)
def test_encode_flag(value, expected):
    assert encode_flag(value) == expected


def test_spiral_and_wave_generate_paths():
    spiral = _repair({"type": "spiral", "x": 300, "y": 200})
    assert spiral.attributes["turns"] == 3
    assert spiral.attributes["spacing"] == 10
    assert spiral.attributes["d"].startswith("M 300 200 L 300 200")

    wave = _repair({"type": "wave", "x": 0, "y": 50})
    assert wave.attributes["amplitude"] == 20
    assert wave.attributes["frequency"] == 0.02
    assert wave.attributes["wavewidth"] == 100
    assert wave.attributes["d"].count("L") == 101


def test_repair_does_not_mutate_input():
    raw = Pattern.model_validate({"type": "rect", "attributes": {"width": 50, "fill": "#ffffff"}})
    repair_pattern(raw, BG, PRIMARY)
    assert raw.attributes == {"width": 50, "fill": "#ffffff"}


def test_path_to_points():
    assert path_to_points("M10,10 L20,20") == "10,10,20,20"


def test_render_circle():
    element = render_pattern(_repair({"type": "circle", "x": 10, "y": 20, "attributes": {"r": 5}}))
    assert element.tag == "circle"
    assert element.attributes["cx"] == 10
    assert element.attributes["r"] == 5
    assert element.attributes["stroke-width"] == 1


@pytest.mark.parametrize("kind", ["arc", "spiral", "wave", "path"])
def test_generated_kinds_render_as_path(kind):
    element = render_pattern(_repair({"type": kind, "x": 1, "y": 1}))
    assert element.tag == "path"
    assert element.attributes["d"].startswith("M ")
    assert element.attributes["fill"] == "none"


def test_every_kind_renders():
    for kind in PatternKind:
        element = render_pattern(_repair({"type": kind.value, "x": 10, "y": 10}))
        assert element.tag
        assert element.role == f"pattern:{kind.value}"


def test_transform_passes_through():
    element = render_pattern(_repair({"type": "rect", "attributes": {"transform": "rotate(45)"}}))
    assert element.attributes["transform"] == "rotate(45)"
