"""Pattern repair — turn a generator-supplied pattern into a renderable one.

The generator is untrusted: required attributes go missing, flags arrive as
booleans, path data shows up on polygons and white shapes get painted on a
white canvas. Repair only ever fills defaults and rewrites encodings; it never
rejects a pattern of a known kind. Unknown kinds return ``None`` and are
dropped by the caller.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from quotecanvas.engine.colors import MID_GRAY, WHITE, normalize_color
from quotecanvas.engine.registry import get_registry, renderer, repairer
from quotecanvas.models.scene import SceneElement
from quotecanvas.models.style import Pattern, PatternKind, RenderablePattern
from quotecanvas.utils.geometry import spiral_path, wave_path
from quotecanvas.utils.math_helpers import clamp, fmt_number, to_float

logger = logging.getLogger(__name__)

# Attributes the renderer treats as SVG arc flags
ARC_FLAG_KEYS = ("largearc", "sweep")

_TRUE_STRINGS = {"1", "true", "yes"}
_PATH_TOKEN_RE = re.compile(r"[ML,]", re.IGNORECASE)

# Upper bounds keep a hostile spiral/wave from producing megabytes of path data
MAX_SPIRAL_TURNS = 20.0
MAX_WAVE_WIDTH = 2000.0

DEFAULT_RECT_SIZE = 50.0
DEFAULT_CIRCLE_R = 20.0
DEFAULT_ELLIPSE_RX = 30.0
DEFAULT_ELLIPSE_RY = 20.0
DEFAULT_LINE_LENGTH = 100.0
DEFAULT_SPIRAL_TURNS = 3.0
DEFAULT_SPIRAL_SPACING = 10.0
DEFAULT_WAVE_AMPLITUDE = 20.0
DEFAULT_WAVE_FREQUENCY = 0.02
DEFAULT_WAVE_WIDTH = 100.0


def repair_pattern(
    pattern: Pattern,
    background_color: str,
    primary_color: str | None,
) -> RenderablePattern | None:
    """Repair one pattern against the scene's background and primary colors."""
    kind = pattern.kind
    if kind is None:
        logger.debug("Skipping pattern with unrecognized type %r", pattern.type)
        return None

    handler = get_registry().get(kind)
    attrs = dict(pattern.attributes)
    handler.repair(pattern, attrs)

    background = normalize_color(background_color)
    _repair_paint(attrs, background, primary_color, stroke_only=handler.stroke_only)
    _repair_stroke_metrics(attrs)
    for key in ARC_FLAG_KEYS:
        if isinstance(attrs.get(key), bool):
            attrs[key] = encode_flag(attrs[key])

    return RenderablePattern(kind=kind, x=pattern.x, y=pattern.y, attributes=attrs)


def render_pattern(pattern: RenderablePattern) -> SceneElement:
    """Map a repaired pattern to its SVG element."""
    handler = get_registry().get(pattern.kind)
    attrs = handler.render(pattern)
    attrs.update(_paint_attributes(pattern.attributes))
    return SceneElement(tag=handler.tag, attributes=attrs, role=f"pattern:{pattern.kind.value}")


def encode_flag(value: Any) -> str:
    """SVG arc flag encoding: truthy → ``'1'``, anything else → ``'0'``."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return "1" if value == 1 else "0"
    if isinstance(value, str):
        return "1" if value.strip().lower() in _TRUE_STRINGS else "0"
    return "0"


def path_to_points(d: str) -> str:
    """Path-style ``M x y L x y …`` → polygon ``points`` (numbers joined by commas)."""
    tokens = _PATH_TOKEN_RE.sub(" ", d).split()
    return ",".join(tokens)


# ---------------------------------------------------------------------------
# Common repair steps
# ---------------------------------------------------------------------------


def _replacement_color(background: str, primary: str | None) -> str:
    if primary is None:
        return MID_GRAY
    primary = normalize_color(primary)
    if primary in (WHITE, background):
        return MID_GRAY
    return primary


def _repair_paint(attrs: dict[str, Any], background: str, primary: str | None, stroke_only: bool) -> None:
    replacement = _replacement_color(background, primary)
    defaults = {
        "fill": "none" if stroke_only else replacement,
        "stroke": replacement if stroke_only else "none",
    }
    for key, default in defaults.items():
        raw = attrs.get(key)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            attrs[key] = default
            continue
        if isinstance(raw, str) and raw.strip().lower() == "none":
            attrs[key] = "none"
            continue
        color = normalize_color(raw)
        if color in (WHITE, background):
            color = replacement
        attrs[key] = color


def _repair_stroke_metrics(attrs: dict[str, Any]) -> None:
    width = to_float(attrs.get("strokeWidth"))
    attrs["strokeWidth"] = width if width is not None and width >= 0 else 1.0
    opacity = to_float(attrs.get("opacity"))
    attrs["opacity"] = clamp(opacity, 0.0, 1.0) if opacity is not None else 1.0


def _paint_attributes(attrs: dict[str, Any]) -> dict[str, Any]:
    paint: dict[str, Any] = {
        "fill": attrs["fill"],
        "stroke": attrs["stroke"],
        "stroke-width": attrs["strokeWidth"],
        "opacity": attrs["opacity"],
    }
    transform = attrs.get("transform")
    if isinstance(transform, str) and transform.strip():
        paint["transform"] = transform.strip()
    return paint


def _positive(attrs: dict[str, Any], key: str) -> float | None:
    value = to_float(attrs.get(key))
    return value if value is not None and value > 0 else None


def _number(attrs: dict[str, Any], key: str, default: float) -> float:
    value = to_float(attrs.get(key))
    attrs[key] = value if value is not None else default
    return attrs[key]


def _positive_number(attrs: dict[str, Any], key: str, default: float) -> float:
    value = _positive(attrs, key)
    attrs[key] = value if value is not None else default
    return attrs[key]


def _points(value: Any) -> str | None:
    """Accept ``"x,y x,y"`` strings or ``[[x, y], …]`` / flat number lists."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list):
        flat: list[str] = []
        for item in value:
            if isinstance(item, (list, tuple)):
                flat.extend(fmt_number(n) for n in (to_float(v) for v in item) if n is not None)
            else:
                n = to_float(item)
                if n is not None:
                    flat.append(fmt_number(n))
        return ",".join(flat) or None
    return None


# ---------------------------------------------------------------------------
# Area kinds
# ---------------------------------------------------------------------------


@repairer(PatternKind.CIRCLE)
def _repair_circle(pattern: Pattern, attrs: dict[str, Any]) -> None:
    _positive_number(attrs, "r", DEFAULT_CIRCLE_R)
    _number(attrs, "cx", pattern.x)
    _number(attrs, "cy", pattern.y)


@renderer(PatternKind.CIRCLE, tag="circle")
def _render_circle(p: RenderablePattern) -> dict[str, Any]:
    a = p.attributes
    return {"cx": a["cx"], "cy": a["cy"], "r": a["r"]}


@repairer(PatternKind.RECT)
def _repair_rect(pattern: Pattern, attrs: dict[str, Any]) -> None:
    width = _positive(attrs, "width")
    height = _positive(attrs, "height")
    if width is None and height is None:
        width = height = DEFAULT_RECT_SIZE
    elif height is None:
        height = width
    elif width is None:
        width = height
    attrs["width"] = width
    attrs["height"] = height


@renderer(PatternKind.RECT, tag="rect")
def _render_rect(p: RenderablePattern) -> dict[str, Any]:
    a = p.attributes
    return {"x": p.x, "y": p.y, "width": a["width"], "height": a["height"]}


@repairer(PatternKind.ELLIPSE)
def _repair_ellipse(pattern: Pattern, attrs: dict[str, Any]) -> None:
    _positive_number(attrs, "rx", DEFAULT_ELLIPSE_RX)
    _positive_number(attrs, "ry", DEFAULT_ELLIPSE_RY)
    _number(attrs, "cx", pattern.x)
    _number(attrs, "cy", pattern.y)


@renderer(PatternKind.ELLIPSE, tag="ellipse")
def _render_ellipse(p: RenderablePattern) -> dict[str, Any]:
    a = p.attributes
    return {"cx": a["cx"], "cy": a["cy"], "rx": a["rx"], "ry": a["ry"]}


@repairer(PatternKind.POLYGON)
def _repair_polygon(pattern: Pattern, attrs: dict[str, Any]) -> None:
    points = _points(attrs.get("points"))
    d = attrs.pop("d", None)
    if points is None and isinstance(d, str) and d.strip():
        points = path_to_points(d) or None
    if points is None:
        x, y = pattern.x, pattern.y
        points = " ".join(
            f"{fmt_number(px)},{fmt_number(py)}"
            for px, py in ((x, y), (x + 40, y), (x + 20, y - 35))
        )
    attrs["points"] = points


@renderer(PatternKind.POLYGON, tag="polygon")
def _render_polygon(p: RenderablePattern) -> dict[str, Any]:
    return {"points": p.attributes["points"]}


# ---------------------------------------------------------------------------
# Stroke kinds
# ---------------------------------------------------------------------------


@repairer(PatternKind.LINE)
def _repair_line(pattern: Pattern, attrs: dict[str, Any]) -> None:
    _number(attrs, "x2", pattern.x + DEFAULT_LINE_LENGTH)
    _number(attrs, "y2", pattern.y)


@renderer(PatternKind.LINE, tag="line", stroke_only=True)
def _render_line(p: RenderablePattern) -> dict[str, Any]:
    a = p.attributes
    return {"x1": p.x, "y1": p.y, "x2": a["x2"], "y2": a["y2"]}


@repairer(PatternKind.POLYLINE)
def _repair_polyline(pattern: Pattern, attrs: dict[str, Any]) -> None:
    points = _points(attrs.get("points"))
    if points is None:
        x, y = pattern.x, pattern.y
        points = " ".join(
            f"{fmt_number(x + dx)},{fmt_number(y + dy)}"
            for dx, dy in ((0, 0), (20, -15), (40, 0), (60, -15), (80, 0))
        )
    attrs["points"] = points


@renderer(PatternKind.POLYLINE, tag="polyline", stroke_only=True)
def _render_polyline(p: RenderablePattern) -> dict[str, Any]:
    return {"points": p.attributes["points"]}


@repairer(PatternKind.PATH)
def _repair_path(pattern: Pattern, attrs: dict[str, Any]) -> None:
    d = attrs.get("d")
    if not isinstance(d, str) or not d.strip():
        x, y = fmt_number(pattern.x), fmt_number(pattern.y)
        d = f"M {x} {y} L {fmt_number(pattern.x + DEFAULT_LINE_LENGTH)} {y}"
    attrs["d"] = d.strip()


@renderer(PatternKind.PATH, tag="path", stroke_only=True)
def _render_path(p: RenderablePattern) -> dict[str, Any]:
    return {"d": p.attributes["d"]}


@repairer(PatternKind.ARC)
def _repair_arc(pattern: Pattern, attrs: dict[str, Any]) -> None:
    rx = _number(attrs, "rx", 0.0)
    ry = _number(attrs, "ry", 0.0)
    end_x = _number(attrs, "endx", pattern.x)
    end_y = _number(attrs, "endy", pattern.y)
    large = encode_flag(attrs.get("largearc"))
    sweep = encode_flag(attrs.get("sweep"))
    attrs["largearc"] = large
    attrs["sweep"] = sweep
    attrs["d"] = (
        f"M {fmt_number(pattern.x)} {fmt_number(pattern.y)} "
        f"A {fmt_number(rx)} {fmt_number(ry)} 0 {large} {sweep} "
        f"{fmt_number(end_x)} {fmt_number(end_y)}"
    )


@repairer(PatternKind.SPIRAL)
def _repair_spiral(pattern: Pattern, attrs: dict[str, Any]) -> None:
    turns = min(_positive_number(attrs, "turns", DEFAULT_SPIRAL_TURNS), MAX_SPIRAL_TURNS)
    attrs["turns"] = turns
    spacing = _positive_number(attrs, "spacing", DEFAULT_SPIRAL_SPACING)
    attrs["d"] = spiral_path(pattern.x, pattern.y, turns, spacing)


@repairer(PatternKind.WAVE)
def _repair_wave(pattern: Pattern, attrs: dict[str, Any]) -> None:
    amplitude = to_float(attrs.get("amplitude"))
    if not amplitude:
        amplitude = DEFAULT_WAVE_AMPLITUDE
    attrs["amplitude"] = amplitude
    frequency = to_float(attrs.get("frequency"))
    if not frequency:
        frequency = DEFAULT_WAVE_FREQUENCY
    attrs["frequency"] = frequency
    width = min(_positive_number(attrs, "wavewidth", DEFAULT_WAVE_WIDTH), MAX_WAVE_WIDTH)
    attrs["wavewidth"] = width
    attrs["d"] = wave_path(pattern.x, pattern.y, amplitude, frequency, width)


@renderer(PatternKind.ARC, tag="path", stroke_only=True)
@renderer(PatternKind.SPIRAL, tag="path", stroke_only=True)
@renderer(PatternKind.WAVE, tag="path", stroke_only=True)
def _render_generated_path(p: RenderablePattern) -> dict[str, Any]:
    return {"d": p.attributes["d"]}


get_registry().check_complete()
