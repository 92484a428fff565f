"""Color normalization — any AI-supplied color string → canonical ``#rrggbb``.

The generator hands back hex with stray ``#``s, 3-digit shorthand, CSS names,
``rgb()``/``rgba()`` and plain garbage. Everything downstream assumes the
canonical form, so ``normalize_color`` is total: unparseable input becomes
black rather than an error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

FALLBACK_COLOR = "#000000"
WHITE = "#ffffff"
MID_GRAY = "#666666"
DARK_TEXT = "#333333"

_HEX3_RE = re.compile(r"^#?([0-9a-f]{3})$")
_HEX6_RE = re.compile(r"^#?([0-9a-f]{6})$")
_RGB_RE = re.compile(r"^rgba?\(\s*(\d{1,9})\s*,\s*(\d{1,9})\s*,\s*(\d{1,9})\s*(?:,\s*[\d.]+\s*)?\)$")
_NEAR_WHITE_RE = re.compile(r"^#f[a-f]f[a-f]{3}$")

NAMED_COLORS = MappingProxyType({
    "black": "#000000",
    "white": "#ffffff",
    "gray": "#808080",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "purple": "#800080",
    "orange": "#ffa500",
    "brown": "#a52a2a",
    "pink": "#ffc0cb",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "silver": "#c0c0c0",
    "navy": "#000080",
    "darkblue": "#00008b",
    "darkred": "#8b0000",
    "darkgreen": "#006400",
    "darkgray": "#a9a9a9",
    "lightgray": "#d3d3d3",
    "transparent": "#ffffff",
})

# Fixed categorical palette for pie slices.
CHART_COLORS = (
    "#4a90e2",  # blue
    "#50e3c2",  # teal
    "#f5a623",  # orange
    "#ffd93d",  # yellow
    "#ff5a5f",  # red
    "#bd10e0",  # purple
    "#7ed321",  # green
    "#417505",  # dark green
    "#4a4a4a",  # dark gray
    "#b8e986",  # light green
    "#9013fe",  # deep purple
    "#4a154b",  # aubergine
    "#ff6b6b",  # coral
    "#54c6eb",  # sky blue
    "#2e5bff",  # royal blue
)

# ITU-R BT.601 luma threshold on the 0-255 scale.
_LIGHT_THRESHOLD = 128
_DARKEN_AMOUNT = 100


def normalize_color(value: Any) -> str:
    """Canonicalize a color to ``#rrggbb``; unparseable input → ``#000000``."""
    if not isinstance(value, str):
        return FALLBACK_COLOR
    color = value.strip().lower()
    if not color:
        return FALLBACK_COLOR
    color = re.sub(r"^#+", "#", color)

    m = _HEX3_RE.match(color)
    if m:
        return "#" + "".join(c * 2 for c in m.group(1))

    m = _HEX6_RE.match(color)
    if m:
        return "#" + m.group(1)

    named = NAMED_COLORS.get(color)
    if named is not None:
        return named

    m = _RGB_RE.match(color)
    if m:
        return _encode(*(int(g) for g in m.groups()))

    return FALLBACK_COLOR


def hex_to_rgb(color: Any) -> tuple[int, int, int]:
    """Decode R, G, B from any color (normalized first)."""
    hex_digits = normalize_color(color)[1:]
    return (
        int(hex_digits[0:2], 16),
        int(hex_digits[2:4], 16),
        int(hex_digits[4:6], 16),
    )


def luminance(color: Any) -> float:
    """YIQ luma on the 0-255 scale."""
    r, g, b = hex_to_rgb(color)
    return (r * 299 + g * 587 + b * 114) / 1000


def is_light(color: Any) -> bool:
    return luminance(color) > _LIGHT_THRESHOLD


def is_near_white(color: Any) -> bool:
    """Pure white or a light ``#f?f???`` shape such as ``#fafafa``."""
    normalized = normalize_color(color)
    return normalized == WHITE or bool(_NEAR_WHITE_RE.match(normalized))


def darken(color: Any) -> str:
    """Darken light colors by 100 per channel so icons stay visible; dark colors pass through."""
    normalized = normalize_color(color)
    if not is_light(normalized):
        return normalized
    r, g, b = hex_to_rgb(normalized)
    return _encode(r - _DARKEN_AMOUNT, g - _DARKEN_AMOUNT, b - _DARKEN_AMOUNT)


def rgba(color: Any, alpha: float) -> str:
    """CSS ``rgba(r, g, b, a)`` string for a color."""
    r, g, b = hex_to_rgb(color)
    return f"rgba({r}, {g}, {b}, {alpha})"


@dataclass(frozen=True)
class GradientStop:
    color: str
    offset: float  # 0-1


@dataclass(frozen=True)
class BackgroundGradient:
    """Diagonal wash of one hue at increasing opacity."""

    angle: int
    stops: tuple[GradientStop, ...]

    @property
    def css(self) -> str:
        stops = ", ".join(f"{s.color} {round(s.offset * 100)}%" for s in self.stops)
        return f"linear-gradient({self.angle}deg, {stops})"


# Hex alpha suffixes ≈ 2%, 8%, 14% opacity.
_WASH_ALPHAS = ("05", "15", "25")


def background_gradient(color: Any) -> BackgroundGradient:
    base = normalize_color(color)
    offsets = (0.0, 0.5, 1.0)
    return BackgroundGradient(
        angle=135,
        stops=tuple(GradientStop(f"{base}{alpha}", off) for alpha, off in zip(_WASH_ALPHAS, offsets)),
    )


def _encode(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{max(0, min(255, c)):02x}" for c in (r, g, b))
