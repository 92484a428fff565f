"""Card style documents — the untrusted JSON the model returns, validated at the boundary.

Every leaf field is coerced in ``mode="before"`` validators so a malformed
value degrades to its default instead of raising ``ValidationError``.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quotecanvas.engine.colors import DARK_TEXT, WHITE, normalize_color
from quotecanvas.utils.math_helpers import to_float


class PatternKind(str, enum.Enum):
    CIRCLE = "circle"
    RECT = "rect"
    LINE = "line"
    POLYGON = "polygon"
    PATH = "path"
    ELLIPSE = "ellipse"
    POLYLINE = "polyline"
    ARC = "arc"
    SPIRAL = "spiral"
    WAVE = "wave"


class FontFamily(str, enum.Enum):
    SERIF_CN = "serif-cn"
    KAI_CN = "kai-cn"
    ELEGANT_CN = "elegant-cn"
    SANS_SERIF = "sans-serif"


# CSS font stacks for each family label
FONT_STACKS = {
    FontFamily.SERIF_CN: '"Noto Serif SC", serif',
    FontFamily.KAI_CN: '"LXGW WenKai", cursive',
    FontFamily.SANS_SERIF: '"Noto Sans SC", sans-serif',
    FontFamily.ELEGANT_CN: '"Source Han Serif CN", "Noto Serif SC", serif',
}

FONT_SIZE_TOKENS = ("sm", "base", "lg", "xl", "2xl")

DEFAULT_FONT_SIZE = 24.0
# Accepted fontSize range; anything outside falls back to the default
MIN_FONT_SIZE = 1.0
MAX_FONT_SIZE = 512.0
DEFAULT_LINE_HEIGHT = 1.5


def _as_str(value: Any, default: str = "") -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _as_dict(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value
    return dict(value) if isinstance(value, dict) else {}


def _optional_color(value: Any) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return normalize_color(value)


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Pattern(_Document):
    """One decorative primitive as emitted by the generator (not yet repaired)."""

    type: str = ""
    x: float = 0.0
    y: float = 0.0
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, v: Any) -> str:
        return _as_str(v).strip().lower()

    @field_validator("x", "y", mode="before")
    @classmethod
    def _coerce_anchor(cls, v: Any) -> float:
        return to_float(v, 0.0)

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, v: Any) -> dict[str, Any]:
        return dict(v) if isinstance(v, dict) else {}

    @property
    def kind(self) -> PatternKind | None:
        try:
            return PatternKind(self.type)
        except ValueError:
            return None


class RenderablePattern(_Document):
    """A pattern after repair: every kind-required attribute is populated."""

    kind: PatternKind
    x: float = 0.0
    y: float = 0.0
    attributes: dict[str, Any] = Field(default_factory=dict)


class SvgStyle(_Document):
    background_color: str = Field(default=WHITE, alias="backgroundColor")
    primary_color: str | None = Field(default=None, alias="primaryColor")
    secondary_color: str | None = Field(default=None, alias="secondaryColor")
    patterns: list[Pattern] = Field(default_factory=list)

    @field_validator("background_color", mode="before")
    @classmethod
    def _coerce_background(cls, v: Any) -> str:
        return _optional_color(v) or WHITE

    @field_validator("primary_color", "secondary_color", mode="before")
    @classmethod
    def _coerce_optional(cls, v: Any) -> str | None:
        return _optional_color(v)

    @field_validator("patterns", mode="before")
    @classmethod
    def _coerce_patterns(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        return [p for p in v if isinstance(p, (dict, Pattern))]


class Typography(_Document):
    font_family: FontFamily = Field(default=FontFamily.SERIF_CN, alias="fontFamily")
    font_size: float = Field(default=DEFAULT_FONT_SIZE, alias="fontSize")
    line_height: float = Field(default=DEFAULT_LINE_HEIGHT, alias="lineHeight")
    text_color: str = Field(default=DARK_TEXT, alias="textColor")

    @field_validator("font_family", mode="before")
    @classmethod
    def _coerce_family(cls, v: Any) -> FontFamily:
        try:
            return FontFamily(_as_str(v).strip().lower())
        except ValueError:
            return FontFamily.SERIF_CN

    @field_validator("font_size", mode="before")
    @classmethod
    def _coerce_size(cls, v: Any) -> float:
        size = to_float(v)
        if size is None or not MIN_FONT_SIZE <= size <= MAX_FONT_SIZE:
            return DEFAULT_FONT_SIZE
        return size

    @field_validator("line_height", mode="before")
    @classmethod
    def _coerce_line_height(cls, v: Any) -> float:
        lh = to_float(v)
        return lh if lh is not None and lh > 0 else DEFAULT_LINE_HEIGHT

    @field_validator("text_color", mode="before")
    @classmethod
    def _coerce_text_color(cls, v: Any) -> str:
        return _optional_color(v) or DARK_TEXT

    @property
    def font_stack(self) -> str:
        return FONT_STACKS[self.font_family]


class ColorScheme(_Document):
    primary: str | None = None
    secondary: str | None = None
    text_color: str | None = Field(default=None, alias="textColor")

    @field_validator("primary", "secondary", "text_color", mode="before")
    @classmethod
    def _coerce_colors(cls, v: Any) -> str | None:
        return _optional_color(v)


class CardStyleDocument(_Document):
    """Either card document shape: classic (``colorScheme`` …) or geometric (``svgStyle`` …)."""

    theme: str = ""
    color_scheme: ColorScheme = Field(default_factory=ColorScheme, alias="colorScheme")
    icon_style: str = Field(default="", alias="iconStyle")
    font_size: str = Field(default="base", alias="fontSize")
    mood: str = ""
    emphasis: list[str] = Field(default_factory=list)
    font_family: str = Field(default=FontFamily.SERIF_CN.value, alias="fontFamily")
    svg_style: SvgStyle | None = Field(default=None, alias="svgStyle")
    typography: Typography | None = None
    explanation: str | None = None

    @field_validator("theme", "icon_style", "mood", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        return _as_str(v).strip()

    @field_validator("font_family", mode="before")
    @classmethod
    def _coerce_family(cls, v: Any) -> str:
        return _as_str(v).strip().lower() or FontFamily.SERIF_CN.value

    @field_validator("font_size", mode="before")
    @classmethod
    def _coerce_size_token(cls, v: Any) -> str:
        token = _as_str(v).strip().lower()
        return token if token in FONT_SIZE_TOKENS else "base"

    @field_validator("color_scheme", mode="before")
    @classmethod
    def _coerce_scheme(cls, v: Any) -> Any:
        return _as_dict(v)

    @field_validator("emphasis", mode="before")
    @classmethod
    def _coerce_emphasis(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [s for s in (_as_str(item) for item in v) if s]

    @field_validator("svg_style", "typography", mode="before")
    @classmethod
    def _coerce_section(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    @field_validator("explanation", mode="before")
    @classmethod
    def _coerce_explanation(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    def resolved_style(self) -> SvgStyle:
        """The scene style, synthesized from ``colorScheme`` when ``svgStyle`` is absent."""
        if self.svg_style is not None:
            return self.svg_style
        return SvgStyle(
            background_color=WHITE,
            primary_color=self.color_scheme.primary,
            secondary_color=self.color_scheme.secondary,
        )

    def resolved_typography(self) -> Typography:
        """Typography, synthesized from the classic fields when ``typography`` is absent."""
        if self.typography is not None:
            return self.typography
        return Typography(
            font_family=self.font_family,
            text_color=self.color_scheme.text_color,
        )
