"""Text flow — character-budget wrapping and vertical extent of the quote block.

Glyph widths are not measured. Every character (CJK or Latin) is assumed to
advance ``char_width_em`` em, which is exact for full-width CJK text and
conservative for Latin text.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from quotecanvas.engine.config import CardLayoutConfig

_DEFAULTS = CardLayoutConfig()


@dataclass
class TextLayout:
    lines: list[str] = field(default_factory=list)
    line_height: float = 0.0
    total_height: float = 0.0


def char_budget(pixel_width: float, font_size: float, config: CardLayoutConfig = _DEFAULTS) -> int:
    """Characters that fit on one line; always at least 1."""
    if font_size <= 0:
        raise ValueError(f"font_size must be positive, got {font_size}")
    chars = config.content_ratio * pixel_width / (font_size * config.char_width_em)
    if not math.isfinite(chars):
        raise ValueError(f"font_size too small for a finite line budget, got {font_size}")
    return max(1, math.floor(chars))


def wrap_paragraph(paragraph: str, budget: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for ch in paragraph:
        if len(current) >= budget:
            lines.append(current)
            current = ""
        current += ch
    if current:
        lines.append(current)
    return lines


def layout_text(
    text: str,
    pixel_width: float,
    font_size: float,
    config: CardLayoutConfig = _DEFAULTS,
) -> TextLayout:
    budget = char_budget(pixel_width, font_size, config)
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if paragraph:
            lines.extend(wrap_paragraph(paragraph, budget))

    line_height = font_size * config.line_height
    return TextLayout(lines=lines, line_height=line_height, total_height=len(lines) * line_height)


def canvas_height(
    total_height: float,
    minimum: float = _DEFAULTS.min_height,
    margin: float = _DEFAULTS.vertical_margin,
) -> float:
    return max(minimum, total_height + margin)
