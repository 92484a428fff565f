"""Scene assembly — style + typography + text → layered, render-ready card scene.

Layers, bottom to top:
    background rect → pattern group → white overlay → quote glyph → text lines → attribution
"""

from __future__ import annotations

import logging
import random
import time

from quotecanvas.engine.colors import (
    DARK_TEXT,
    MID_GRAY,
    WHITE,
    darken,
    is_near_white,
    normalize_color,
)
from quotecanvas.engine.config import CardLayoutConfig
from quotecanvas.engine.icons import choose_icon
from quotecanvas.engine.patterns import render_pattern, repair_pattern
from quotecanvas.engine.text_flow import canvas_height, layout_text
from quotecanvas.models.scene import Scene, SceneElement
from quotecanvas.models.style import CardStyleDocument, FontFamily, SvgStyle, Typography

logger = logging.getLogger(__name__)

# Quote mark outline on a 24x24 grid
QUOTE_GLYPH_PATHS = (
    "M3 21c3 0 7-1 7-8V5c0-1.25-.756-2.017-2-2H4c-1.25 0-2 .75-2 1.972V11c0 1.25.75 2 2 2 "
    "1 0 1 0 1 1v1c0 1-1 2-2 2s-1 .008-1 1.031V20c0 1 0 1 1 1z",
    "M15 21c3 0 7-1 7-8V5c0-1.25-.757-2.017-2-2h-4c-1.25 0-2 .75-2 1.972V11c0 1.25.75 2 2 2"
    "h.75c0 2.25.25 4-2.75 4v3c0 1 0 1 1 1z",
)


def resolve_typography(
    typography: Typography,
    fixed_format: bool,
    config: CardLayoutConfig,
) -> Typography:
    """Copy of ``typography`` with the card's forced values applied."""
    update: dict = {"line_height": config.line_height}
    if fixed_format:
        update["font_family"] = FontFamily(config.fixed_font_family)
        update["font_size"] = config.fixed_font_size
    return typography.model_copy(update=update)


def safe_text_color(background_color: str, text_color: str) -> str:
    """Swap near-white text on a near-white background for dark gray."""
    background = normalize_color(background_color)
    text = normalize_color(text_color)
    if is_near_white(background) and is_near_white(text):
        return DARK_TEXT
    return text


def format_attribution(author: str | None, source: str | None) -> str:
    parts = []
    if author:
        parts.append(f"—— {author}")
    if source:
        parts.append(f"《{source}》")
    return "".join(parts)


def assemble_scene(
    text: str,
    author: str | None,
    source: str | None,
    style: SvgStyle,
    typography: Typography,
    fixed_format: bool = False,
    theme: str | None = None,
    rng: random.Random | None = None,
    config: CardLayoutConfig | None = None,
) -> Scene:
    config = config or CardLayoutConfig()
    start = time.perf_counter()

    typo = resolve_typography(typography, fixed_format, config)
    background = normalize_color(style.background_color)
    primary = normalize_color(style.primary_color) if style.primary_color else MID_GRAY
    text_color = safe_text_color(background, typo.text_color)
    if text_color != typo.text_color:
        typo = typo.model_copy(update={"text_color": text_color})

    layout = layout_text(text, config.width, typo.font_size, config)
    height = canvas_height(layout.total_height, config.min_height, config.vertical_margin)

    pattern_elements: list[SceneElement] = []
    skipped = 0
    for pattern in style.patterns[: config.max_patterns]:
        renderable = repair_pattern(pattern, background, style.primary_color)
        if renderable is None:
            skipped += 1
            continue
        pattern_elements.append(render_pattern(renderable))
    if len(style.patterns) > config.max_patterns:
        logger.debug(
            "Dropped %d patterns beyond the limit of %d",
            len(style.patterns) - config.max_patterns,
            config.max_patterns,
        )

    elements = [
        SceneElement(
            tag="rect",
            attributes={"x": 0, "y": 0, "width": config.width, "height": height, "fill": background},
            role="background",
        ),
        SceneElement(
            tag="g",
            attributes={"opacity": config.pattern_opacity},
            children=pattern_elements,
            role="patterns",
        ),
        SceneElement(
            tag="rect",
            attributes={
                "x": 0,
                "y": 0,
                "width": config.width,
                "height": height,
                "fill": WHITE,
                "opacity": config.overlay_opacity,
            },
            role="overlay",
        ),
        _quote_glyph(darken(primary), config),
        _text_block(layout.lines, layout.line_height, typo, config),
    ]

    attribution = format_attribution(author, source)
    if attribution:
        elements.append(
            SceneElement(
                tag="text",
                attributes={
                    "x": config.width - config.attribution_right_inset,
                    "y": config.text_base_y + layout.total_height + config.attribution_offset,
                    "text-anchor": "end",
                    "font-family": typo.font_stack,
                    "font-size": typo.font_size * config.attribution_scale,
                    "fill": typo.text_color,
                },
                text=attribution,
                role="attribution",
            )
        )

    scene = Scene(
        width=config.width,
        height=height,
        background_color=background,
        primary_color=primary,
        typography=typo,
        lines=layout.lines,
        line_height=layout.line_height,
        text_height=layout.total_height,
        icon=choose_icon(theme, rng),
        patterns_rendered=len(pattern_elements),
        patterns_skipped=skipped,
        elements=elements,
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Scene assembled: %d lines, %d patterns (%d skipped), %.0fx%.0f in %.1fms",
        len(layout.lines),
        len(pattern_elements),
        skipped,
        scene.width,
        scene.height,
        elapsed,
    )
    return scene


def assemble_from_document(
    text: str,
    author: str | None,
    source: str | None,
    document: CardStyleDocument,
    fixed_format: bool = False,
    rng: random.Random | None = None,
    config: CardLayoutConfig | None = None,
) -> Scene:
    """Assemble a scene from either card document shape."""
    return assemble_scene(
        text,
        author,
        source,
        document.resolved_style(),
        document.resolved_typography(),
        fixed_format=fixed_format,
        theme=document.theme,
        rng=rng,
        config=config,
    )


def _quote_glyph(color: str, config: CardLayoutConfig) -> SceneElement:
    return SceneElement(
        tag="svg",
        attributes={
            "x": config.glyph_x,
            "y": config.glyph_y,
            "width": config.glyph_size,
            "height": config.glyph_size,
            "viewBox": "0 0 24 24",
            "fill": "none",
            "stroke": color,
            "stroke-width": 2,
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
        },
        children=[SceneElement(tag="path", attributes={"d": d}) for d in QUOTE_GLYPH_PATHS],
        role="glyph",
    )


def _text_block(
    lines: list[str],
    line_height: float,
    typo: Typography,
    config: CardLayoutConfig,
) -> SceneElement:
    runs = [
        SceneElement(
            tag="text",
            attributes={"x": config.text_x, "y": config.text_base_y + i * line_height},
            text=line,
            role="line",
        )
        for i, line in enumerate(lines)
    ]
    return SceneElement(
        tag="g",
        attributes={
            "font-family": typo.font_stack,
            "font-size": typo.font_size,
            "letter-spacing": config.letter_spacing,
            "fill": typo.text_color,
        },
        children=runs,
        role="text",
    )
