"""Classic card — gradient-washed card description from the ``colorScheme`` document shape."""

from __future__ import annotations

import logging
import random

from quotecanvas.engine.colors import background_gradient, darken
from quotecanvas.engine.icons import choose_icon
from quotecanvas.engine.scene import format_attribution
from quotecanvas.models.scene import ClassicCard, GradientStopModel
from quotecanvas.models.style import FONT_SIZE_TOKENS, CardStyleDocument

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY = "#7a645c"
# Hex alpha appended to the corner accent
CORNER_ALPHA = "10"


def smaller_font_size(token: str) -> str:
    """One size step down; ``sm`` is the floor."""
    try:
        index = FONT_SIZE_TOKENS.index(token)
    except ValueError:
        return "sm"
    return FONT_SIZE_TOKENS[max(0, index - 1)]


def split_paragraphs(text: str) -> list[str]:
    return [p.strip() for p in text.split("\n") if p.strip()]


def build_classic_card(
    text: str,
    author: str | None,
    source: str | None,
    document: CardStyleDocument,
    rng: random.Random | None = None,
) -> ClassicCard:
    primary = document.color_scheme.primary or DEFAULT_PRIMARY
    accent = darken(primary)
    gradient = background_gradient(primary)

    card = ClassicCard(
        paragraphs=split_paragraphs(text),
        attribution=format_attribution(author, source),
        theme=document.theme,
        icon=choose_icon(document.theme, rng),
        icon_color=accent,
        corner_color=f"{accent}{CORNER_ALPHA}",
        background_css=gradient.css,
        background_stops=[GradientStopModel(color=s.color, offset=s.offset) for s in gradient.stops],
        font_size=document.font_size,
        attribution_font_size=smaller_font_size(document.font_size),
        font_family=document.font_family,
        mood=document.mood,
        emphasis=list(document.emphasis),
    )
    logger.info(
        "Classic card built: theme=%s icon=%s, %d paragraphs",
        card.theme or "-",
        card.icon,
        len(card.paragraphs),
    )
    return card
