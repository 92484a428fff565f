"""Theme icons — the icon name shown on a card, picked from a per-theme set."""

from __future__ import annotations

import random
from types import MappingProxyType

DEFAULT_ICON = "Quote"

THEME_ICON_SETS = MappingProxyType({
    "literary": ("BookOpen", "Library", "ScrollText", "Book", "Feather", "Pen"),
    "philosophical": ("Brain", "Lightbulb", "Infinity", "Compass", "GraduationCap"),
    "poetic": ("Sparkles", "Heart", "Music", "Flower", "Wind", "Cloud", "Leaf"),
    "scientific": ("FlaskConical", "Atom", "Microscope", "Telescope"),
    "inspirational": ("Star", "Sun", "Mountain", "Trophy"),
    "artistic": ("Palette", "Brush", "PenTool", "Frame"),
})


def icons_for_theme(theme: str | None) -> tuple[str, ...]:
    key = (theme or "").strip().lower()
    return THEME_ICON_SETS.get(key, (DEFAULT_ICON,))


def choose_icon(theme: str | None, rng: random.Random | None = None) -> str:
    """Pick an icon for ``theme`` using ``rng`` (a fresh unseeded source when omitted)."""
    rng = rng or random.Random()
    return rng.choice(icons_for_theme(theme))
