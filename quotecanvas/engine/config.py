"""Engine configuration — card layout geometry and axis-planning thresholds."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CardLayoutConfig:
    """Fixed geometry of the quote card scene."""

    # Canvas width matches the page's card column (max-w-2xl)
    width: float = 672.0
    min_height: float = 300.0
    # Top/bottom padding + title area + attribution line
    vertical_margin: float = 200.0

    # Text block origin
    text_x: float = 100.0
    text_base_y: float = 100.0
    letter_spacing: str = "0.15em"

    # Attribution line: inset from the right edge, gap below the text block
    attribution_right_inset: float = 50.0
    attribution_offset: float = 40.0
    attribution_scale: float = 0.9

    # Quote glyph in the top-left corner
    glyph_x: float = 40.0
    glyph_y: float = 40.0
    glyph_size: float = 24.0

    # Decoration layer
    max_patterns: int = 6
    pattern_opacity: float = 0.4
    overlay_opacity: float = 0.5

    # Typography
    line_height: float = 1.5
    fixed_font_family: str = "serif-cn"
    fixed_font_size: float = 22.0

    # Text flow: usable share of the width, glyph advance in em
    content_ratio: float = 0.8
    char_width_em: float = 1.2


@dataclass(frozen=True)
class AxisPlannerConfig:
    """Thresholds for dual-axis, log-scale and nice-max decisions."""

    # A series joins the secondary axis when its range < base_range / divisor
    secondary_range_divisor: float = 5.0
    # max/min ratio of positive primary values above which the axis goes log
    log_ratio_threshold: float = 50.0
    # Headroom above the tallest point
    headroom: float = 1.1
    # (lower bound of padded max, rounding step), checked top-down
    step_ladder: tuple[tuple[float, float], ...] = field(
        default=(
            (100_000, 5_000),
            (10_000, 1_000),
            (1_000, 100),
            (100, 10),
            (10, 5),
        )
    )
