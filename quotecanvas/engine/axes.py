"""Chart axis planning — secondary-axis assignment, log-scale detection, nice maxima."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from quotecanvas.engine.config import AxisPlannerConfig
from quotecanvas.models.chart import ChartType, Series
from quotecanvas.utils.math_helpers import ceil_to_step, fmt_number

logger = logging.getLogger(__name__)

_DEFAULTS = AxisPlannerConfig()

LOG_SCALE = "logarithmic"


class AxisId(str, enum.Enum):
    PRIMARY = "y"
    SECONDARY = "y1"


@dataclass
class AxisAssignment:
    """Axis id per series, index-aligned with the series list."""

    axes: list[AxisId] = field(default_factory=list)

    @property
    def secondary_index(self) -> int | None:
        for i, axis in enumerate(self.axes):
            if axis is AxisId.SECONDARY:
                return i
        return None

    @property
    def has_secondary(self) -> bool:
        return self.secondary_index is not None

    def indices(self, axis: AxisId) -> list[int]:
        return [i for i, a in enumerate(self.axes) if a is axis]


def series_range(series: Series) -> float:
    values = series.values
    if not values:
        return 0.0
    return max(values) - min(values)


def assign_axes(
    series: Sequence[Series],
    chart_type: ChartType,
    config: AxisPlannerConfig = _DEFAULTS,
) -> AxisAssignment:
    """Move at most one small-range series to the secondary axis (line charts only)."""
    assignment = AxisAssignment(axes=[AxisId.PRIMARY] * len(series))
    if chart_type is not ChartType.LINE or len(series) < 2:
        return assignment

    ranges = [series_range(s) for s in series]
    base = max(ranges)
    threshold = base / config.secondary_range_divisor

    chosen: int | None = None
    for i, r in enumerate(ranges):
        if r < threshold and (chosen is None or r > ranges[chosen]):
            chosen = i

    if chosen is not None:
        assignment.axes[chosen] = AxisId.SECONDARY
        logger.debug(
            "Series %r (range %.3g) moved to secondary axis; base range %.3g",
            series[chosen].name,
            ranges[chosen],
            base,
        )
    return assignment


def primary_values(series: Sequence[Series], assignment: AxisAssignment) -> list[float]:
    return [v for i in assignment.indices(AxisId.PRIMARY) for v in series[i].values]


def secondary_values(series: Sequence[Series], assignment: AxisAssignment) -> list[float]:
    return [v for i in assignment.indices(AxisId.SECONDARY) for v in series[i].values]


def should_use_log(
    series: Sequence[Series],
    assignment: AxisAssignment,
    config: AxisPlannerConfig = _DEFAULTS,
) -> bool:
    positives = [v for v in primary_values(series, assignment) if v > 0]
    if not positives:
        return False
    return max(positives) / min(positives) > config.log_ratio_threshold


def nice_max(values: Sequence[float], config: AxisPlannerConfig = _DEFAULTS) -> float:
    """Axis upper bound: max plus headroom, rounded up on a magnitude-dependent step.

    Below the smallest ladder rung the unpadded maximum is rounded up to an integer.
    """
    if not values:
        return 0.0
    top = max(values)
    padded = top * config.headroom
    if not math.isfinite(padded):
        return top
    for lower_bound, step in config.step_ladder:
        if padded >= lower_bound:
            return ceil_to_step(padded, step)
    return float(math.ceil(top))


def format_tick(value: float, scale: str) -> str:
    """Tick label; log axes label exact powers of ten only."""
    if not math.isfinite(value):
        return ""
    if scale == LOG_SCALE:
        if value <= 0:
            return ""
        exponent = math.log10(value)
        if abs(exponent - round(exponent)) > 1e-9:
            return ""
        if value >= 1:
            return f"{round(value):,}"
        return fmt_number(value, precision=12)
    return fmt_number(value)
